import asyncio
from typing import Any, Literal, Optional
from langgraph.checkpoint.memory import InMemorySaver
from langgraph.graph import StateGraph, START, END

from onboarding.reducer import FormReducer
from onboarding.state import EmployeeRecord, FormState
from persistence.store import EmployeeStore


class FormGraphFactory:
    def __init__(self, reducer: FormReducer, store: EmployeeStore, submit_delay: float = 1.5):
        self.reducer = reducer
        self.store = store
        self.submit_delay = submit_delay

    @staticmethod
    def route_after_reduce(state: FormState) -> Literal["persist", "end"]:
        """
        Only the submit that moved the form into submitting is persisted.
        A submit ignored while another is pending, or any other action, ends here.
        """
        return "persist" if state.submit_accepted else "end"

    async def persist(self, state: FormState) -> FormState:
        # simulated submission latency, never cancelled
        await asyncio.sleep(self.submit_delay)

        saved = await asyncio.to_thread(self.store.append, state.record)

        return state.model_copy(
            update={
                "record": EmployeeRecord(),
                "current_step": 1,
                "errors": {},
                "is_submitting": False,
                "submit_accepted": False,
                "submit_success": True,
                "saved_count": len(saved),
            }
        )

    def build(self) -> StateGraph:
        g = StateGraph(FormState)

        g.add_node("reduce", self.reducer.reduce)
        g.add_node("persist", self.persist)

        g.add_edge(START, "reduce")
        g.add_conditional_edges(
            "reduce",
            self.route_after_reduce,
            {"end": END, "persist": "persist"},
        )
        g.add_edge("persist", END)

        return g

    def compile(self, checkpointer: Optional[Any] = None):
        return self.build().compile(checkpointer=checkpointer or InMemorySaver())
