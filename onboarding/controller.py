import asyncio
import logging
from typing import Any, Dict, List, Optional
from langchain_core.runnables import RunnableConfig

from config.settings import OnboardingSettings
from onboarding.graph import FormGraphFactory
from onboarding.reducer import FormReducer
from onboarding.state import EmployeeRecord, FormAction, FormState
from onboarding.validator import EmployeeValidator
from persistence.factory import build_store
from persistence.store import EmployeeStore

logger = logging.getLogger(__name__)


class FormController:
    """
    Drives one onboarding session through the compiled form graph.

    Navigation runs synchronously; submit is awaited because the persist
    node simulates submission latency. Session state lives in the graph's
    checkpointer under this controller's thread_id.
    """

    def __init__(
        self,
        graph: Any,
        store: EmployeeStore,
        session_id: str = "onboarding",
        success_display: float = 5.0,
    ):
        self.graph = graph
        self.store = store
        self.success_display = success_display
        self.config: RunnableConfig = {"configurable": {"thread_id": session_id}}

        self._initial_saved_count = len(store.load())
        self._success_task: Optional[asyncio.Future] = None

    @classmethod
    def from_settings(
        cls,
        settings: OnboardingSettings,
        store: Optional[EmployeeStore] = None,
        validator: Optional[EmployeeValidator] = None,
        session_id: str = "onboarding",
    ) -> "FormController":
        store = store or build_store(settings)
        reducer = FormReducer(validator or EmployeeValidator())
        factory = FormGraphFactory(reducer, store, submit_delay=settings.submit_delay_seconds)
        return cls(
            factory.compile(),
            store,
            session_id=session_id,
            success_display=settings.success_display_seconds,
        )

    @property
    def state(self) -> FormState:
        values = self.graph.get_state(self.config).values
        if not values:
            return FormState(saved_count=self._initial_saved_count)
        return FormState.model_validate(values)

    def _payload(self, action: FormAction) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"action": action}
        # first action of the session seeds the stored count
        if not self.graph.get_state(self.config).values:
            payload["saved_count"] = self._initial_saved_count
        return payload

    def dispatch(self, action: FormAction) -> FormState:
        if action.kind == "submit":
            raise ValueError("submit must be awaited through FormController.submit()")
        result = self.graph.invoke(self._payload(action), self.config)
        return FormState.model_validate(result)

    def change(self, **values: str) -> FormState:
        return self.dispatch(FormAction(kind="change", changes=values))

    def next_step(self) -> FormState:
        step = self.state.current_step
        state = self.dispatch(FormAction(kind="next"))
        if state.current_step == step and state.errors:
            logger.info("Step %d blocked: %s", step, ", ".join(sorted(state.errors)))
        return state

    def previous_step(self) -> FormState:
        return self.dispatch(FormAction(kind="previous"))

    def reset(self) -> FormState:
        return self.dispatch(FormAction(kind="reset"))

    async def submit(self) -> FormState:
        self._finish_pending_dismissal()
        before = self.state
        try:
            result = await self.graph.ainvoke(self._payload(FormAction(kind="submit")), self.config)
        except Exception:
            logger.exception("Submission failed, unlocking the form")
            self.dispatch(FormAction(kind="submit_failed"))
            raise
        state = FormState.model_validate(result)

        if state.saved_count > before.saved_count:
            logger.info("Employee registered, %d record(s) stored", state.saved_count)
            self._success_task = asyncio.ensure_future(asyncio.sleep(self.success_display))
            self._success_task.add_done_callback(self._dismiss_success)
        elif state.is_submitting:
            logger.info("Submit ignored, another submission is pending")
        elif state.errors:
            logger.info("Submit blocked: %s", ", ".join(sorted(state.errors)))
        else:
            logger.debug("Submit ignored on step %d", state.current_step)
        return state

    def _finish_pending_dismissal(self) -> None:
        # a new submission replaces the previous success message
        task, self._success_task = self._success_task, None
        if task is not None:
            task.cancel()
            self.dispatch(FormAction(kind="dismiss_success"))

    def _dismiss_success(self, timer: asyncio.Future) -> None:
        # also fires when the loop shuts down and cancels the timer;
        # a timer replaced by a newer submission is no longer ours
        if timer is self._success_task:
            self._success_task = None
            self.dispatch(FormAction(kind="dismiss_success"))

    async def wait_for_success_dismissal(self) -> FormState:
        task = self._success_task
        if task is not None:
            await task
        return self.state

    def saved_employees(self) -> List[EmployeeRecord]:
        return self.store.load()
