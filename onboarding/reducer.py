from onboarding.state import EmployeeRecord, FormAction, FormState
from onboarding.steps import TOTAL_STEPS
from onboarding.validator import EmployeeValidator

# typed in upper case, as the form does
UPPERCASE_FIELDS = {"ifsc_code", "pan_number"}

UNLOCKED_WHILE_SUBMITTING = {"submit_failed", "dismiss_success"}


class FormReducer:
    """
    Pure (state, action) -> state transitions for the four step form.
    Nothing here touches storage; a valid submit only raises is_submitting
    and leaves persisting to the graph's persist node.
    """

    def __init__(self, validator: EmployeeValidator):
        self.validator = validator

    def reduce(self, state: FormState) -> FormState:
        """Graph node: apply the action carried on the state."""
        if state.action is None:
            return state
        return self.apply(state, state.action)

    def apply(self, state: FormState, action: FormAction) -> FormState:
        # the form is locked while a submission is pending
        if state.is_submitting and action.kind not in UNLOCKED_WHILE_SUBMITTING:
            handler = self._ignore
        else:
            handler = getattr(self, f"_on_{action.kind}")
        new = handler(state, action)
        accepted = new.is_submitting and not state.is_submitting
        return new.model_copy(update={"action": action, "submit_accepted": accepted})

    def _ignore(self, state: FormState, action: FormAction) -> FormState:
        return state

    def _on_change(self, state: FormState, action: FormAction) -> FormState:
        changes = {
            name: value.upper() if name in UPPERCASE_FIELDS else value
            for name, value in action.changes.items()
        }
        errors = {k: v for k, v in state.errors.items() if k not in changes}
        return state.model_copy(
            update={"record": state.record.with_changes(**changes), "errors": errors}
        )

    def _on_next(self, state: FormState, action: FormAction) -> FormState:
        step_errors = self.validator.validate_step(state.record, state.current_step)
        if step_errors:
            return state.model_copy(update={"errors": step_errors})
        return state.model_copy(
            update={"errors": {}, "current_step": min(state.current_step + 1, TOTAL_STEPS)}
        )

    def _on_previous(self, state: FormState, action: FormAction) -> FormState:
        return state.model_copy(
            update={"errors": {}, "current_step": max(state.current_step - 1, 1)}
        )

    def _on_reset(self, state: FormState, action: FormAction) -> FormState:
        return state.model_copy(
            update={
                "record": EmployeeRecord(),
                "errors": {},
                "current_step": 1,
                "submit_success": False,
            }
        )

    def _on_submit(self, state: FormState, action: FormAction) -> FormState:
        # only the last step offers Submit, and it is disabled while pending
        if state.current_step != TOTAL_STEPS or state.is_submitting:
            return state

        errors = self.validator.validate_form(state.record)
        if errors:
            return state.model_copy(update={"errors": errors})
        return state.model_copy(update={"errors": {}, "is_submitting": True})

    def _on_submit_failed(self, state: FormState, action: FormAction) -> FormState:
        # unlock and keep the record so the user can submit again
        return state.model_copy(update={"is_submitting": False})

    def _on_dismiss_success(self, state: FormState, action: FormAction) -> FormState:
        return state.model_copy(update={"submit_success": False})
