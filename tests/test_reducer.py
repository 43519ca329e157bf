import pytest
from pydantic import ValidationError

from onboarding.reducer import FormReducer
from onboarding.state import EmployeeRecord, FormAction, FormState
from onboarding.steps import STEP_FIELDS, TOTAL_STEPS


@pytest.fixture
def reducer(validator):
    return FormReducer(validator)


def act(reducer, state, kind, **changes):
    return reducer.apply(state, FormAction(kind=kind, changes=changes))


def test_blank_form_defaults():
    state = FormState()

    assert state.current_step == 1
    assert state.record.designation == "ASM"
    assert state.record.department == "Sales"
    assert state.errors == {}


def test_change_returns_new_record(reducer):
    state = FormState()

    new = act(reducer, state, "change", employee_name="Khushi")

    assert new.record.employee_name == "Khushi"
    assert state.record.employee_name == ""


def test_change_accepts_json_names(reducer):
    new = act(reducer, FormState(), "change", employeeName="Khushi")

    assert new.record.employee_name == "Khushi"


def test_unknown_field_is_rejected():
    with pytest.raises(ValidationError):
        FormAction(kind="change", changes={"salary": "1"})


def test_ifsc_and_pan_uppercased_as_typed(reducer):
    new = act(reducer, FormState(), "change", ifsc_code="sbin0001234", pan_number="abcde1234f")

    assert new.record.ifsc_code == "SBIN0001234"
    assert new.record.pan_number == "ABCDE1234F"


def test_next_blocked_by_step_errors(reducer):
    state = act(reducer, FormState(), "next")

    assert state.current_step == 1
    assert set(state.errors) == set(STEP_FIELDS[1])


def test_typing_clears_that_fields_error(reducer):
    state = act(reducer, FormState(), "next")

    state = act(reducer, state, "change", employee_name="Khushi")

    assert "employee_name" not in state.errors
    assert "employee_phone" in state.errors


def test_next_advances_and_clamps(reducer, valid_record):
    state = FormState(record=valid_record)

    for expected in (2, 3, 4, 4):
        state = act(reducer, state, "next")
        assert state.current_step == expected
        assert state.errors == {}


def test_previous_clamps_and_clears_errors(reducer):
    state = FormState(current_step=2, errors={"date_of_joining": "Date of joining is required"})

    state = act(reducer, state, "previous")
    assert state.current_step == 1
    assert state.errors == {}

    state = act(reducer, state, "previous")
    assert state.current_step == 1


def test_reset(reducer, valid_record):
    state = FormState(current_step=3, record=valid_record, errors={"x": "y"}, submit_success=True)

    state = act(reducer, state, "reset")

    assert state.current_step == 1
    assert state.record == EmployeeRecord()
    assert state.errors == {}
    assert state.submit_success is False


def test_submit_only_from_last_step(reducer, valid_record):
    state = FormState(current_step=2, record=valid_record)

    assert act(reducer, state, "submit").is_submitting is False


def test_invalid_submit_reports_full_error_map(reducer, valid_record):
    state = FormState(current_step=TOTAL_STEPS, record=valid_record.with_changes(employee_phone="", pan_number="X"))

    state = act(reducer, state, "submit")

    assert state.is_submitting is False
    assert state.errors == {
        "employee_phone": "Phone number is required",
        "pan_number": "Invalid PAN number format",
    }


def test_valid_submit_marks_submitting(reducer, valid_record):
    state = act(reducer, FormState(current_step=TOTAL_STEPS, record=valid_record), "submit")

    assert state.is_submitting is True
    assert state.errors == {}
    assert state.record == valid_record


def test_submit_ignored_while_pending(reducer, valid_record):
    state = FormState(current_step=TOTAL_STEPS, record=valid_record, is_submitting=True, errors={"a": "b"})

    assert act(reducer, state, "submit").errors == {"a": "b"}


def test_reduce_node_without_action_is_noop(reducer):
    state = FormState()

    assert reducer.reduce(state) is state


def test_dismiss_success(reducer):
    state = act(reducer, FormState(submit_success=True), "dismiss_success")

    assert state.submit_success is False


@pytest.mark.parametrize("kind", ["change", "next", "previous", "reset", "submit"])
def test_form_locked_while_submitting(reducer, valid_record, kind):
    state = FormState(current_step=TOTAL_STEPS, record=valid_record, is_submitting=True)

    new = reducer.apply(state, FormAction(kind=kind, changes={"employee_name": "Mid"} if kind == "change" else {}))

    assert new.record == valid_record
    assert new.current_step == TOTAL_STEPS
    assert new.is_submitting is True
    assert new.submit_accepted is False


def test_only_the_accepting_submit_is_flagged(reducer, valid_record):
    state = act(reducer, FormState(current_step=TOTAL_STEPS, record=valid_record), "submit")
    assert state.submit_accepted is True

    again = act(reducer, state, "submit")
    assert again.is_submitting is True
    assert again.submit_accepted is False


def test_submit_failed_unlocks_and_keeps_record(reducer, valid_record):
    state = FormState(current_step=TOTAL_STEPS, record=valid_record, is_submitting=True, submit_accepted=True)

    state = act(reducer, state, "submit_failed")

    assert state.is_submitting is False
    assert state.submit_accepted is False
    assert state.record == valid_record
    assert act(reducer, state, "previous").current_step == TOTAL_STEPS - 1


@pytest.mark.parametrize("changes", [{"designation": "CEO"}, {"department": "Legal"}])
def test_choice_fields_only_accept_offered_options(changes):
    with pytest.raises(ValidationError):
        FormAction(kind="change", changes=changes)


def test_choice_fields_accept_options_and_blank(reducer):
    state = act(reducer, FormState(), "change", designation="JE", department="Support")
    assert (state.record.designation, state.record.department) == ("JE", "Support")

    state = act(reducer, state, "change", designation="")
    assert act(reducer, state, "next").errors.get("designation") is None
    assert reducer.validator.validate_step(state.record, 2)["designation"] == "Designation is required"
