from typing import Dict, List, Optional, Tuple


TOTAL_STEPS = 4

STEP_FIELDS: Dict[int, Tuple[str, ...]] = {
    1: ("employee_name", "employee_address", "employee_phone", "employee_email", "date_of_birth"),
    2: ("designation", "department", "date_of_joining"),
    3: ("bank_name", "bank_account_number", "ifsc_code", "pan_number", "aadhar_number"),
    4: ("emergency_contact_name", "emergency_contact_relationship", "emergency_contact_phone"),
}

STEP_LABELS = {1: "Personal", 2: "Professional", 3: "Bank", 4: "Emergency"}

STEP_TITLES = {
    1: "Personal Information",
    2: "Professional Information",
    3: "Bank Information",
    4: "Emergency Contact",
}

STEP_DESCRIPTIONS = {
    1: "Please provide your personal details",
    2: "Tell us about your professional background",
    3: "Add your bank account details",
    4: "Provide emergency contact information",
}


def check_step(step: int) -> int:
    if step not in STEP_FIELDS:
        raise ValueError(f"step must be between 1 and {TOTAL_STEPS}, got {step!r}")
    return step


def step_heading(step: int) -> str:
    check_step(step)
    return f"Step {step} of {TOTAL_STEPS} • {STEP_DESCRIPTIONS[step]}"


def step_for_field(name: str) -> Optional[int]:
    for step, fields in STEP_FIELDS.items():
        if name in fields:
            return step
    return None


def step_progress(current_step: int) -> List[Tuple[int, str, str]]:
    """(step, label, status) for the step indicator; status is done, current or upcoming."""
    check_step(current_step)
    progress = []
    for step in sorted(STEP_LABELS):
        if step < current_step:
            status = "done"
        elif step == current_step:
            status = "current"
        else:
            status = "upcoming"
        progress.append((step, STEP_LABELS[step], status))
    return progress
