import asyncio
import logging

from config.settings import OnboardingSettings
from onboarding.controller import FormController
from onboarding.state import DEPARTMENTS, DESIGNATIONS
from onboarding.steps import STEP_TITLES, step_heading, step_progress


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def main():
    patches = [
        {"employee_name": "Khushi", "employee_phone": "99999", "employee_email": "khushi@gmail.com"},
        {"employee_phone": "99999-99999", "date_of_birth": "2004-01-01", "employee_address": "12 MG Road, Pune"},
        {"designation": "TL", "department": "IT", "date_of_joining": "2026-02-01"},
        {
            "bank_name": "State Bank of India",
            "bank_account_number": "123456789012",
            "ifsc_code": "sbin0001234",
            "pan_number": "abcde1234f",
            "aadhar_number": "1234 5678 9012",
        },
        {
            "emergency_contact_name": "Asha",
            "emergency_contact_relationship": "Parent",
            "emergency_contact_phone": "8888888888",
        },
    ]

    settings = OnboardingSettings.from_env()
    configure_logging(settings.log_level)

    controller = FormController.from_settings(settings, session_id="onboarding_demo_1")

    print("designations:", ", ".join(f"{code} ({label})" for code, label in DESIGNATIONS.items()))
    print("departments:", ", ".join(DEPARTMENTS))

    for i, patch in enumerate(patches, 1):
        state = controller.change(**patch)
        print(f"\nPATCH #{i} on {STEP_TITLES[state.current_step]} ({step_heading(state.current_step)})")
        print("  ".join(f"[{label}: {status}]" for _, label, status in step_progress(state.current_step)))

        if state.current_step < 4:
            state = controller.next_step()
            if state.errors:
                print("blocked:", state.errors)

    state = await controller.submit()
    print("\nsubmitted, errors:", state.errors)
    print("success shown:", state.submit_success)
    print("back on step:", state.current_step)

    state = await controller.wait_for_success_dismissal()
    print("success shown after display time:", state.submit_success)

    print(f"\nStored employee count: {len(controller.saved_employees())}")


if __name__ == "__main__":
    asyncio.run(main())
