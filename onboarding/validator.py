from datetime import date
from typing import Callable, Dict, Mapping, NamedTuple, Optional, Union

from onboarding import rules
from onboarding.state import FIELD_NAMES, EmployeeRecord, ErrorMap
from onboarding.steps import STEP_FIELDS, check_step


class FieldRule(NamedTuple):
    required_message: str
    predicate: Optional[Callable[[str], bool]] = None
    format_message: Optional[str] = None


RecordLike = Union[EmployeeRecord, Mapping[str, Optional[str]]]


class EmployeeValidator:
    def __init__(self, today_provider: Optional[Callable[[], date]] = None):
        self.today_provider = today_provider or date.today
        self.field_rules: Dict[str, FieldRule] = {
            "employee_name": FieldRule("Employee name is required"),
            "employee_address": FieldRule("Employee address is required"),
            "employee_phone": FieldRule(
                "Phone number is required",
                rules.validate_phone_number,
                "Phone number must be 10 digits",
            ),
            "employee_email": FieldRule(
                "Email is required",
                rules.validate_email,
                "Invalid email format",
            ),
            "date_of_birth": FieldRule(
                "Date of birth is required",
                self._date_of_birth_ok,
                "Employee must be at least 18 years old",
            ),
            "designation": FieldRule("Designation is required"),
            "department": FieldRule("Department is required"),
            "date_of_joining": FieldRule("Date of joining is required"),
            "bank_name": FieldRule("Bank name is required"),
            "bank_account_number": FieldRule(
                "Bank account number is required",
                rules.validate_bank_account_number,
                "Invalid bank account number (9-18 digits)",
            ),
            "ifsc_code": FieldRule(
                "IFSC code is required",
                rules.validate_ifsc_code,
                "Invalid IFSC code format",
            ),
            "pan_number": FieldRule(
                "PAN number is required",
                rules.validate_pan_number,
                "Invalid PAN number format",
            ),
            "aadhar_number": FieldRule(
                "Aadhar number is required",
                rules.validate_aadhar_number,
                "Aadhar number must be 12 digits",
            ),
            "emergency_contact_name": FieldRule("Emergency contact name is required"),
            "emergency_contact_relationship": FieldRule("Relationship is required"),
            "emergency_contact_phone": FieldRule(
                "Emergency contact phone is required",
                rules.validate_phone_number,
                "Phone number must be 10 digits",
            ),
        }

    def _date_of_birth_ok(self, value: str) -> bool:
        return rules.validate_date_of_birth(value, today=self.today_provider())

    @staticmethod
    def _values(record: RecordLike) -> Dict[str, str]:
        """
        Flatten a record or a (possibly partial) mapping into attribute-name
        keyed strings. Missing or unknown keys count as blank.
        """
        if isinstance(record, EmployeeRecord):
            return record.model_dump()

        values = {name: "" for name in FIELD_NAMES}
        for key, value in record.items():
            name = EmployeeRecord.field_name(key)
            if name is not None:
                values[name] = value if isinstance(value, str) else ("" if value is None else str(value))
        return values

    def check_field(self, name: str, value: str) -> Optional[str]:
        rule = self.field_rules[name]
        if value.strip() == "":
            return rule.required_message
        if rule.predicate is not None and not rule.predicate(value):
            return rule.format_message
        return None

    def validate_form(self, record: RecordLike) -> ErrorMap:
        values = self._values(record)
        errors: ErrorMap = {}

        for name in FIELD_NAMES:
            message = self.check_field(name, values[name])
            if message is not None:
                errors[name] = message

        return errors

    def validate_step(self, record: RecordLike, step: int) -> ErrorMap:
        fields = STEP_FIELDS[check_step(step)]
        errors = self.validate_form(record)
        return {name: msg for name, msg in errors.items() if name in fields}
