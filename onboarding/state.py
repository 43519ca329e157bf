from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


DESIGNATIONS: Dict[str, str] = {
    "ASM": "Assistant Section Manager",
    "SM": "Section Manager",
    "CSM": "Customer Service Manager",
    "TL": "Team Lead",
    "SE": "Senior Executive",
    "E": "Executive",
    "JE": "Junior Executive",
}

DEPARTMENTS = ("Sales", "Marketing", "IT", "HR", "Finance", "Operations", "Support")

DEFAULT_DESIGNATION = "ASM"
DEFAULT_DEPARTMENT = "Sales"


class EmployeeRecord(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # step 1
    employee_name: str = Field(default="", description="Full name")
    employee_address: str = Field(default="", description="Complete address")
    employee_phone: str = Field(default="", description="10 digit phone number")
    employee_email: str = Field(default="", description="Email address")
    date_of_birth: str = Field(default="", description="YYYY-MM-DD")

    # step 2
    designation: str = Field(default=DEFAULT_DESIGNATION, description="One of DESIGNATIONS")
    department: str = Field(default=DEFAULT_DEPARTMENT, description="One of DEPARTMENTS")
    date_of_joining: str = Field(default="", description="YYYY-MM-DD")

    # step 3
    bank_name: str = Field(default="", description="Bank name")
    bank_account_number: str = Field(default="", description="9-18 digit account number")
    ifsc_code: str = Field(default="", description="Indian bank branch code, e.g. SBIN0001234")
    pan_number: str = Field(default="", description="Permanent Account Number")
    aadhar_number: str = Field(default="", description="12 digit Aadhar number")

    # step 4
    emergency_contact_name: str = Field(default="", description="Emergency contact name")
    emergency_contact_relationship: str = Field(default="", description="e.g. Spouse, Parent, Sibling")
    emergency_contact_phone: str = Field(default="", description="10 digit phone number")

    @classmethod
    def field_name(cls, key: str) -> Optional[str]:
        """
        Resolve an attribute name or its camelCase JSON name to the attribute
        name. Returns None for unknown keys.
        """
        if key in cls.model_fields:
            return key
        for name, info in cls.model_fields.items():
            if info.alias == key:
                return name
        return None

    def with_changes(self, **values: str) -> "EmployeeRecord":
        return self.model_copy(update=values)

    def to_json_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


FIELD_NAMES = tuple(EmployeeRecord.model_fields)

ErrorMap = Dict[str, str]

ActionKind = Literal[
    "change", "next", "previous", "reset", "submit", "submit_failed", "dismiss_success"
]


class FormAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    changes: Dict[str, str] = Field(default_factory=dict)

    @field_validator("changes", mode="before")
    @classmethod
    def resolve_field_names(cls, v: Any) -> Dict[str, str]:
        if v is None:
            return {}
        resolved: Dict[str, str] = {}
        for key, value in dict(v).items():
            name = EmployeeRecord.field_name(key)
            if name is None:
                raise ValueError(f"Unknown employee field: {key}")
            resolved[name] = "" if value is None else str(value)

        # the form only offers these as select options; blank still reaches the required check
        if resolved.get("designation") and resolved["designation"] not in DESIGNATIONS:
            raise ValueError(f"designation must be one of {tuple(DESIGNATIONS)}")
        if resolved.get("department") and resolved["department"] not in DEPARTMENTS:
            raise ValueError(f"department must be one of {DEPARTMENTS}")
        return resolved


class FormState(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_step: int = Field(default=1, ge=1, le=4)
    record: EmployeeRecord = Field(default_factory=EmployeeRecord)
    errors: ErrorMap = Field(default_factory=dict)
    is_submitting: bool = False
    submit_accepted: bool = Field(
        default=False, description="Set only by the step whose submit passed validation"
    )
    submit_success: bool = False
    saved_count: int = Field(default=0, ge=0)

    action: Optional[FormAction] = Field(default=None, description="Last dispatched action")
