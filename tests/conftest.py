from datetime import date

import pytest

from onboarding.state import EmployeeRecord
from onboarding.validator import EmployeeValidator
from persistence.store import EmployeeStore, MemorySlots


VALID_FIELDS = {
    "employee_name": "Khushi Kaushik",
    "employee_address": "12 MG Road, Pune",
    "employee_phone": "9999999999",
    "employee_email": "khushi@gmail.com",
    "date_of_birth": "2004-01-01",
    "designation": "TL",
    "department": "IT",
    "date_of_joining": "2026-02-01",
    "bank_name": "State Bank of India",
    "bank_account_number": "123456789012",
    "ifsc_code": "SBIN0001234",
    "pan_number": "ABCDE1234F",
    "aadhar_number": "123456789012",
    "emergency_contact_name": "Asha Kaushik",
    "emergency_contact_relationship": "Parent",
    "emergency_contact_phone": "8888888888",
}


@pytest.fixture
def validator():
    return EmployeeValidator(today_provider=lambda: date(2026, 1, 15))


@pytest.fixture
def valid_fields():
    return dict(VALID_FIELDS)


@pytest.fixture
def valid_record():
    return EmployeeRecord(**VALID_FIELDS)


@pytest.fixture
def memory_store():
    return EmployeeStore(MemorySlots())
