"""
Field format predicates for employee onboarding.

Every predicate takes the raw string typed into the form and returns a bool.
They never raise: None, blank or garbage input is simply invalid.
"""
import re
from datetime import date, datetime
from typing import Optional

MINIMUM_AGE = 18
DATE_FORMAT = "%Y-%m-%d"
ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^[0-9]{10}$")
AADHAR_RE = re.compile(r"^[0-9]{12}$")
BANK_ACCOUNT_RE = re.compile(r"^[0-9]{9,18}$")
IFSC_RE = re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$")
PAN_RE = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")

_NON_DIGITS = re.compile(r"\D")


def digits_only(value: Optional[str]) -> str:
    return _NON_DIGITS.sub("", value or "")


def validate_email(email: Optional[str]) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def validate_phone_number(phone: Optional[str]) -> bool:
    return bool(PHONE_RE.match(digits_only(phone)))


def validate_aadhar_number(aadhar: Optional[str]) -> bool:
    return bool(AADHAR_RE.match(digits_only(aadhar)))


def validate_bank_account_number(account_number: Optional[str]) -> bool:
    return bool(BANK_ACCOUNT_RE.match(digits_only(account_number)))


def validate_ifsc_code(ifsc: Optional[str]) -> bool:
    return bool(IFSC_RE.match((ifsc or "").upper()))


def validate_pan_number(pan: Optional[str]) -> bool:
    return bool(PAN_RE.match((pan or "").upper()))


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD form value, None when it is not a real date."""
    value = (value or "").strip()
    if not ISO_DATE_RE.match(value):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def calculate_age(birth_date: date, today: date) -> int:
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def validate_date_of_birth(dob: Optional[str], today: Optional[date] = None) -> bool:
    birth_date = parse_date(dob)
    if birth_date is None:
        return False
    return calculate_age(birth_date, today or date.today()) >= MINIMUM_AGE
