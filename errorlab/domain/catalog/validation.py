"""
Collect-all field validator for the validation error category.

Every rule runs against the submitted record and all violations are
reported together. A record that passes every rule still yields one
placeholder violation so the simulated error response is never empty.
"""

import re
from typing import Any, Mapping

from errorlab.domain.catalog.entities import FieldViolation

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[0-9\s\-()]{7,20}$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")

PASSWORD_MIN_LENGTH = 8
USERNAME_MIN_LENGTH = 3
AGE_MIN = 13
AGE_MAX = 120

PLACEHOLDER_VIOLATION = FieldViolation(
    field="demo",
    message="All fields passed validation; this violation is injected for demo purposes",
)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_email(value: Any) -> str | None:
    if _is_blank(value):
        return "Email is required"
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        return "Email must be a valid email address"
    return None


def _check_password(value: Any) -> str | None:
    if _is_blank(value):
        return "Password is required"
    if not isinstance(value, str) or len(value) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
    return None


def _check_username(value: Any) -> str | None:
    if _is_blank(value):
        return "Username is required"
    if not isinstance(value, str) or len(value) < USERNAME_MIN_LENGTH:
        return f"Username must be at least {USERNAME_MIN_LENGTH} characters"
    if not USERNAME_PATTERN.match(value):
        return "Username may only contain letters, digits and underscores"
    return None


def _check_age(value: Any) -> str | None:
    if _is_blank(value):
        return None
    # bool is an int subclass
    if isinstance(value, bool):
        return "Age must be a number"
    out_of_range = f"Age must be a whole number between {AGE_MIN} and {AGE_MAX}"
    if isinstance(value, int):
        return None if AGE_MIN <= value <= AGE_MAX else out_of_range
    try:
        age = float(value)
    except (TypeError, ValueError, OverflowError):
        return "Age must be a number"
    if not age.is_integer() or not AGE_MIN <= age <= AGE_MAX:
        return out_of_range
    return None


def _check_phone(value: Any) -> str | None:
    if _is_blank(value):
        return None
    if not isinstance(value, str) or not PHONE_PATTERN.match(value):
        return "Phone must be a valid phone number"
    return None


RULES = (
    ("email", _check_email),
    ("password", _check_password),
    ("age", _check_age),
    ("phone", _check_phone),
    ("username", _check_username),
)


def collect_violations(record: Mapping[str, Any]) -> list[FieldViolation]:
    """Run every field rule and return all violations found.

    Never returns an empty list: a fully valid record yields the
    placeholder violation.
    """
    violations = []
    for field_name, rule in RULES:
        message = rule(record.get(field_name))
        if message is not None:
            violations.append(FieldViolation(field=field_name, message=message))

    if not violations:
        violations.append(PLACEHOLDER_VIOLATION)
    return violations
