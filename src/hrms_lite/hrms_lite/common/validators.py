from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from email_validator import EmailNotValidError, validate_email

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value, field_name: str) -> str:
    """Text field from a JSON body. Integers are accepted as their decimal form."""
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(f"{field_name} must be a string")
    return str(value).strip()


def require_email(value: str, field_name: str = "email") -> str:
    value = require_non_empty(value, field_name)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError(f"{field_name} is not a valid email address")
    return value


def require_choice(value, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Invalid {field_name}. Expected one of: {allowed}")
