"""
Field Validators

Provides validation for every field type the office forms collect.
Extra validators can be added at runtime with register_validator().
"""

from typing import Optional

from agenda.logic.validators.base import BaseValidator, ValidationError
from agenda.logic.validators.text import (
    RequiredValidator,
    StringValidator,
    AlphanumericValidator,
    is_required,
    is_string,
    is_string_with_numbers,
)
from agenda.logic.validators.email import EmailValidator, is_email
from agenda.logic.validators.phone import PhoneValidator, is_phone
from agenda.logic.validators.number import (
    NumberValidator,
    PositiveValidator,
    is_number,
    is_positive,
)
from agenda.logic.validators.document import (
    NationalIdValidator,
    OrgIdValidator,
    is_national_id,
    is_org_id,
)
from agenda.logic.validators.schedule import (
    DateValidator,
    TimeValidator,
    is_date,
    is_time,
)

# Registry of built-in validators
_VALIDATORS = {
    "required": RequiredValidator(),
    "string": StringValidator(),
    "alphanumeric": AlphanumericValidator(),
    "positive": PositiveValidator(),
    "email": EmailValidator(),
    "phone": PhoneValidator(),
    "national_id": NationalIdValidator(),
    "org_id": OrgIdValidator(),
    "date": DateValidator(),
    "time": TimeValidator(),
    "number": NumberValidator(),
}


def get_validator(name: str) -> Optional[BaseValidator]:
    """Get a validator by name. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: BaseValidator):
    """Register a custom validator."""
    _VALIDATORS[name] = validator


__all__ = [
    "BaseValidator",
    "ValidationError",
    "get_validator",
    "register_validator",
    "RequiredValidator",
    "StringValidator",
    "AlphanumericValidator",
    "EmailValidator",
    "PhoneValidator",
    "NumberValidator",
    "PositiveValidator",
    "NationalIdValidator",
    "OrgIdValidator",
    "DateValidator",
    "TimeValidator",
    "is_required",
    "is_string",
    "is_string_with_numbers",
    "is_email",
    "is_phone",
    "is_number",
    "is_positive",
    "is_national_id",
    "is_org_id",
    "is_date",
    "is_time",
]
