"""
Document Validators

National taxpayer ID (CPF) and bar registration number (CNA).
"""

from agenda.config.constants import NATIONAL_ID_LENGTH, ORG_ID_MAX_DIGITS
from agenda.logic.validators.base import BaseValidator, ValidationError
from agenda.logic.validators.number import is_number


def _check_digit(digits, weight: int) -> int:
    total = sum(digit * (weight - i) for i, digit in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_national_id_checksum_valid(text: str) -> bool:
    """
    Run both weighted-checksum rounds over an 11-digit CPF.

    Round one weighs the first nine digits 10..2 and must yield the tenth
    digit; round two weighs the first ten digits 11..2 and must yield the
    eleventh.
    """
    digits = [int(char) for char in text]
    if _check_digit(digits[:9], 10) != digits[9]:
        return False
    return _check_digit(digits[:10], 11) == digits[10]


def is_national_id(text: str) -> bool:
    """True if text is exactly 11 digits with valid check digits."""
    if len(text) != NATIONAL_ID_LENGTH or not is_number(text):
        return False
    return is_national_id_checksum_valid(text)


def is_org_id(text: str) -> bool:
    """True if text is 1 to 12 digits."""
    if not text or len(text) > ORG_ID_MAX_DIGITS:
        return False
    return is_number(text)


class NationalIdValidator(BaseValidator):
    """Validates CPF numbers (digits only, no punctuation)."""

    error_code = ValidationError.INVALID_NATIONAL_ID

    def check(self, value: str) -> bool:
        return is_national_id(value)


class OrgIdValidator(BaseValidator):
    """Validates CNA registration numbers."""

    error_code = ValidationError.INVALID_ORG_ID

    def check(self, value: str) -> bool:
        return is_org_id(value)
