"""Number Validators"""

import re
from typing import Optional

from agenda.logic.validators.base import BaseValidator, ValidationError

_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+")


def parse_int(text: str) -> Optional[int]:
    """
    Parse a whole string as a base-10 integer.

    Leading whitespace and a sign are accepted; any other character makes
    the parse fail.

    Returns:
        The integer, or None if the text is not an integer.
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_number(text: str) -> bool:
    """True if every character is an ASCII digit. Empty text passes."""
    return all(is_digit(char) for char in text)


def is_positive(number: int) -> bool:
    """True if number is zero or greater."""
    return number >= 0


class PositiveValidator(BaseValidator):
    """Validates that a field holds a non-negative integer."""

    error_code = ValidationError.NOT_POSITIVE

    def check(self, value: str) -> bool:
        number = parse_int(value)
        if number is None:
            return False
        return is_positive(number)


class NumberValidator(BaseValidator):
    """Validates that a field holds digits only."""

    error_code = ValidationError.INVALID_NUMBER

    def check(self, value: str) -> bool:
        return is_number(value)
