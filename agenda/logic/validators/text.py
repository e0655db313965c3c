"""Text Validators"""

import string

from agenda.logic.validators.base import BaseValidator, ValidationError

# Accented letters of Brazilian Portuguese, both cases.
ACCENTED_CHARACTERS = frozenset("áàâãäéèêëíìîïóòôõöúùûüçñÁÀÂÃÄÉÈÊËÍÌÎÏÓÒÔÕÖÚÙÛÜÇÑ")

_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_DIGITS = frozenset(string.digits)


def is_empty(text: str) -> bool:
    return text == ""


def is_required(text: str) -> bool:
    """True if the text is non-empty."""
    return not is_empty(text)


def is_accented_char(char: str) -> bool:
    return char in ACCENTED_CHARACTERS


def count_accents(text: str) -> int:
    """Number of accented letters in text."""
    return sum(1 for char in text if is_accented_char(char))


def has_invalid_spaces(text: str) -> bool:
    """
    True if text starts or ends with a space or holds two spaces in a row.
    """
    if not text:
        return False
    return text[0] == " " or text[-1] == " " or "  " in text


def is_string(text: str) -> bool:
    """
    True if text holds only letters (accented included) and single
    interior spaces. The empty string is accepted; pair with required.
    """
    if has_invalid_spaces(text):
        return False
    for char in text:
        if not (char in _ASCII_LETTERS or char == " " or is_accented_char(char)):
            return False
    return True


def is_string_with_numbers(text: str) -> bool:
    """Like is_string() but digits are allowed too."""
    if has_invalid_spaces(text):
        return False
    for char in text:
        if not (
            char in _ASCII_LETTERS
            or char in _ASCII_DIGITS
            or char == " "
            or is_accented_char(char)
        ):
            return False
    return True


class RequiredValidator(BaseValidator):
    """Rejects empty values."""

    error_code = ValidationError.MISSING_REQUIRED

    def check(self, value: str) -> bool:
        return is_required(value)


class StringValidator(BaseValidator):
    """Validates names and other purely alphabetic text."""

    error_code = ValidationError.INVALID_STRING

    def check(self, value: str) -> bool:
        return is_string(value)


class AlphanumericValidator(BaseValidator):
    """Validates free text such as addresses, letters and digits only."""

    error_code = ValidationError.INVALID_STRING

    def check(self, value: str) -> bool:
        return is_string_with_numbers(value)
