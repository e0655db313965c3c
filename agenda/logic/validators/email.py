"""Email Validator"""

from agenda.logic.validators.base import BaseValidator, ValidationError


def is_email(text: str) -> bool:
    """
    Loose e-mail check on the rightmost "@" and the rightmost ".".

    The "@" must not be the first character, at least one character must
    separate it from the ".", and the "." must not be the last character.
    Repeated "@" signs are not rejected.
    """
    at_pos = text.rfind("@")
    dot_pos = text.rfind(".")
    return at_pos > 0 and dot_pos > at_pos + 1 and dot_pos < len(text) - 1


class EmailValidator(BaseValidator):
    """Validates email addresses."""

    error_code = ValidationError.INVALID_EMAIL

    def check(self, value: str) -> bool:
        return is_email(value)
