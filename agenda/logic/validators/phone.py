"""Phone Validator"""

from agenda.config.constants import PHONE_LENGTH
from agenda.logic.validators.base import BaseValidator, ValidationError
from agenda.logic.validators.number import is_digit

# Brazilian regional dialing codes (DDD)
VALID_AREA_CODES = frozenset({
    "61", "62", "64", "65", "66", "67", "82", "71", "73",
    "74", "75", "77", "85", "88", "98", "99", "83", "81",
    "87", "86", "89", "84", "79", "68", "96", "92", "97",
    "91", "93", "94", "69", "95", "63", "27", "28", "31",
    "32", "33", "34", "35", "37", "38", "21", "22", "24",
    "11", "12", "13", "14", "15", "16", "17", "18", "19",
    "41", "42", "43", "44", "45", "46", "49", "51", "53",
    "54", "55", "47", "48",
})

# Fixed characters of the "XX 9XXXX-XXXX" layout
_SEPARATORS = {2: " ", 3: "9", 8: "-"}


def is_area_code(text: str) -> bool:
    """True if the first two characters form a known area code."""
    return text[:2] in VALID_AREA_CODES


def is_phone(text: str) -> bool:
    """
    Validate a mobile number formatted as "XX 9XXXX-XXXX".

    Args:
        text: Candidate phone number

    Returns:
        True if the layout matches and the area code is in VALID_AREA_CODES.
    """
    if len(text) != PHONE_LENGTH:
        return False
    for position, char in enumerate(text):
        expected = _SEPARATORS.get(position)
        if expected is not None:
            if char != expected:
                return False
        elif not is_digit(char):
            return False
    return is_area_code(text)


class PhoneValidator(BaseValidator):
    """Validates phone numbers."""

    error_code = ValidationError.INVALID_PHONE

    def check(self, value: str) -> bool:
        return is_phone(value)
