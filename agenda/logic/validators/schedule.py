"""
Date and Time Validators

Dates use the DD/MM/YYYY layout and times the 24-hour HH:MM layout.
"""

from datetime import date, time
from typing import Optional

from agenda.config.constants import DATE_LENGTH, TIME_LENGTH
from agenda.logic.validators.base import BaseValidator, ValidationError
from agenda.logic.validators.number import is_digit, parse_int

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def max_days_in_month(month: int, year: int) -> int:
    """
    Number of days in a month, or 0 when the month is out of range.
    """
    if month == 2 and is_leap_year(year):
        return 29
    if 1 <= month <= 12:
        return DAYS_IN_MONTH[month - 1]
    return 0


def is_day(day: int, month: int, year: int) -> bool:
    max_days = max_days_in_month(month, year)
    if not max_days:
        return False
    return 1 <= day <= max_days


def is_month(month: int) -> bool:
    return 1 <= month <= 12


def is_year(year: int) -> bool:
    return year > 0


def parse_date(text: str) -> Optional[date]:
    """
    Parse a calendar date written as DD/MM/YYYY.

    Each part goes through parse_int(), so a sign or leading spaces inside
    a part are accepted. February accepts the 29th only in leap years.

    Returns:
        The date, or None if the text is not a valid date.
    """
    if len(text) != DATE_LENGTH or text[2] != "/" or text[5] != "/":
        return None

    day = parse_int(text[0:2])
    month = parse_int(text[3:5])
    year = parse_int(text[6:10])
    if day is None or month is None or year is None:
        return None

    if not (is_day(day, month, year) and is_month(month) and is_year(year)):
        return None
    return date(year, month, day)


def is_date(text: str) -> bool:
    """Validate a calendar date written as DD/MM/YYYY."""
    return parse_date(text) is not None


def parse_time(text: str) -> Optional[time]:
    """Parse a 24-hour time written as HH:MM, or return None."""
    if len(text) != TIME_LENGTH or text[2] != ":":
        return None
    if not all(is_digit(text[i]) for i in (0, 1, 3, 4)):
        return None

    hours = int(text[0:2])
    minutes = int(text[3:5])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return time(hours, minutes)


def is_time(text: str) -> bool:
    """Validate a 24-hour time written as HH:MM."""
    return parse_time(text) is not None


class DateValidator(BaseValidator):
    """Validates DD/MM/YYYY dates."""

    error_code = ValidationError.INVALID_DATE

    def check(self, value: str) -> bool:
        return is_date(value)


class TimeValidator(BaseValidator):
    """Validates HH:MM times."""

    error_code = ValidationError.INVALID_TIME

    def check(self, value: str) -> bool:
        return is_time(value)
