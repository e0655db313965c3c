"""Configuration: environment settings and shared constants."""

from agenda.config.settings import (
    PROJECT_ROOT,
    MENU_WIDTH,
    LOG_LEVEL,
    LOG_FILE,
    VERBOSE,
)
from agenda.config.constants import (
    NAME_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    NATIONAL_ID_MAX_LENGTH,
    ORG_ID_MAX_LENGTH,
    DATE_MAX_LENGTH,
    TIME_MAX_LENGTH,
    ADDRESS_MAX_LENGTH,
    NUMBER_MAX_LENGTH,
)

__all__ = [
    # Settings
    "PROJECT_ROOT",
    "MENU_WIDTH",
    "LOG_LEVEL",
    "LOG_FILE",
    "VERBOSE",
    # Constants
    "NAME_MAX_LENGTH",
    "EMAIL_MAX_LENGTH",
    "PHONE_MAX_LENGTH",
    "NATIONAL_ID_MAX_LENGTH",
    "ORG_ID_MAX_LENGTH",
    "DATE_MAX_LENGTH",
    "TIME_MAX_LENGTH",
    "ADDRESS_MAX_LENGTH",
    "NUMBER_MAX_LENGTH",
]
