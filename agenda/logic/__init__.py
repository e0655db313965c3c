"""Business logic: validators, validation messages and menu selection."""

from agenda.logic.messages import ERROR_MESSAGES, ERROR_PREFIX, error_message
from agenda.logic.selection import Key, OptionSelector, parse_key

__all__ = [
    "ERROR_MESSAGES",
    "ERROR_PREFIX",
    "error_message",
    "Key",
    "OptionSelector",
    "parse_key",
]
