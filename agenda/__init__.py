"""
Law Office Scheduling Terminal

Keyboard-driven menus and validated field entry for clients, lawyers,
offices and appointments.
"""

from agenda.exceptions import AgendaError, FieldEntryAborted
from agenda.interface.console import Console
from agenda.interface.field_reader import FieldBuffer, FieldSpec, read_field, read_form
from agenda.interface.menu import select_option
from agenda.logic.validators import ValidationError, get_validator

__all__ = [
    "AgendaError",
    "FieldEntryAborted",
    "Console",
    "FieldBuffer",
    "FieldSpec",
    "read_field",
    "read_form",
    "select_option",
    "ValidationError",
    "get_validator",
]
