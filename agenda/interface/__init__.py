"""Terminal interaction: console primitives, field reader and menus."""

from agenda.interface.console import Console, KeySource, TerminalKeySource
from agenda.interface.field_reader import (
    FieldBuffer,
    FieldSpec,
    read_field,
    read_form,
    run_validators,
    show_error_message,
)
from agenda.interface.menu import (
    MenuOption,
    build_option_set,
    render_options,
    select_option,
    show_about_menu,
    show_generic_info,
    show_options,
    show_team_menu,
)

__all__ = [
    "Console",
    "KeySource",
    "TerminalKeySource",
    "FieldBuffer",
    "FieldSpec",
    "read_field",
    "read_form",
    "run_validators",
    "show_error_message",
    "MenuOption",
    "build_option_set",
    "render_options",
    "select_option",
    "show_about_menu",
    "show_generic_info",
    "show_options",
    "show_team_menu",
]
