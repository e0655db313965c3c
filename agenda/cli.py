"""
Terminal Entry Point

Main menu of the law office scheduler. Each entity entry opens its
registration form; About and Team show static screens.
"""

import logging
import sys
from typing import Optional

import click
from pydantic import ValidationError as RecordValidationError

from agenda.config.settings import LOG_FILE, LOG_LEVEL
from agenda.exceptions import FieldEntryAborted
from agenda.forms import FORMS
from agenda.interface.console import Console
from agenda.interface.field_reader import read_form
from agenda.interface.menu import (
    render_box,
    select_option,
    show_about_menu,
    show_generic_info,
    show_team_menu,
)
from agenda.models import Record

logger = logging.getLogger(__name__)

MAIN_MENU_TITLE = "Menu Principal"
RECORD_ERROR_MESSAGE = "Não foi possível concluir o cadastro. Pressione qualquer tecla."

# (label, action key)
MAIN_MENU = [
    ("1. Modulo Clientes", "client"),
    ("2. Modulo Advogados", "lawyer"),
    ("3. Modulo Escritórios", "office"),
    ("4. Modulo Agendamentos", "appointment"),
    ("5. Modulo Sobre", "about"),
    ("6. Modulo Equipe", "team"),
    ("7. Encerrar Programa", "exit"),
]


def setup_logging(level: str = LOG_LEVEL, log_file: str = LOG_FILE):
    """Configure root logging; logs go to stderr unless a file is given."""
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler],
    )


def register_entity(entity: str, console: Console) -> Optional[Record]:
    """
    Collect one entity through its form and show the resulting record.

    Returns:
        The record, or None if input ended before the form was complete
        or the collected values did not build a record.
    """
    title, form, record_type = FORMS[entity]
    console.clear()
    console.writeln(title)

    try:
        values = read_form(form, console)
    except FieldEntryAborted as e:
        logger.warning(f"Registration of {entity} aborted at '{e.label}'")
        return None

    try:
        record = record_type(**values)
    except RecordValidationError as e:
        logger.error(f"Collected {entity} values do not build a record: {e}")
        show_generic_info(f"{RECORD_ERROR_MESSAGE}\n", console)
        return None

    logger.info(f"Registered {entity}")
    show_generic_info(render_box(title, record.summary_lines()), console)
    return record


def run_main_menu(console: Optional[Console] = None):
    """Show the main menu until the user chooses to exit."""
    console = console or Console()
    labels = [label for label, _ in MAIN_MENU]
    index = 0

    while True:
        index = select_option(MAIN_MENU_TITLE, labels, console, index)
        action = MAIN_MENU[index][1]

        if action == "exit":
            logger.info("Exiting")
            return
        if action == "about":
            show_about_menu(console)
        elif action == "team":
            show_team_menu(console)
        else:
            register_entity(action, console)


@click.command()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--log-level", default=LOG_LEVEL, show_default=True, help="Logging level.")
@click.option("--log-file", default=LOG_FILE, help="Write logs to this file instead of stderr.")
def main(verbose: bool, log_level: str, log_file: str):
    """Law office scheduling terminal."""
    setup_logging("DEBUG" if verbose else log_level, log_file)
    try:
        run_main_menu()
    except (KeyboardInterrupt, EOFError):
        click.echo()
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
