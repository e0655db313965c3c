"""
Menus

Renders framed option menus and drives arrow-key selection, plus the
static information screens.
"""

import logging
import unicodedata
from typing import List, NamedTuple, Optional, Sequence

import click

from agenda.config.constants import MENU_OPTION_PADDING, MENU_TITLE_PADDING
from agenda.config.settings import MENU_WIDTH, VERBOSE
from agenda.interface.console import Console
from agenda.logic.selection import OptionSelector

logger = logging.getLogger(__name__)

HIGHLIGHT_STYLE = "cyan"


class MenuOption(NamedTuple):
    label: str
    style: Optional[str] = None


def build_option_set(labels: Sequence[str], highlighted: int) -> List[MenuOption]:
    """Pair each label with its style; only the highlighted one is coloured."""
    return [
        MenuOption(label, HIGHLIGHT_STYLE if i == highlighted else None)
        for i, label in enumerate(labels)
    ]


def display_width(text: str) -> int:
    """Number of terminal cells text occupies. Combining marks take none."""
    text = unicodedata.normalize("NFC", text)
    return sum(1 for char in text if not unicodedata.combining(char))


def fit(text: str, width: int) -> str:
    """Truncate or right-pad text to exactly width cells."""
    text = unicodedata.normalize("NFC", text)
    kept = []
    used = 0
    for char in text:
        cells = 0 if unicodedata.combining(char) else 1
        if used + cells > width:
            break
        kept.append(char)
        used += cells
    return "".join(kept) + " " * (width - used)


def center(text: str, width: int) -> str:
    """Centre text in width cells, extra space going to the right."""
    free = max(width - display_width(text), 0)
    left = free // 2
    return " " * left + text + " " * (free - left)


def render_options(
    title: str, option_set: Sequence[MenuOption], width: int = MENU_WIDTH
) -> List[str]:
    """
    Build the lines of a framed menu.

    Layout for width 30:
        ------------------------------
        |       Menu Principal       |
        ------------------------------
        | 1. Modulo Clientes         |
        ------------------------------
    """
    border = "-" * width
    label_width = width - MENU_OPTION_PADDING
    lines = [border, f"|{center(title, width - MENU_TITLE_PADDING)}|", border]
    for option in option_set:
        label = fit(option.label, label_width)
        if option.style:
            label = click.style(label, fg=option.style)
        lines.append(f"| {label} |")
    lines.append(border)
    return lines


def show_options(title: str, option_set: Sequence[MenuOption], console: Console):
    for line in render_options(title, option_set):
        console.writeln(line)


def select_option(
    title: str,
    labels: Sequence[str],
    console: Optional[Console] = None,
    index: int = 0,
) -> int:
    """
    Show a menu and let the user pick an option with the arrow keys.

    Up from the first option wraps to the last and down from the last wraps
    to the first. Enter commits the highlighted option.

    Args:
        title: Menu title
        labels: Option labels in display order
        console: Terminal to use
        index: Initially highlighted option

    Returns:
        Zero-based index of the chosen option
    """
    console = console or Console()
    selector = OptionSelector(len(labels), index, verbose=VERBOSE)

    while True:
        console.clear()
        show_options(title, build_option_set(labels, selector.index), console)
        if selector.handle_key(console.read_key()):
            logger.info(f"Menu '{title}': selected '{labels[selector.index]}'")
            return selector.index


def render_box(title: str, lines: Sequence[str]) -> str:
    """Frame a title and text lines in a box sized to the widest line."""
    inner = max([display_width(title)] + [display_width(line) for line in lines]) + 2
    border = "-" * (inner + 2)
    rows = [border, f"|{center(title, inner)}|", border]
    rows.extend(f"| {fit(line, inner - 2)} |" for line in lines)
    rows.append(border)
    return "\n".join(rows) + "\n"


def show_generic_info(message: str, console: Optional[Console] = None):
    """Print a message and wait for any key."""
    console = console or Console()
    console.write(message)
    console.wait_for_key()


ABOUT_LINES = [
    "O projeto desenvolvido é um sistema de agendamento para uma advocacia.",
    "Ele tem como principal funcionalidade o agendamento de reuniões entre",
    "clientes e advogados, facilitando a organização dos atendimentos.",
]

TEAM_LINES = [
    "O projeto foi feito pelos alunos do curso de Bacharelado em Sistemas",
    "de Informação na UFRN:",
    "",
    "- Mosiah Adam Maria de Araújo: https://github.com/akemi-adam",
    "- Felipe Erik: https://github.com/zfelip",
]


def show_about_menu(console: Optional[Console] = None):
    show_generic_info(render_box("Sobre", ABOUT_LINES), console)


def show_team_menu(console: Optional[Console] = None):
    show_generic_info(render_box("Equipe", TEAM_LINES), console)
