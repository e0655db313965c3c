"""
Console

Wraps the terminal primitives the menus and field reader rely on:
line input, raw single keypresses, styled output and screen clearing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, TextIO

import click

from agenda.logic.selection import Key, parse_key

logger = logging.getLogger(__name__)


class KeySource(ABC):
    """Source of raw keypresses, one key or escape sequence at a time."""

    @abstractmethod
    def read_key(self) -> str:
        pass


class TerminalKeySource(KeySource):
    """
    Reads keys from the controlling terminal.

    click.getchar() switches the terminal to raw mode for the duration of
    the read and restores it afterwards, on both POSIX and Windows.
    """

    def read_key(self) -> str:
        key = click.getchar(echo=False)
        if key == "":
            raise EOFError("No more keys to read")
        return key


class Console:
    """Terminal input/output used by menus and forms."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        key_source: Optional[KeySource] = None,
        color: Optional[bool] = None,
    ):
        self.stdin = stdin if stdin is not None else click.get_text_stream("stdin")
        self.stdout = stdout if stdout is not None else click.get_text_stream("stdout")
        self.key_source = key_source or TerminalKeySource()
        self.color = color

    def write(self, text: str = "", nl: bool = False, fg: Optional[str] = None):
        """Write text, optionally coloured. Colours are dropped on non-tty output."""
        if fg:
            text = click.style(text, fg=fg)
        click.echo(text, file=self.stdout, nl=nl, color=self.color)

    def writeln(self, text: str = "", fg: Optional[str] = None):
        self.write(text, nl=True, fg=fg)

    def readline(self, max_length: int) -> Optional[str]:
        """
        Read one line, keeping at most max_length - 1 characters.

        Characters beyond the limit are consumed and discarded. The line
        ends at a newline or at end of input.

        Returns:
            The line without its newline, or None if the input was already
            exhausted.
        """
        chars = []
        discarded = 0
        while True:
            char = self.stdin.read(1)
            if char == "":
                if not chars and not discarded:
                    return None
                break
            if char == "\n":
                break
            if len(chars) < max_length - 1:
                chars.append(char)
            else:
                discarded += 1
        if discarded:
            logger.debug(f"Discarded {discarded} characters past limit {max_length - 1}")
        return "".join(chars)

    def read_key(self) -> Key:
        return parse_key(self.key_source.read_key())

    def wait_for_key(self):
        """Block until any key is pressed."""
        self.key_source.read_key()

    def clear(self):
        if self.stdout.isatty():
            click.clear()
