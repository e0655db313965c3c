"""
Menu Selection

Decodes raw keypresses and tracks the highlighted option of a menu.

Two key encodings are understood:
- ANSI terminals send ESC [ A / ESC [ B (or ESC O A / ESC O B) for arrows
- Windows consoles send a 0x00 or 0xE0 sentinel followed by H / P
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Key(Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    OTHER = "other"


_KEY_SEQUENCES = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\r\n": Key.ENTER,
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x00H": Key.UP,
    "\x00P": Key.DOWN,
    "\xe0H": Key.UP,
    "\xe0P": Key.DOWN,
}


def parse_key(sequence: str) -> Key:
    """Map a raw key sequence to a Key. Unknown sequences are Key.OTHER."""
    return _KEY_SEQUENCES.get(sequence, Key.OTHER)


class OptionSelector:
    """
    Cursor over a fixed number of menu options.

    Moving past either end wraps around. Enter commits the current index
    without moving it.
    """

    def __init__(self, count: int, index: int = 0, verbose: bool = False):
        if count < 1:
            raise ValueError("A menu needs at least one option")
        if not 0 <= index < count:
            raise ValueError(f"Index {index} is out of bounds for {count} options")
        self.count = count
        self.index = index
        self.selected = False
        self.verbose = verbose

    @property
    def last_index(self) -> int:
        return self.count - 1

    def move_up(self) -> int:
        self.index = self.index - 1 if self.index > 0 else self.last_index
        return self.index

    def move_down(self) -> int:
        self.index = self.index + 1 if self.index < self.last_index else 0
        return self.index

    def commit(self) -> int:
        self.selected = True
        return self.index

    def reset(self):
        """Clear the committed flag so the menu can be shown again."""
        self.selected = False

    def handle_key(self, key: Key) -> bool:
        """
        Apply one keypress.

        Args:
            key: Decoded keypress

        Returns:
            True once the current option has been committed.
        """
        if key is Key.UP:
            self.move_up()
        elif key is Key.DOWN:
            self.move_down()
        elif key is Key.ENTER:
            self.commit()

        if self.verbose:
            logger.debug(f"Key {key.value} -> index {self.index}, selected={self.selected}")
        return self.selected
