"""Test fixtures for the scheduling terminal."""

import io
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from agenda.interface.console import Console, KeySource

UP = "\x1b[A"
DOWN = "\x1b[B"
ENTER = "\r"


class ScriptedKeySource(KeySource):
    """Replays a fixed list of raw key sequences."""

    def __init__(self, keys):
        self.keys = list(keys)

    def read_key(self) -> str:
        if not self.keys:
            raise EOFError("No more keys to read")
        return self.keys.pop(0)


def make_console(text: str = "", keys=()) -> Console:
    return Console(
        stdin=io.StringIO(text),
        stdout=io.StringIO(),
        key_source=ScriptedKeySource(keys),
    )


@pytest.fixture
def console_factory():
    """Build a console fed by a string of typed lines and a list of keys."""
    return make_console


@pytest.fixture
def valid_national_id():
    return "52998224725"


@pytest.fixture
def valid_phone():
    return "84 98765-4321"
