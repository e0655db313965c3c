"""Tests for key decoding and the menu selection state machine."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from agenda.logic.selection import Key, OptionSelector, parse_key


class TestParseKey:
    def test_enter(self):
        assert parse_key("\r") is Key.ENTER
        assert parse_key("\n") is Key.ENTER

    def test_ansi_arrows(self):
        assert parse_key("\x1b[A") is Key.UP
        assert parse_key("\x1b[B") is Key.DOWN
        assert parse_key("\x1bOA") is Key.UP
        assert parse_key("\x1bOB") is Key.DOWN

    def test_windows_arrows(self):
        assert parse_key("\xe0H") is Key.UP
        assert parse_key("\xe0P") is Key.DOWN
        assert parse_key("\x00H") is Key.UP
        assert parse_key("\x00P") is Key.DOWN

    def test_other_keys(self):
        assert parse_key("q") is Key.OTHER
        assert parse_key("\x1b[C") is Key.OTHER
        assert parse_key("") is Key.OTHER


class TestOptionSelector:
    def test_starts_unselected(self):
        selector = OptionSelector(3)
        assert selector.index == 0
        assert selector.selected is False

    def test_up_from_first_wraps_to_last(self):
        selector = OptionSelector(7)
        assert selector.move_up() == 6

    def test_down_from_last_wraps_to_first(self):
        selector = OptionSelector(7, index=6)
        assert selector.move_down() == 0

    def test_moves_within_bounds(self):
        selector = OptionSelector(3, index=1)
        assert selector.move_down() == 2
        assert selector.move_up() == 1
        assert selector.move_up() == 0

    def test_enter_commits_without_moving(self):
        for index in range(4):
            selector = OptionSelector(4, index=index)
            assert selector.handle_key(Key.ENTER) is True
            assert selector.index == index

    def test_arrows_do_not_commit(self):
        selector = OptionSelector(3)
        assert selector.handle_key(Key.DOWN) is False
        assert selector.handle_key(Key.UP) is False
        assert selector.index == 0

    def test_other_keys_are_ignored(self):
        selector = OptionSelector(3, index=2)
        assert selector.handle_key(Key.OTHER) is False
        assert selector.index == 2

    def test_single_option_wraps_onto_itself(self):
        selector = OptionSelector(1)
        assert selector.move_up() == 0
        assert selector.move_down() == 0

    def test_reset(self):
        selector = OptionSelector(2)
        selector.commit()
        selector.reset()
        assert selector.selected is False

    def test_invalid_construction(self):
        with pytest.raises(ValueError):
            OptionSelector(0)
        with pytest.raises(ValueError):
            OptionSelector(3, index=3)
