"""Tests for the interactive command menu."""

import pytest
from prompt_toolkit.application import Application
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from launcher import SelectorError
from utils.tui import command_picker
from utils.tui.command_picker import filter_choices, pick_command, visible_window

LABELS = [
    "[root] build { tsc -p . }",
    "[pkg] test { echo hi }",
    "[pkg] lint { eslint . }",
]

DOWN = "\x1b[B"
UP = "\x1b[A"
ENTER = "\r"
CTRL_C = "\x03"
ESCAPE = "\x1b"
BACKSPACE = "\x7f"


def _pick(keys: str, labels=LABELS):
    with create_pipe_input() as pipe_input:
        pipe_input.send_text(keys)
        return pick_command(labels, input=pipe_input, output=DummyOutput())


def test_enter_picks_first_entry() -> None:
    assert _pick(ENTER) == 0


def test_down_then_enter() -> None:
    assert _pick(DOWN + ENTER) == 1


def test_up_wraps_to_last_entry() -> None:
    assert _pick(UP + ENTER) == 2


def test_ctrl_c_cancels() -> None:
    assert _pick(CTRL_C) is None


def test_escape_cancels() -> None:
    assert _pick(ESCAPE) is None


def test_escape_after_filtering_cancels() -> None:
    assert _pick("lint" + ESCAPE) is None


def test_typing_filters_and_returns_original_index() -> None:
    assert _pick("lint" + ENTER) == 2


def test_filter_then_move() -> None:
    # "[pkg]" matches test and lint
    assert _pick("pkg" + DOWN + ENTER) == 2


def test_backspace_widens_filter() -> None:
    assert _pick("lintx" + BACKSPACE + BACKSPACE + BACKSPACE + BACKSPACE + BACKSPACE + ENTER) == 0


def test_enter_with_no_matches_does_nothing() -> None:
    assert _pick("zzz" + ENTER + CTRL_C) is None


def test_formatted_labels_are_accepted() -> None:
    labels = [[("class:script", "build")], [("class:script", "test")]]
    assert _pick("test" + ENTER, labels) == 1


def test_empty_labels_rejected() -> None:
    with pytest.raises(ValueError):
        pick_command([])


class _PipedStdin:
    def isatty(self) -> bool:
        return False


def test_non_interactive_terminal_raises(monkeypatch) -> None:
    monkeypatch.setattr(command_picker.sys, "stdin", _PipedStdin())
    with pytest.raises(SelectorError):
        pick_command(LABELS)


class TestFilterChoices:
    def test_empty_query_keeps_everything(self):
        assert filter_choices(LABELS, "") == [0, 1, 2]
        assert filter_choices(LABELS, "   ") == [0, 1, 2]

    def test_case_insensitive_substring(self):
        assert filter_choices(LABELS, "ESLINT") == [2]

    def test_matches_origin_tag(self):
        assert filter_choices(LABELS, "[root]") == [0]

    def test_no_match(self):
        assert filter_choices(LABELS, "deploy") == []


class TestVisibleWindow:
    def test_short_list_is_fully_visible(self):
        assert visible_window(3, 2, 10) == (0, 3)

    def test_window_follows_cursor(self):
        assert visible_window(100, 50, 10) == (45, 55)

    def test_window_clamped_at_start(self):
        assert visible_window(100, 2, 10) == (0, 10)

    def test_window_clamped_at_end(self):
        assert visible_window(100, 99, 10) == (90, 100)


def test_application_failure_becomes_selector_error(monkeypatch) -> None:
    def _broken_run(self, *args, **kwargs):
        raise RuntimeError("asyncio.run() cannot be called from a running event loop")

    monkeypatch.setattr(Application, "run", _broken_run)

    with pytest.raises(SelectorError) as exc_info:
        _pick(ENTER)

    assert "running event loop" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, RuntimeError)
