"""Single-choice command menu built on prompt_toolkit."""

from __future__ import annotations

import sys
from typing import Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import (
    AnyFormattedText,
    StyleAndTextTuples,
    fragment_list_to_text,
    to_formatted_text,
)
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from config import Config
from launcher.errors import SelectorError
from utils.logger import get_logger
from utils.tui.theme import Theme

logger = get_logger(__name__)


def filter_choices(texts: Sequence[str], query: str) -> list[int]:
    """Return indices of texts containing query, case-insensitively."""
    needle = query.lower()
    if not needle.strip():
        return list(range(len(texts)))
    return [idx for idx, text in enumerate(texts) if needle in text.lower()]


def visible_window(total: int, cursor: int, page_size: int) -> tuple[int, int]:
    """Return the [start, end) slice of rows to draw so the cursor stays visible."""
    if total <= page_size:
        return 0, total
    start = max(cursor - page_size // 2, 0)
    start = min(start, total - page_size)
    return start, start + page_size


def pick_command(
    labels: Sequence[AnyFormattedText],
    title: str = Config.MENU_PROMPT,
    page_size: int = Config.MENU_PAGE_SIZE,
    input: Input | None = None,
    output: Output | None = None,
) -> int | None:
    """Show labels as a menu and block until the user picks one or cancels.

    Typing filters the list; up/down move; enter confirms; esc or ctrl-c cancels.

    Args:
        labels: One formatted label per entry, in registry order
        title: Prompt shown above the list
        page_size: Maximum number of rows drawn at once
        input: prompt_toolkit input (tests pass a pipe input)
        output: prompt_toolkit output

    Returns:
        Index into labels of the chosen entry, or None if cancelled

    Raises:
        ValueError: If labels is empty
        SelectorError: If the terminal is not interactive or the menu fails
    """
    if not labels:
        raise ValueError("pick_command requires at least one label")
    if input is None and not sys.stdin.isatty():
        raise SelectorError("An interactive terminal is required to choose a command")

    fragments = [to_formatted_text(label) for label in labels]
    texts = [fragment_list_to_text(frag) for frag in fragments]

    query = ""
    matches = list(range(len(labels)))
    cursor = 0

    def _refilter(new_query: str) -> None:
        nonlocal query, matches, cursor
        query = new_query
        matches = filter_choices(texts, query)
        cursor = 0

    kb = KeyBindings()

    @kb.add("up")
    @kb.add("c-p")
    def _up(event) -> None:
        nonlocal cursor
        if matches:
            cursor = (cursor - 1) % len(matches)

    @kb.add("down")
    @kb.add("c-n")
    def _down(event) -> None:
        nonlocal cursor
        if matches:
            cursor = (cursor + 1) % len(matches)

    @kb.add("enter")
    def _enter(event) -> None:
        if matches:
            event.app.exit(result=matches[cursor])

    @kb.add("escape")
    @kb.add("c-c")
    def _cancel(event) -> None:
        event.app.exit(result=None)

    @kb.add("backspace")
    def _backspace(event) -> None:
        if query:
            _refilter(query[:-1])

    @kb.add(Keys.Any)
    def _type(event) -> None:
        if event.data.isprintable():
            _refilter(query + event.data)

    def _render() -> StyleAndTextTuples:
        lines: StyleAndTextTuples = [("class:title", f"{title}\n")]
        if query:
            lines.append(("class:filter", f"/ {query}\n"))

        if not matches:
            lines.append(("class:empty", "  No matching commands\n"))

        start, end = visible_window(len(matches), cursor, page_size)
        for row in range(start, end):
            is_selected = row == cursor
            row_style = "class:selected" if is_selected else ""
            pointer = "> " if is_selected else "  "
            lines.append((f"{row_style} class:pointer".strip(), pointer))
            for style, text, *_ in fragments[matches[row]]:
                lines.append((f"{row_style} {style}".strip(), text))
            lines.append((row_style, "\n"))

        hint = "up/down to move, type to filter, enter to run, esc to cancel"
        if len(matches) != len(labels) or end - start < len(matches):
            hint = f"{len(matches)}/{len(labels)}  {hint}"
        lines.append(("class:hint", hint))
        return lines

    control = FormattedTextControl(_render, focusable=True)
    window = Window(content=control, dont_extend_height=True, always_hide_cursor=True)
    layout = Layout(HSplit([window]))

    app: Application[int | None] = Application(
        layout=layout,
        key_bindings=kb,
        style=Style.from_dict(Theme.get_prompt_toolkit_style()),
        full_screen=False,
        mouse_support=False,
        erase_when_done=True,
        input=input,
        output=output,
    )

    try:
        result = app.run()
    except Exception as e:
        raise SelectorError(f"Command menu failed: {e}") from e

    logger.debug(f"Menu result: {result}")
    return result
