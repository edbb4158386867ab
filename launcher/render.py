"""Menu labels for command entries."""

from __future__ import annotations

from pathlib import Path

from prompt_toolkit.formatted_text import FormattedText, fragment_list_to_text

from config import Config

from .types import CommandEntry


def format_origin(origin_dir: Path, root: Path, root_label: str = Config.ROOT_LABEL) -> str:
    origin = Path(origin_dir)
    root = Path(root)
    if origin == root or origin == Path("."):
        return root_label
    try:
        return origin.relative_to(root).as_posix()
    except ValueError:
        return origin.as_posix()


def render_label(
    entry: CommandEntry, root: Path, root_label: str = Config.ROOT_LABEL
) -> FormattedText:
    """Build the one-line menu label for an entry.

    Layout is ``[origin] name { command }`` with the origin and command muted.
    The label is display only; execution never reads it.
    """
    origin = format_origin(entry.origin_dir, root, root_label)
    return FormattedText(
        [
            ("class:origin", f"[{origin}]"),
            ("", " "),
            ("class:script", entry.name),
            ("", " "),
            ("class:command", f"{{ {entry.command_text} }}"),
        ]
    )


def plain_label(entry: CommandEntry, root: Path, root_label: str = Config.ROOT_LABEL) -> str:
    return fragment_list_to_text(render_label(entry, root, root_label))
