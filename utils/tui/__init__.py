"""Terminal UI pieces for scriptdeck: themes and the command picker."""

from utils.tui.command_picker import filter_choices, pick_command, visible_window
from utils.tui.theme import Theme, set_theme

__all__ = [
    "Theme",
    "set_theme",
    "pick_command",
    "filter_choices",
    "visible_window",
]
