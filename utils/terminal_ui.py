"""Terminal output helpers built on Rich.

All launcher messages go through these functions so they share the theme
from utils.tui.theme and can be replaced in tests.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from config import Config
from utils.tui.theme import Theme, set_theme

set_theme(Config.TUI_THEME)

console = Console(theme=Theme.get_rich_theme())
error_console = Console(theme=Theme.get_rich_theme(), stderr=True)


def _get_colors():
    return Theme.get_colors()


def print_message(message: str) -> None:
    """Print a plain status line to stdout."""
    console.print(message, markup=False, highlight=False)


def print_failure(message: str) -> None:
    """Print a plain status line to stderr in the error color."""
    colors = _get_colors()
    error_console.print(message, style=colors.error, markup=False, highlight=False)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error panel to stderr.

    Args:
        message: Error message
        title: Panel title (default: "Error")
    """
    colors = _get_colors()
    error_console.print(
        Panel(
            Text(message, style=colors.error),
            title=f"[bold {colors.error}]{title}[/bold {colors.error}]",
            border_style=colors.error,
            box=box.ROUNDED,
        )
    )


def print_log_location(log_file: str) -> None:
    """Print log file location.

    Args:
        log_file: Path to log file
    """
    colors = _get_colors()
    console.print(f"[{colors.text_muted}]Detailed logs: {log_file}[/{colors.text_muted}]")
