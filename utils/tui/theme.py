"""Color themes for console output and the command menu."""

from dataclasses import dataclass
from typing import Dict

from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class ThemeColors:
    """Color palette for a TUI theme."""

    primary: str  # Prompt and title accent
    success: str  # Script names, success messages
    warning: str
    error: str

    bg_primary: str  # Terminal background
    bg_highlight: str  # Selected menu row

    text_primary: str
    text_secondary: str  # Hints
    text_muted: str  # Origin tags and command text


DARK_THEME = ThemeColors(
    primary="#00D9FF",  # Bright cyan
    success="#10B981",  # Emerald green
    warning="#F59E0B",  # Amber
    error="#EF4444",  # Red
    bg_primary="#0D1117",
    bg_highlight="#21262D",
    text_primary="#F0F6FC",
    text_secondary="#8B949E",
    text_muted="#6E7681",
)

LIGHT_THEME = ThemeColors(
    primary="#0969DA",  # Blue
    success="#1A7F37",  # Green
    warning="#9A6700",  # Amber
    error="#CF222E",  # Red
    bg_primary="#FFFFFF",
    bg_highlight="#EAEEF2",
    text_primary="#1F2328",
    text_secondary="#57606A",
    text_muted="#8C959F",
)


class Theme:
    """TUI Theme manager."""

    _current_theme: str = "dark"
    _themes: Dict[str, ThemeColors] = {
        "dark": DARK_THEME,
        "light": LIGHT_THEME,
    }

    @classmethod
    def get_colors(cls) -> ThemeColors:
        """Get the current theme colors."""
        return cls._themes[cls._current_theme]

    @classmethod
    def set_theme(cls, name: str) -> None:
        """Set the current theme.

        Raises:
            ValueError: If theme name is invalid
        """
        if name not in cls._themes:
            raise ValueError(f"Unknown theme: {name}. Available: {list(cls._themes.keys())}")
        cls._current_theme = name

    @classmethod
    def get_rich_theme(cls) -> RichTheme:
        """Get a Rich Theme object for the current theme."""
        colors = cls.get_colors()
        return RichTheme(
            {
                "primary": Style(color=colors.primary),
                "success": Style(color=colors.success),
                "warning": Style(color=colors.warning),
                "error": Style(color=colors.error),
                "text": Style(color=colors.text_primary),
                "text.muted": Style(color=colors.text_muted),
            }
        )

    @classmethod
    def get_prompt_toolkit_style(cls) -> Dict[str, str]:
        """Get style dict for the prompt_toolkit command menu.

        Keys match the fragment classes produced by launcher.render.render_label.
        """
        colors = cls.get_colors()
        return {
            "": colors.text_primary,
            "title": f"{colors.primary} bold",
            "hint": colors.text_secondary,
            "filter": f"{colors.primary}",
            "origin": colors.text_muted,
            "script": f"{colors.success} bold",
            "command": colors.text_muted,
            "selected": f"bg:{colors.bg_highlight}",
            "pointer": f"{colors.primary} bold",
            "empty": f"{colors.warning} italic",
        }


def set_theme(name: str) -> None:
    """Set the current theme (convenience function)."""
    Theme.set_theme(name)
