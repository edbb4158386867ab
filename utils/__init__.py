"""Utility modules for scriptdeck."""

from . import terminal_ui
from .logger import get_log_file_path, get_logger, setup_logger

# Runtime helpers are imported directly from utils.runtime.

__all__ = [
    "setup_logger",
    "get_logger",
    "get_log_file_path",
    "terminal_ui",
]
