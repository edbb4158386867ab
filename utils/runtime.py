"""Runtime directory management for scriptdeck.

Runtime data lives under ~/.scriptdeck/ and currently holds only:
- logs/: Log files (only created with --verbose)
"""

import os

RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".scriptdeck")


def get_log_dir() -> str:
    """Get the log directory path.

    Returns:
        Path to ~/.scriptdeck/logs/
    """
    return os.path.join(RUNTIME_DIR, "logs")


def ensure_runtime_dirs(create_logs: bool = False) -> None:
    """Ensure runtime directories exist.

    The launcher persists nothing between runs, so only the log directory is
    ever created, and only in verbose mode.

    Args:
        create_logs: Whether to create the logs directory (for --verbose mode)
    """
    if create_logs:
        os.makedirs(get_log_dir(), exist_ok=True)
