"""Data models for the command launcher."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from config import Config


@dataclass(frozen=True)
class CommandEntry:
    name: str
    origin_dir: Path
    command_text: str


@dataclass(frozen=True)
class LocatorConfig:
    """Traversal settings handed to the manifest locator.

    max_depth counts the root listing as depth 1. Directories below the bound are
    never listed, which is also the only protection against symlink cycles.
    """

    manifest_name: str = Config.MANIFEST_NAME
    exclude_dirs: tuple[str, ...] = tuple(Config.EXCLUDE_DIRS)
    max_depth: int = Config.MAX_DEPTH
    skip_unreadable: bool = False


@dataclass(frozen=True)
class ExecutionResult:
    invocation: str
    cwd: Path
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0
