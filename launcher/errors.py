"""Exceptions raised by the launcher pipeline."""

from __future__ import annotations

from pathlib import Path


class LauncherError(Exception):
    """Base class for fatal launcher errors."""


class DiscoveryError(LauncherError):
    """A directory could not be listed while locating manifests."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path


class ManifestError(LauncherError):
    """A manifest could not be read or is not valid JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid manifest {path}: {reason}")
        self.path = path


class SelectorError(LauncherError):
    """The interactive menu could not run."""


class ExecutionError(LauncherError):
    """The shell for the selected command could not be started."""
