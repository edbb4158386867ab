"""Script discovery, registry and execution for scriptdeck."""

from .errors import DiscoveryError, ExecutionError, LauncherError, ManifestError, SelectorError
from .executor import build_invocation, run_command
from .locator import find_manifests
from .parser import extract_scripts
from .registry import CommandRegistry
from .render import format_origin, plain_label, render_label
from .types import CommandEntry, ExecutionResult, LocatorConfig

__all__ = [
    "CommandEntry",
    "CommandRegistry",
    "DiscoveryError",
    "ExecutionError",
    "ExecutionResult",
    "LauncherError",
    "LocatorConfig",
    "ManifestError",
    "SelectorError",
    "build_invocation",
    "extract_scripts",
    "find_manifests",
    "format_origin",
    "plain_label",
    "render_label",
    "run_command",
]
