"""Main entry point for the script launcher."""

import argparse
import importlib.metadata
import sys
from pathlib import Path
from typing import Optional

from config import Config
from launcher import (
    CommandRegistry,
    DiscoveryError,
    ExecutionError,
    LocatorConfig,
    ManifestError,
    SelectorError,
    run_command,
)
from utils import get_log_file_path, get_logger, setup_logger, terminal_ui
from utils.runtime import ensure_runtime_dirs
from utils.tui.command_picker import pick_command

logger = get_logger(__name__)

NO_COMMANDS_MESSAGE = "No commands found."
SUCCESS_MESSAGE = "Command executed successfully."
FAILURE_MESSAGE = "Error executing command."


def run(
    root: Path = Path("."),
    locator_config: Optional[LocatorConfig] = None,
    runner: str = Config.SCRIPT_RUNNER,
    shell: str = Config.SHELL,
) -> int:
    """Discover scripts under root, let the user pick one, and run it.

    Args:
        root: Directory to search (default: the current directory)
        locator_config: Traversal settings (defaults to LocatorConfig())
        runner: Script runner the chosen name is dispatched through
        shell: Shell used to start the runner

    Returns:
        Process exit code. 0 for every normal outcome, including an empty
        registry, a cancelled menu and a command that exits non-zero; 1 for a
        discovery, manifest, menu or spawn failure.
    """
    try:
        registry = CommandRegistry.discover(root, locator_config)
    except DiscoveryError as e:
        terminal_ui.print_error(str(e), title="Discovery Error")
        return 1
    except ManifestError as e:
        terminal_ui.print_error(str(e), title="Manifest Error")
        return 1

    if registry.is_empty:
        terminal_ui.print_message(NO_COMMANDS_MESSAGE)
        return 0

    try:
        index = pick_command(registry.labels())
    except SelectorError as e:
        terminal_ui.print_error(str(e), title="Menu Error")
        return 1

    if index is None:
        logger.info("Selection cancelled")
        return 0

    entry = registry[index]
    try:
        result = run_command(entry, runner=runner, shell=shell)
    except ExecutionError as e:
        terminal_ui.print_error(str(e), title="Execution Error")
        return 1

    if result.success:
        terminal_ui.print_message(SUCCESS_MESSAGE)
    else:
        terminal_ui.print_failure(FAILURE_MESSAGE)
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pick a package.json script from anywhere below this directory and run it"
    )

    try:
        version = importlib.metadata.version("scriptdeck")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"scriptdeck {version}")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging to ~/.scriptdeck/logs/",
    )

    args = parser.parse_args()

    ensure_runtime_dirs(create_logs=args.verbose)
    if args.verbose:
        setup_logger()

    exit_code = run(Path("."))

    log_file = get_log_file_path()
    if log_file:
        terminal_ui.print_log_location(log_file)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
