"""Run a selected script in its manifest directory."""

from __future__ import annotations

import shlex
import subprocess

from config import Config
from utils.logger import get_logger

from .errors import ExecutionError
from .types import CommandEntry, ExecutionResult

logger = get_logger(__name__)


def build_invocation(entry: CommandEntry, runner: str = Config.SCRIPT_RUNNER) -> str:
    """Return the shell command for an entry.

    The script name is dispatched through the runner so its own resolution
    (pre/post hooks, nested scripts) applies. entry.command_text is only shown
    in the menu and may differ from what the runner ends up executing.
    """
    return f"{runner} run {shlex.quote(entry.name)}"


def run_command(
    entry: CommandEntry,
    runner: str = Config.SCRIPT_RUNNER,
    shell: str = Config.SHELL,
) -> ExecutionResult:
    """Run an entry through the shell and wait for it to finish.

    Standard streams are inherited from the launcher. There is no timeout.

    Args:
        entry: Command to run
        runner: Script runner executable (default: npm)
        shell: Shell used as ``<shell> -c <invocation>``

    Returns:
        ExecutionResult with the child's return code

    Raises:
        ExecutionError: If the shell cannot be started in origin_dir
    """
    invocation = build_invocation(entry, runner)
    logger.info(f"Running '{invocation}' in {entry.origin_dir}")

    try:
        completed = subprocess.run([shell, "-c", invocation], cwd=entry.origin_dir, check=False)
    except OSError as e:
        raise ExecutionError(f"Failed to start '{invocation}' in {entry.origin_dir}: {e}") from e

    logger.info(f"'{invocation}' exited with {completed.returncode}")
    return ExecutionResult(invocation=invocation, cwd=entry.origin_dir, returncode=completed.returncode)
