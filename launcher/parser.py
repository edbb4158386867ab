"""Parsing helpers for package manifests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from utils.logger import get_logger

from .errors import ManifestError
from .types import CommandEntry

logger = get_logger(__name__)

SCRIPTS_FIELD = "scripts"


def read_manifest(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(path, str(e)) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(path, f"{e.msg} (line {e.lineno}, column {e.colno})") from e


def split_scripts(data: Any) -> list[tuple[str, str]]:
    """Return (name, command) pairs for the string-valued scripts of a manifest.

    Documents without a scripts object contribute nothing. Values that are not
    strings (some tools nest objects under the same field) are dropped, as are
    pairs with an empty name or command.
    """
    if not isinstance(data, dict):
        return []
    scripts = data.get(SCRIPTS_FIELD)
    if not isinstance(scripts, dict):
        return []

    pairs: list[tuple[str, str]] = []
    for name, command in scripts.items():
        if not isinstance(command, str):
            continue
        if not name or not command:
            continue
        pairs.append((name, command))
    return pairs


def extract_scripts(manifest_path: Path) -> list[CommandEntry]:
    """Parse one manifest and return its scripts as command entries.

    Raises:
        ManifestError: If the file cannot be read or is not valid JSON
    """
    manifest_path = Path(manifest_path)
    data = read_manifest(manifest_path)
    # Path("package.json").parent is Path("."), the current directory marker
    origin_dir = manifest_path.parent

    entries = [
        CommandEntry(name=name, origin_dir=origin_dir, command_text=command)
        for name, command in split_scripts(data)
    ]
    logger.debug(f"{manifest_path}: {len(entries)} script(s)")
    return entries
