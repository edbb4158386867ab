"""Locate manifest files below a root directory."""

from __future__ import annotations

from pathlib import Path

from utils.logger import get_logger

from .errors import DiscoveryError
from .types import LocatorConfig

logger = get_logger(__name__)


def _scan(directory: Path) -> list[Path]:
    return sorted(directory.iterdir(), key=lambda p: p.name)


def find_manifests(root: Path, config: LocatorConfig | None = None) -> list[Path]:
    """Return every manifest reachable from root within the depth bound.

    Args:
        root: Directory to start from; listed at depth 1
        config: Traversal settings (defaults to LocatorConfig())

    Returns:
        Manifest paths in depth-first order, entries sorted by name per directory

    Raises:
        DiscoveryError: If root is not a directory, or a directory cannot be listed
            and config.skip_unreadable is False
    """
    config = config or LocatorConfig()
    root = Path(root)
    if not root.is_dir():
        raise DiscoveryError(root, "not a directory")

    results: list[Path] = []
    _collect(root, 1, config, results)
    logger.info(f"Found {len(results)} manifest(s) under {root}")
    return results


def _collect(directory: Path, depth: int, config: LocatorConfig, results: list[Path]) -> None:
    if depth > config.max_depth:
        return

    try:
        entries = _scan(directory)
    except OSError as e:
        if not config.skip_unreadable:
            raise DiscoveryError(directory, e.strerror or str(e)) from e
        logger.warning(f"Skipping unreadable directory {directory}: {e}")
        return

    for path in entries:
        if path.is_dir():
            if path.name in config.exclude_dirs:
                logger.debug(f"Excluded directory: {path}")
                continue
            _collect(path, depth + 1, config, results)
        elif path.is_file() and path.name == config.manifest_name:
            logger.debug(f"Manifest: {path} (depth {depth})")
            results.append(path)
