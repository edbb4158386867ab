"""Command registry implementation."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from prompt_toolkit.formatted_text import FormattedText

from config import Config
from utils.logger import get_logger

from .locator import find_manifests
from .parser import extract_scripts
from .render import plain_label, render_label
from .types import CommandEntry, LocatorConfig

logger = get_logger(__name__)


class CommandRegistry:
    """Ordered collection of every script found under a root directory.

    Entries keep the locator's manifest order and each manifest's script order.
    Identical names from different manifests stay separate entries.
    """

    def __init__(
        self,
        root: Path,
        entries: list[CommandEntry] | None = None,
        root_label: str = Config.ROOT_LABEL,
    ) -> None:
        self.root = Path(root)
        self.root_label = root_label
        self._entries: tuple[CommandEntry, ...] = tuple(entries or ())

    @classmethod
    def discover(
        cls,
        root: Path,
        config: LocatorConfig | None = None,
        root_label: str = Config.ROOT_LABEL,
    ) -> CommandRegistry:
        """Locate manifests under root and collect their scripts.

        Any DiscoveryError or ManifestError propagates; nothing found so far is kept.
        """
        entries: list[CommandEntry] = []
        for manifest in find_manifests(root, config):
            entries.extend(extract_scripts(manifest))
        logger.info(f"Registry holds {len(entries)} command(s)")
        return cls(root, entries, root_label=root_label)

    @property
    def entries(self) -> tuple[CommandEntry, ...]:
        return self._entries

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> CommandEntry:
        return self._entries[index]

    def labels(self) -> list[FormattedText]:
        return [render_label(entry, self.root, self.root_label) for entry in self._entries]

    def plain_labels(self) -> list[str]:
        return [plain_label(entry, self.root, self.root_label) for entry in self._entries]
