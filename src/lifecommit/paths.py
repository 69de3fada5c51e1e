"""File locations under the life-commit base directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

COMMITS_FILENAME = "commits.json"
LIFEMOJIS_FILENAME = "lifemojis.json"


@dataclass(frozen=True)
class FileLocation:
    path: Path
    exists: bool


class StoragePaths:
    """Resolves the commits store and lifemoji cache inside ``base_dir``.

    Existence is probed on every call, never cached.
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir

    def _locate(self, filename: str) -> FileLocation:
        path = self.base_dir / filename
        return FileLocation(path=path, exists=path.exists())

    def commits(self) -> FileLocation:
        return self._locate(COMMITS_FILENAME)

    def lifemojis(self) -> FileLocation:
        return self._locate(LIFEMOJIS_FILENAME)
