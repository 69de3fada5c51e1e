"""Commit store: the JSON array of commits under the base directory.

The file is the source of truth and is rewritten in full on every save.
Writes go to a temporary sibling first and are renamed into place, so a
crash mid-write leaves the previous content intact.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path

from lifecommit.errors import (
    AlreadyInitialized,
    CorruptStore,
    NotInitialized,
    StoreUnavailable,
)
from lifecommit.models import Commit
from lifecommit.paths import StoragePaths

logger = logging.getLogger(__name__)

JSON_INDENT = " "
DATA_ENCODING = "utf-8"


def atomic_write_text(path: Path, text: str) -> None:
    """Write text atomically using tempfile + fsync + replace."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path_str = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
    tmp_path = Path(tmp_path_str)
    try:
        with os.fdopen(fd, "w", encoding=DATA_ENCODING) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise


class CommitStore:
    """Read/write access to ``commits.json``."""

    def __init__(self, paths: StoragePaths) -> None:
        self.paths = paths

    @property
    def path(self) -> Path:
        return self.paths.commits().path

    def is_initialized(self) -> bool:
        return self.paths.commits().exists

    def initialize(self) -> None:
        """Create the store with an empty list. Fails if it already exists."""
        location = self.paths.commits()
        if location.exists:
            raise AlreadyInitialized()
        self._write([])
        logger.info("Initialized commit store at %s", location.path)

    def load(self) -> list[Commit]:
        location = self.paths.commits()
        if not location.exists:
            raise NotInitialized()

        try:
            data = json.loads(location.path.read_text(encoding=DATA_ENCODING))
        except json.JSONDecodeError as e:
            raise CorruptStore(f"{location.path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise CorruptStore(f"{location.path} is not valid UTF-8 text") from e
        except OSError as e:
            raise StoreUnavailable(f"Cannot read {location.path}: {e}") from e

        if not isinstance(data, list):
            raise CorruptStore(f"{location.path} must contain a JSON array")

        commits = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise CorruptStore(f"{location.path}: entry {i} is not an object")
            try:
                commits.append(Commit.from_dict(item))
            except ValueError as e:
                raise CorruptStore(f"{location.path}: entry {i} has {e}") from e
        return commits

    def save(self, commits: list[Commit]) -> None:
        self._write([commit.to_dict() for commit in commits])
        logger.debug("Saved %d commits to %s", len(commits), self.path)

    def _write(self, data: list) -> None:
        text = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
        try:
            atomic_write_text(self.path, text)
        except OSError as e:
            raise StoreUnavailable(f"Cannot write {self.path}: {e}") from e
