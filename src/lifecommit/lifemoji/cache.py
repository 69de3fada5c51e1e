"""Local cache of the lifemoji vocabulary with a fetch-on-miss fallback."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING

import aiohttp

from lifecommit.errors import CorruptStore, NetworkUnavailable, StoreUnavailable
from lifecommit.models import Lifemoji
from lifecommit.store import DATA_ENCODING, atomic_write_text

if TYPE_CHECKING:
    from lifecommit.lifemoji.client import LifemojiClient
    from lifecommit.paths import StoragePaths

logger = logging.getLogger(__name__)


def parse_lifemojis(data: object) -> list[Lifemoji]:
    """Validate a decoded vocabulary document. Raises ValueError."""
    if not isinstance(data, list):
        raise ValueError("expected a JSON array")
    lifemojis = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"entry {i} is not an object")
        try:
            lifemojis.append(Lifemoji.from_dict(item))
        except ValueError as e:
            raise ValueError(f"entry {i} has {e}") from e
    return lifemojis


class LifemojiCache:
    """Returns the cached vocabulary, fetching and persisting it on first use."""

    def __init__(self, paths: StoragePaths, client: LifemojiClient, remote_path: str) -> None:
        self.paths = paths
        self.client = client
        self.remote_path = remote_path

    async def fetch(self) -> list[Lifemoji]:
        location = self.paths.lifemojis()
        if location.exists:
            return self._read_cached()
        return await self._fetch_remote()

    def _read_cached(self) -> list[Lifemoji]:
        path = self.paths.lifemojis().path
        try:
            return parse_lifemojis(json.loads(path.read_text(encoding=DATA_ENCODING)))
        except OSError as e:
            raise StoreUnavailable(f"Cannot read lifemoji cache {path}: {e}") from e
        except ValueError as e:
            # covers JSONDecodeError and UnicodeDecodeError
            raise CorruptStore(
                f"Lifemoji cache {path} is unreadable ({e}). Delete it to fetch again."
            ) from e

    async def _fetch_remote(self) -> list[Lifemoji]:
        try:
            raw = await self.client.get_text(self.remote_path)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise NetworkUnavailable(
                f"Network connection not found - {type(e).__name__}: {e}"
            ) from e
        except UnicodeDecodeError as e:
            raise NetworkUnavailable(f"Unexpected lifemoji response: {e}") from e

        try:
            lifemojis = parse_lifemojis(json.loads(raw))
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            raise NetworkUnavailable(f"Unexpected lifemoji response: {e}") from e
        if not lifemojis:
            raise NetworkUnavailable("Unexpected lifemoji response: empty vocabulary")

        path = self.paths.lifemojis().path
        try:
            atomic_write_text(path, raw)
        except OSError as e:
            raise StoreUnavailable(f"Cannot write lifemoji cache {path}: {e}") from e
        logger.info("Lifemojis updated successfully (%d entries)", len(lifemojis))
        return lifemojis
