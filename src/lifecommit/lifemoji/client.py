"""HTTP client protocol for the lifemoji vocabulary, and its aiohttp implementation."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import aiohttp

logger = logging.getLogger(__name__)


@runtime_checkable
class LifemojiClient(Protocol):
    """Protocol for whatever fetches the raw vocabulary document."""

    async def get_text(self, path: str) -> str:
        """GET ``path`` and return the response body.

        Transport failures propagate as aiohttp.ClientError, TimeoutError or OSError.
        """
        ...


class HttpLifemojiClient:
    """Single GET against ``base_url``. No auth, no retry."""

    def __init__(self, base_url: str, timeout: int = 10) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_text(self, path: str) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s", url)
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.text(encoding="utf-8")
