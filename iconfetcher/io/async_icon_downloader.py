"""Async icon downloader for fetching icon candidates from the web"""

import asyncio
import contextlib
import logging
from typing import Optional

import httpx
from httpx import AsyncClient

from iconfetcher.config import settings
from iconfetcher.constants import SUCCESS_STATUS_CODE
from iconfetcher.models import IconCandidate
from iconfetcher.utils.http_client import create_http_client

logger = logging.getLogger(__name__)


class AsyncIconDownloader:
    """Download icon candidates asynchronously using async HTTP client."""

    def __init__(
        self,
        session: Optional[AsyncClient] = None,
        max_concurrent_fetches: Optional[int] = None,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.session = session or create_http_client()
        if max_concurrent_fetches is None:
            max_concurrent_fetches = int(settings.fetcher.max_concurrent_fetches)
        self.semaphore: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(max_concurrent_fetches) if max_concurrent_fetches > 0 else None
        )
        self.request_timeout = (
            request_timeout
            if request_timeout is not None
            else float(settings.http.request_timeout_sec)
        )

    async def download_icon(self, candidate: IconCandidate) -> Optional[IconCandidate]:
        """Fetch a candidate and return a populated copy if the server answers 200 with a body.

        Every failure, timeouts included, yields None.
        """
        slot = self.semaphore if self.semaphore is not None else contextlib.nullcontext()
        async with slot:
            try:
                response = await asyncio.wait_for(
                    self.session.get(candidate.href), timeout=self.request_timeout
                )
            except (asyncio.TimeoutError, httpx.TimeoutException):
                logger.debug(f"Timed out fetching icon from {candidate.href}")
                return None
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.debug(f"Failed to fetch icon from {candidate.href}: {e}")
                return None

        if response.status_code != SUCCESS_STATUS_CODE:
            logger.debug(f"No icon at {candidate.href} (status {response.status_code})")
            return None

        content = response.content
        if not content:
            logger.debug(f"Empty body for icon at {candidate.href}")
            return None

        return candidate.with_data(content)

    async def close(self) -> None:
        """Close HTTP session and release resources."""
        await self.session.aclose()
