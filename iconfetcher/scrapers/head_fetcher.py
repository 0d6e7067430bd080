"""Head fetcher for retrieving the HTML that declares a site's icons"""

import asyncio
import logging
from typing import Optional

import httpx
from httpx import AsyncClient

from iconfetcher.config import settings
from iconfetcher.encoding import codec_name
from iconfetcher.exceptions import HeadFetchFailed
from iconfetcher.models import HeadDocument

logger = logging.getLogger(__name__)


class HeadFetcher:
    """Retrieve a page with a mobile user agent and decode it to text."""

    def __init__(
        self,
        session: AsyncClient,
        user_agent: Optional[str] = None,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.session = session
        self.user_agent = user_agent or settings.fetcher.user_agent
        self.request_timeout = (
            request_timeout
            if request_timeout is not None
            else float(settings.http.request_timeout_sec)
        )

    async def fetch(self, url: str) -> HeadDocument:
        """Fetch the page at `url`.

        The body is decoded with the charset declared by the response, falling back
        to UTF-8.

        Raises:
            HeadFetchFailed: On a network error, a timeout, an empty body, or a
                body that can't be decoded.
        """
        try:
            # Bounds the whole request, not just each read.
            response = await asyncio.wait_for(
                self.session.get(url, headers={"User-Agent": self.user_agent}),
                timeout=self.request_timeout,
            )
        except asyncio.TimeoutError as e:
            raise HeadFetchFailed(
                f"Timed out loading URL {url} after {self.request_timeout}s"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise HeadFetchFailed(f"Failed to load URL {url} in background: {e}") from e

        content = response.content
        if not content:
            raise HeadFetchFailed(
                f"Failed to load URL {url} in background (no body returned by server)."
            )

        encoding = codec_name(response.charset_encoding)
        text = self._decode(content, encoding)
        if text is None and encoding != "utf-8":
            logger.debug(f"Body of {url} is not valid {encoding}, retrying as utf-8")
            encoding = "utf-8"
            text = self._decode(content, encoding)
        if text is None:
            raise HeadFetchFailed(f"Failed to decode body of {url}")

        return HeadDocument(url=str(response.url), text=text, encoding=encoding)

    @staticmethod
    def _decode(content: bytes, encoding: str) -> Optional[str]:
        try:
            return content.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return None
