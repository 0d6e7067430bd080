"""Find the most suitable icon image a site serves"""

import asyncio
import logging
from types import TracebackType
from typing import Optional

from httpx import AsyncClient

from iconfetcher.encoding import CharacterEncoder
from iconfetcher.exceptions import HeadFetchFailed, ImageDecodeFailed, InvalidInputURL
from iconfetcher.favicon.candidate_generator import generate_candidates
from iconfetcher.favicon.fetch_coordinator import FetchCoordinator, ResolutionSession
from iconfetcher.io.async_icon_downloader import AsyncIconDownloader
from iconfetcher.models import HeadDocument, IconCandidate, ResolvedIcon
from iconfetcher.scrapers.head_extractor import extract_head
from iconfetcher.scrapers.head_fetcher import HeadFetcher
from iconfetcher.scrapers.markup_scanner import MarkupScanner
from iconfetcher.utils.http_client import create_http_client
from iconfetcher.utils.url_utils import normalize_url

logger = logging.getLogger(__name__)


class IconFetcher:
    """Resolve the best icon of a site from its head markup and conventional icon paths.

    Only one resolution is live at a time: starting a new one abandons the
    previous one, whose call then returns None. The raw HTML and charset of the
    last fetched page are kept in `html` and `encoding` for reuse.

    Use as an async context manager, or call `aclose()`, to release the HTTP client.
    """

    def __init__(
        self,
        http_client: Optional[AsyncClient] = None,
        head_fetcher: Optional[HeadFetcher] = None,
        scanner: Optional[MarkupScanner] = None,
        downloader: Optional[AsyncIconDownloader] = None,
        encoder: Optional[CharacterEncoder] = None,
    ) -> None:
        self._owns_client = http_client is None
        self.http_client = http_client or create_http_client()
        self.head_fetcher = head_fetcher or HeadFetcher(self.http_client)
        self.scanner = scanner or MarkupScanner()
        self.coordinator = FetchCoordinator(downloader or AsyncIconDownloader(self.http_client))
        self.encoder = encoder
        self.html: Optional[str] = None
        self.encoding: Optional[str] = None
        self._session: Optional[ResolutionSession] = None

    async def __aenter__(self) -> "IconFetcher":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def fetch_icon(self, url: str, charset: str = "utf-8") -> Optional[ResolvedIcon]:
        """Return the decoded best icon for the site at `url`, or None if there is none.

        Never raises for network, markup or image problems; an unusable URL is
        logged and also reported as None.

        Args:
            url: The URL as entered by the user.
            charset: Charset label passed to the encoder, if one is configured.
        """
        self.cancel()

        self.html = None
        self.encoding = None

        try:
            normalized_url, host = normalize_url(url, self.encoder, charset)
        except InvalidInputURL as e:
            logger.warning(f"Cannot fetch icon for {url!r}: {e}")
            return None

        session = ResolutionSession(normalized_url, host)
        self._session = session
        try:
            return await self._resolve(session)
        finally:
            # Nothing started by this call may outlive it.
            session.abandon()

    def cancel(self) -> None:
        """Abandon the resolution in progress, if any."""
        if self._session is not None and not self._session.abandoned:
            logger.debug(f"Abandoning icon resolution for {self._session.url}")
            self._session.abandon()

    async def aclose(self) -> None:
        """Abandon any resolution and close the HTTP client if this fetcher created it."""
        self.cancel()
        if self._owns_client:
            await self.http_client.aclose()

    async def _resolve(self, session: ResolutionSession) -> Optional[ResolvedIcon]:
        scanned = await self._find_icons_in_html(session)
        if scanned is None:
            return None

        session.candidates = scanned + generate_candidates(session.host)
        best = await self.coordinator.run(session)
        if session.abandoned:
            return None
        if best is None:
            logger.info(f"No icon found for {session.url}")
            return None

        try:
            icon = ResolvedIcon.from_candidate(best)
        except ImageDecodeFailed as e:
            logger.info(f"Best icon for {session.url} could not be decoded: {e}")
            return None

        logger.info(f"Creating icon from data at URL {best.href}.")
        return icon

    async def _find_icons_in_html(
        self, session: ResolutionSession
    ) -> Optional[list[IconCandidate]]:
        """Scan the page head for icon links. Returns None if the session was abandoned."""
        task = session.spawn(self.head_fetcher.fetch(session.url))
        try:
            document: HeadDocument = await task
        except asyncio.CancelledError:
            if not session.abandoned:
                raise
            return None
        except HeadFetchFailed as e:
            logger.info(f"Proceeding without page icons: {e}")
            return [] if not session.abandoned else None

        if session.abandoned:
            return None

        self.html = document.text
        self.encoding = document.encoding
        return self.scanner.scan(extract_head(document.text), document.url)
