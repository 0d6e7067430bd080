"""Concurrent fetching of icon candidates and per-call resolution state"""

import asyncio
import logging
import threading
from functools import partial
from typing import Any, Coroutine, Optional

from iconfetcher.favicon.favicon_selector import FaviconSelector
from iconfetcher.io.async_icon_downloader import AsyncIconDownloader
from iconfetcher.models import IconCandidate
from iconfetcher.utils.url_utils import is_valid_url

logger = logging.getLogger(__name__)


class ResolutionSession:
    """State owned by a single icon resolution.

    Holds the candidate list, the completion counter and the running best. The
    counter and the best are only updated together under the session lock. Once
    abandoned, a session cancels its tasks and ignores any completion that still
    arrives.
    """

    def __init__(self, url: str, host: str) -> None:
        self.url = url
        self.host = host
        self.candidates: list[IconCandidate] = []
        self.dispatched = 0
        self.completed = 0
        self.selector = FaviconSelector()
        self.abandoned = False
        self._lock = threading.Lock()
        self._tasks: set[asyncio.Task[Any]] = set()
        self._done: Optional[asyncio.Future[Optional[IconCandidate]]] = None

    @property
    def best(self) -> Optional[IconCandidate]:
        """The best candidate fetched so far."""
        return self.selector.best

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Run a coroutine as a task that is cancelled if the session is abandoned."""
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def start(self, dispatched: int) -> "asyncio.Future[Optional[IconCandidate]]":
        """Set the completion denominator and return the future fired on completion."""
        self.dispatched = dispatched
        self._done = asyncio.get_running_loop().create_future()
        if dispatched == 0:
            self._done.set_result(None)
        return self._done

    def record(self, outcome: Optional[IconCandidate]) -> None:
        """Count one terminal fetch outcome and offer a successful one to the selector."""
        with self._lock:
            if self.abandoned:
                return
            self.completed += 1
            if outcome is not None:
                logger.info(
                    f"Found icon {self.completed} of {self.dispatched} at URL {outcome.href}."
                )
                self.selector.offer(outcome)
            finished = self.completed == self.dispatched
            best = self.selector.best

        if finished and self._done is not None and not self._done.done():
            self._done.set_result(best)

    def abandon(self) -> None:
        """Cancel every outstanding fetch and resolve the session with no icon."""
        with self._lock:
            if self.abandoned:
                return
            self.abandoned = True

        for task in list(self._tasks):
            task.cancel()
        if self._done is not None and not self._done.done():
            self._done.set_result(None)


class FetchCoordinator:
    """Fetch every candidate of a session concurrently and select the best response."""

    def __init__(self, downloader: AsyncIconDownloader) -> None:
        self.downloader = downloader

    async def run(self, session: ResolutionSession) -> Optional[IconCandidate]:
        """Dispatch one fetch per valid candidate and wait for all of them to terminate.

        Candidates with malformed URLs are neither fetched nor waited on. Returns
        the selected candidate, or None if no fetch succeeded or the session was
        abandoned.
        """
        if session.abandoned:
            return None

        dispatchable = []
        for candidate in session.candidates:
            if is_valid_url(candidate.href):
                dispatchable.append(candidate)
            else:
                logger.debug(
                    f"Possible icon URL {candidate.href!r} was malformed, so it is not fetched."
                )

        done = session.start(len(dispatchable))
        for candidate in dispatchable:
            task = session.spawn(self.downloader.download_icon(candidate))
            task.add_done_callback(partial(self._on_fetch_done, session))

        return await done

    @staticmethod
    def _on_fetch_done(session: ResolutionSession, task: asyncio.Task[Any]) -> None:
        if task.cancelled():
            outcome = None
        elif task.exception() is not None:
            logger.warning(f"Unexpected error fetching icon: {task.exception()}")
            outcome = None
        else:
            outcome = task.result()
        session.record(outcome)
