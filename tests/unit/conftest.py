# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the unit test directory."""

import asyncio
from io import BytesIO
from typing import Awaitable, Callable, Optional

import httpx
import pytest
from PIL import Image as PILImage
from pytest_mock import MockerFixture

from iconfetcher.models import IconCandidate


async def settle(rounds: int = 10) -> None:
    """Let the event loop run every callback that is ready."""
    for _ in range(rounds):
        await asyncio.sleep(0)


class ScriptedDownloader:
    """Downloader stand-in whose fetches only terminate when the test releases them.

    Releasing fetches one at a time fixes the order in which they arrive.
    """

    def __init__(self, payloads: dict[str, Optional[bytes]]) -> None:
        self.payloads = payloads
        self.gates = {href: asyncio.Event() for href in payloads}
        self.requested: list[str] = []
        self.cancelled: list[str] = []

    async def download_icon(self, candidate: IconCandidate) -> Optional[IconCandidate]:
        self.requested.append(candidate.href)
        try:
            await self.gates[candidate.href].wait()
        except asyncio.CancelledError:
            self.cancelled.append(candidate.href)
            raise
        payload = self.payloads[candidate.href]
        return candidate.with_data(payload) if payload else None

    async def release(self, *hrefs: str) -> None:
        """Let the given fetches terminate, one after the other."""
        for href in hrefs:
            self.gates[href].set()
            await settle()


@pytest.fixture(name="png_bytes")
def fixture_png_bytes() -> Callable[[int], bytes]:
    """Return a function that renders a square PNG of the given size."""

    def png_bytes(size: int = 16) -> bytes:
        buffer = BytesIO()
        PILImage.new("RGBA", (size, size), (255, 0, 0, 255)).save(buffer, format="PNG")
        return buffer.getvalue()

    return png_bytes


@pytest.fixture(name="candidate")
def fixture_candidate() -> Callable[..., IconCandidate]:
    """Return a function that creates an IconCandidate."""

    def candidate(
        href: str = "https://example.com/favicon.ico",
        rel: str = "icon",
        size: int = 0,
        data: Optional[bytes] = None,
    ) -> IconCandidate:
        return IconCandidate(href=href, rel=rel, size=size, data=data)

    return candidate


@pytest.fixture(name="mock_response")
def fixture_mock_response(mocker: MockerFixture):
    """Return a factory for mocked `httpx.Response` objects."""

    def _create_mock_response(
        status: int = 200,
        content: bytes = b"",
        url: str = "https://example.com/",
        charset_encoding: Optional[str] = None,
    ):
        response = mocker.MagicMock(spec=httpx.Response)
        response.status_code = status
        response.content = content
        response.url = httpx.URL(url)
        response.charset_encoding = charset_encoding
        return response

    return _create_mock_response


@pytest.fixture(name="mock_http_client")
def fixture_mock_http_client(mocker: MockerFixture):
    """Return a factory for a mocked `httpx.AsyncClient`.

    The factory takes a coroutine function `(url, **kwargs) -> response` used as the
    side effect of `get`.
    """

    def _create_mock_client(handler: Callable[..., Awaitable[object]]):
        client = mocker.MagicMock(spec=httpx.AsyncClient)
        client.get = mocker.AsyncMock(side_effect=handler)
        client.aclose = mocker.AsyncMock()
        return client

    return _create_mock_client


@pytest.fixture(name="settle")
def fixture_settle() -> Callable[..., Awaitable[None]]:
    """Return the coroutine function that drains ready event loop callbacks."""
    return settle


@pytest.fixture(name="scripted_downloader")
def fixture_scripted_downloader() -> Callable[[dict[str, Optional[bytes]]], ScriptedDownloader]:
    """Return a factory for downloaders whose fetches terminate on demand."""
    return ScriptedDownloader
