"""A helper to create asynchronous HTTP client (via `httpx.AsyncClient`)
with common configurations.
"""

from httpx import AsyncClient, Limits, Timeout

from iconfetcher.config import settings


def create_http_client(
    max_connections: int | None = None,
    connect_timeout: float | None = None,
    request_timeout: float | None = None,
    follow_redirects: bool | None = None,
) -> AsyncClient:
    """Create a new `httpx.AsyncClient` with common configurations.

    Any argument left as `None` is taken from the `http` section of the settings.

    Args:
      - `max_connections` {int}: Max connections of the connection pool.
      - `connect_timeout` {float}: The timeout for establishing a connection to the host.
      - `request_timeout` {float}: The timeout for handling a request to the host.
        Pool acquisition shares it, so queued requests time out as well.
      - `follow_redirects` {bool}: Whether redirects are followed.
    Returns:
      - {AsyncClient}: An async HTTP client.
    """
    if request_timeout is None:
        request_timeout = float(settings.http.request_timeout_sec)
    if connect_timeout is None:
        connect_timeout = float(settings.http.connect_timeout_sec)
    if max_connections is None:
        max_connections = int(settings.http.max_connections)
    if follow_redirects is None:
        follow_redirects = bool(settings.http.follow_redirects)

    return AsyncClient(
        limits=Limits(max_connections=max_connections),
        timeout=Timeout(request_timeout, connect=connect_timeout, pool=request_timeout),
        follow_redirects=follow_redirects,
    )
