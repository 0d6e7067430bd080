"""URL manipulation utilities for icon resolution"""

import re
from typing import Optional
from urllib.parse import SplitResult, urljoin, urlsplit, urlunsplit

from iconfetcher.encoding import CharacterEncoder
from iconfetcher.exceptions import InvalidInputURL, InvalidScheme, MissingHost

# `host:port` only when the prefix looks like a host name, so `tel:911` keeps its scheme.
_PREFIX_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):(\d?)")
_DIGITS_RE = re.compile(r"\d+", re.ASCII)


def normalize_url(
    url: str, encoder: Optional[CharacterEncoder] = None, charset: str = "utf-8"
) -> tuple[str, str]:
    """Validate a user supplied URL for icon retrieval and force it onto https.

    Scheme-less and `http` URLs are rewritten to `https`; host, path and query are
    preserved. When an encoder is given the text is percent-encoded with it first.

    Returns:
        A `(url, host)` tuple.

    Raises:
        InvalidScheme: The scheme is something other than http(s), e.g. `sms:`.
        MissingHost: No host could be found in the URL.
        InvalidInputURL: The URL could not be encoded or parsed.
    """
    text = url.strip()
    if encoder is not None:
        encoded = encoder.encode_url(text, charset)
        if encoded is None:
            raise InvalidInputURL(f"Failed to encode URL {url!r} with charset {charset!r}")
        text = encoded

    if not text:
        raise InvalidInputURL("Empty URL")

    if not _has_scheme(text):
        text = f"https://{text.lstrip('/')}"

    try:
        parts = urlsplit(text)
        # Accessing the port validates it.
        parts.port
    except ValueError as e:
        raise InvalidInputURL(f"Failed to parse URL {url!r}: {e}") from e

    scheme = parts.scheme.lower()
    if scheme not in ("http", "https"):
        raise InvalidScheme(scheme)

    if not parts.hostname:
        raise MissingHost(f"URL {url!r} has no host")

    return urlunsplit(parts._replace(scheme="https")), parts.hostname


def _has_scheme(text: str) -> bool:
    match = _PREFIX_RE.match(text)
    if match is None:
        return False
    prefix, port_digit = match.groups()
    looks_like_host = "." in prefix or prefix.lower() == "localhost"
    return not (looks_like_host and port_digit)


def force_https(url: str) -> str:
    """Replace the scheme of an absolute URL with `https`."""
    return urlunsplit(urlsplit(url)._replace(scheme="https"))


def resolve_icon_href(href: str, page_url: str) -> Optional[str]:
    """Resolve a (possibly relative) link href against the page URL, on https."""
    href = href.strip()
    if not href:
        return None
    try:
        return force_https(urljoin(page_url, href))
    except ValueError:
        return None


def is_valid_url(url: str) -> bool:
    """Check if URL is absolute, has a host and can be requested."""
    if not url or any(char.isspace() for char in url):
        return False
    try:
        parts: SplitResult = urlsplit(url)
        parts.port
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


def parse_size(value: Optional[str]) -> int:
    """Parse the pixel size from a `sizes` attribute like "144x144", 0 if unknown."""
    if not value:
        return 0
    token = value.strip().split("x", 1)[0]
    return int(token) if _DIGITS_RE.fullmatch(token) else 0


def parse_filename_size(filename: str) -> int:
    """Parse the pixel size embedded in a conventional icon filename.

    The size is the last dash-separated token in front of the first "x", so
    "apple-touch-icon-152x152.png" gives 152 and "favicon.ico" gives 0.
    """
    token = filename.split("x", 1)[0].rsplit("-", 1)[-1]
    return int(token) if _DIGITS_RE.fullmatch(token) else 0
