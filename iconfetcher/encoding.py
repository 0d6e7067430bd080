"""Character encoding capability used to prepare URLs before they are parsed"""

import codecs
import logging
from typing import Optional, Protocol
from urllib.parse import quote

logger = logging.getLogger(__name__)

# Characters legal in a URL are left alone, including existing escapes.
URL_SAFE_CHARACTERS: str = ":/?#[]@!$&'()*+,;=%~-._"


class CharacterEncoder(Protocol):
    """Turn text into a percent-encoded URL using a charset label."""

    def encode_url(self, text: str, charset: str) -> Optional[str]:  # pragma: no cover
        """Return the encoded URL, or None when the text can't be encoded."""
        ...


class PercentEncoder:
    """Percent-encode URL text with the codec named by a charset label.

    Unknown labels fall back to UTF-8.
    """

    def encode_url(self, text: str, charset: str) -> Optional[str]:
        """Return the encoded URL, or None when the text can't be encoded."""
        codec = codec_name(charset)
        try:
            return quote(text, safe=URL_SAFE_CHARACTERS, encoding=codec, errors="strict")
        except UnicodeEncodeError as e:
            logger.debug(f"Cannot encode URL {text!r} as {codec}: {e}")
            return None


def codec_name(charset: Optional[str], default: str = "utf-8") -> str:
    """Return the Python codec name for a charset label, or the default if unknown."""
    if not charset:
        return default
    try:
        return codecs.lookup(charset.strip().strip('"')).name
    except LookupError:
        logger.debug(f"Unknown charset label {charset!r}, using {default}")
        return default
