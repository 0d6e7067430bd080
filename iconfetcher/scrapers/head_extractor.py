"""Bound an HTML document to its head element"""

import logging

logger = logging.getLogger(__name__)

HEAD_OPEN: str = "<head"
HEAD_CLOSE: str = "</head>"


def extract_head(document: str) -> str:
    """Return the document cut down to its first `<head ...>...</head>` section.

    Only the first occurrence of "<head" is considered, and it must be followed by
    ">" or whitespace so that "<header" doesn't match. Without a head the full
    document is returned unchanged.
    """
    start = document.find(HEAD_OPEN)
    if start == -1:
        logger.debug("No head tag found; using full HTML source code.")
        return document

    boundary = document[start + len(HEAD_OPEN) : start + len(HEAD_OPEN) + 1]
    if boundary != ">" and not boundary.isspace():
        logger.debug("No head tag found; using full HTML source code.")
        return document

    end = document.find(HEAD_CLOSE, start)
    if end == -1:
        return document[start:]
    return document[start : end + len(HEAD_CLOSE)]
