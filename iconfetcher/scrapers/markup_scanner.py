"""Markup scanner for extracting icon links declared in a page head"""

import logging
from typing import Any, Iterator, Optional

from bs4 import BeautifulSoup, Tag

from iconfetcher.constants import APPLE_TOUCH_ICON, ICON_RELS, PARSER
from iconfetcher.exceptions import MarkupParseFailed
from iconfetcher.models import IconCandidate
from iconfetcher.utils.url_utils import parse_size, resolve_icon_href

logger = logging.getLogger(__name__)


def iter_link_tags(markup: str) -> Iterator[dict[str, Any]]:
    """Yield the attributes of every `<link>` tag in document order.

    Iteration stops at the first element found after the head element has been
    closed. Attribute values are kept as raw strings.

    Raises:
        MarkupParseFailed: If the markup can't be parsed or walked.
    """
    try:
        # multi_valued_attributes=None keeps `rel="shortcut icon"` as a single string.
        soup = BeautifulSoup(markup, PARSER, multi_valued_attributes=None)
    except Exception as e:
        raise MarkupParseFailed(f"Failed to parse head markup: {e}") from e

    head: Optional[Tag] = None
    try:
        for element in soup.descendants:
            if not isinstance(element, Tag):
                continue
            if head is None and element.name == "head":
                head = element
                continue
            if head is not None and not any(parent is head for parent in element.parents):
                logger.debug("Stopped scanning because the closing head tag was reached.")
                return
            if element.name == "link":
                yield dict(element.attrs)
    except Exception as e:
        raise MarkupParseFailed(f"Failed while scanning head markup: {e}") from e


def is_icon_rel(rel: str) -> bool:
    """Check whether a `rel` value declares an icon we know how to rank."""
    return rel.startswith(APPLE_TOUCH_ICON) or rel in ICON_RELS


class MarkupScanner:
    """Extract icon candidates from `<link>` tags in head markup."""

    def scan(self, markup: str, page_url: str) -> list[IconCandidate]:
        """Return one candidate per accepted icon link, in document order.

        A parse failure is not fatal: candidates emitted before it are kept.
        """
        candidates: list[IconCandidate] = []
        try:
            for attrs in iter_link_tags(markup):
                candidate = self._candidate_from_link(attrs, page_url)
                if candidate is not None:
                    candidates.append(candidate)
                    logger.debug(f"Appended icon {candidate.href}.")
        except MarkupParseFailed as e:
            logger.warning(f"Error scanning head markup, keeping {len(candidates)} icons: {e}")

        return candidates

    def _candidate_from_link(self, attrs: dict[str, Any], page_url: str) -> Optional[IconCandidate]:
        rel = attrs.get("rel")
        if not isinstance(rel, str) or not is_icon_rel(rel):
            return None

        href = attrs.get("href")
        absolute = resolve_icon_href(href, page_url) if isinstance(href, str) else None
        if absolute is None:
            logger.debug(f"Failed to format <link> href {href!r} into absolute URL.")
            return None

        sizes = attrs.get("sizes")
        return IconCandidate(
            href=absolute,
            rel=rel,
            size=parse_size(sizes if isinstance(sizes, str) else None),
        )
