"""Favicon selection logic for choosing the best favicon from fetched candidates"""

import logging
from typing import Iterable, Optional

from iconfetcher.models import IconCandidate

logger = logging.getLogger(__name__)


class FaviconSelector:
    """Keep a running best icon, preferring apple-touch-icons, then larger sizes.

    Candidates are compared in arrival order. Among candidates of equal rank the
    latest arrival wins, so the outcome depends on that order.
    """

    def __init__(self) -> None:
        self.best: Optional[IconCandidate] = None

    @staticmethod
    def is_better_favicon(candidate: IconCandidate, best: Optional[IconCandidate]) -> bool:
        """Check if `candidate` should replace the current best."""
        if best is None:
            return True

        if candidate.is_apple_touch_icon != best.is_apple_touch_icon:
            return candidate.is_apple_touch_icon

        return candidate.size >= best.size

    def offer(self, candidate: IconCandidate) -> bool:
        """Compare a fetched candidate with the current best; return True if it replaced it."""
        best = self.best
        if not self.is_better_favicon(candidate, best):
            return False

        if best is None:
            logger.debug("Setting new icon (no best icon yet).")
        elif candidate.is_apple_touch_icon and not best.is_apple_touch_icon:
            logger.debug("Setting new icon (apple-touch-icon preferred).")
        else:
            logger.debug(
                f"Old icon (size {best.size}) replaced by new icon (size {candidate.size})."
            )
        self.best = candidate
        return True

    @classmethod
    def select_best_favicon(cls, candidates: Iterable[IconCandidate]) -> Optional[IconCandidate]:
        """Reduce candidates, in the given order, to the best one."""
        selector = cls()
        for candidate in candidates:
            selector.offer(candidate)
        return selector.best
