"""Resolve the best icon a website serves."""

from iconfetcher.config_logging import configure_logging
from iconfetcher.icon_fetcher import IconFetcher
from iconfetcher.models import IconCandidate, ResolvedIcon

__all__ = ["IconFetcher", "IconCandidate", "ResolvedIcon", "configure_logging"]
