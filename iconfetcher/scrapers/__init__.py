"""Head document scraping components"""

from iconfetcher.scrapers.head_extractor import extract_head
from iconfetcher.scrapers.head_fetcher import HeadFetcher
from iconfetcher.scrapers.markup_scanner import MarkupScanner

__all__ = ["HeadFetcher", "MarkupScanner", "extract_head"]
