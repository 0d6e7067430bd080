"""I/O components for downloading icon candidates"""

from iconfetcher.io.async_icon_downloader import AsyncIconDownloader

__all__ = ["AsyncIconDownloader"]
