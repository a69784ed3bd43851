"""Media download implementations."""

from clip_downloader.infrastructure.download.http_downloader import HttpClipDownloader, chunked

__all__ = [
    "HttpClipDownloader",
    "chunked",
]
