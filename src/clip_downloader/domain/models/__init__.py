"""Domain models for the Clip Downloader application."""

from clip_downloader.domain.models.clip import ClipCollection, ClipInfo
from clip_downloader.domain.models.credential import Credential, Pagination, PaginationDirection
from clip_downloader.domain.models.download import (
    BatchDownloadResult,
    DownloadResult,
    DownloadStatus,
    DownloadTask,
)

__all__ = [
    "ClipCollection",
    "ClipInfo",
    "Credential",
    "Pagination",
    "PaginationDirection",
    "DownloadTask",
    "DownloadResult",
    "DownloadStatus",
    "BatchDownloadResult",
]
