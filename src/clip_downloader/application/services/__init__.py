"""Application services for business logic orchestration."""

from clip_downloader.application.services.clip_service import DefaultClipService
from clip_downloader.application.services.download_planner import clip_file_name, plan_downloads
from clip_downloader.application.services.url_resolver import resolve, resolve_video_url

__all__ = [
    "DefaultClipService",
    "clip_file_name",
    "plan_downloads",
    "resolve",
    "resolve_video_url",
]
