"""Turn resolved clips into download tasks."""

from __future__ import annotations

import re
from pathlib import Path

from clip_downloader.domain.models.clip import ClipCollection, ClipInfo
from clip_downloader.domain.models.download import DownloadTask

OFFSET_PATTERN = re.compile(r"-offset-(\d+)")
PATH_SEPARATOR = re.compile(r"/")


def clip_file_name(clip: ClipInfo) -> str:
    """
    Name of the file a clip is saved as.

    Format is ``<created_at>(<offset>) <title>.mp4``. The offset comes from the
    media address and defaults to ``0``; slashes in the title become dashes.
    """
    offset = "0"
    if clip.video_url:
        match = OFFSET_PATTERN.search(clip.video_url)
        if match:
            offset = match.group(1)
    title = PATH_SEPARATOR.sub("-", clip.title)
    return f"{clip.created_at}({offset}) {title}.mp4"


def plan_downloads(collection: ClipCollection, directory: Path) -> list[DownloadTask]:
    """
    Pair every clip that has a download link with its destination file.

    Clips without a link are skipped. Identical names are not deduplicated.
    """
    return [
        DownloadTask(video_url=clip.video_url, destination=directory / clip_file_name(clip))
        for clip in collection
        if clip.video_url
    ]
