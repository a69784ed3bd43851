"""Derive clip media addresses from thumbnail addresses."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable, Optional

from clip_downloader.domain.models.clip import ClipCollection, ClipInfo

PREVIEW_SUFFIX = re.compile(r"-preview-\d+x\d+\.[a-zA-Z]+")
VIDEO_EXTENSION = ".mp4"


def resolve_video_url(thumbnail_url: str) -> str:
    """
    Turn a thumbnail address into the clip's media address.

    ``.../AT-cm%7C123-preview-480x272.jpg`` becomes ``.../AT-cm%7C123.mp4``.
    Addresses without a preview suffix come back unchanged.
    """
    return PREVIEW_SUFFIX.sub(VIDEO_EXTENSION, thumbnail_url, count=1)


def resolve(
    collection: ClipCollection,
    on_resolved: Optional[Callable[[ClipInfo], None]] = None,
) -> ClipCollection:
    """
    Fill in ``video_url`` for every clip.

    The input collection is left untouched; running this on an already
    resolved collection yields the same addresses.

    Args:
        collection: Clips to resolve
        on_resolved: Called once per resolved clip

    Returns:
        A new collection with download links
    """
    resolved = ClipCollection(truncated=collection.truncated)
    for clip in collection:
        updated = replace(clip, video_url=resolve_video_url(clip.thumbnail_url))
        resolved.clips.append(updated)
        if on_resolved is not None:
            on_resolved(updated)
    return resolved


def needs_resolution(collection: ClipCollection) -> bool:
    """Whether no clip in the collection has a download link yet."""
    return not collection.has_video_urls
