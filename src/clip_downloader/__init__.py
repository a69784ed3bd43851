"""Twitch Clip Downloader - Fetch clip metadata for a broadcaster and download the clips."""

__version__ = "0.1.0"
__description__ = "Download all Twitch clips of a broadcaster with bounded concurrency"

from clip_downloader.domain.models import ClipCollection, ClipInfo, Credential

__all__ = ["ClipCollection", "ClipInfo", "Credential"]
