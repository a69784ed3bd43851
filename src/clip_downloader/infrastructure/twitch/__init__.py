"""Twitch API integration implementations."""

from clip_downloader.infrastructure.twitch.api_client import TwitchApiClient
from clip_downloader.infrastructure.twitch.auth_manager import TwitchAuthManager
from clip_downloader.infrastructure.twitch.clip_repository import TwitchClipRepository

__all__ = [
    "TwitchApiClient",
    "TwitchAuthManager",
    "TwitchClipRepository",
]
