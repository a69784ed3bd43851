"""File-based persistence implementations."""

from clip_downloader.infrastructure.storage.json_store import JsonClipStore, JsonCredentialStore

__all__ = [
    "JsonClipStore",
    "JsonCredentialStore",
]
