"""Abstract base classes for domain services."""

from clip_downloader.domain.services.clip_downloader import ClipDownloader
from clip_downloader.domain.services.clip_repository import ClipRepository
from clip_downloader.domain.services.clip_service import ClipService
from clip_downloader.domain.services.configuration_provider import (
    ConfigurationProvider,
)
from clip_downloader.domain.services.storage import ClipStore, CredentialStore

__all__ = [
    "ClipRepository",
    "ClipDownloader",
    "ClipStore",
    "CredentialStore",
    "ConfigurationProvider",
    "ClipService",
]
