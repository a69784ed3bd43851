"""Default implementation of the clip acquisition service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from clip_downloader.application.services.download_planner import plan_downloads
from clip_downloader.application.services.url_resolver import needs_resolution, resolve
from clip_downloader.domain.exceptions import StorageError, ValidationError
from clip_downloader.domain.models.clip import ClipCollection, ClipInfo
from clip_downloader.domain.models.credential import Credential
from clip_downloader.domain.models.download import BatchDownloadResult
from clip_downloader.domain.services.clip_downloader import ClipDownloader, CompletionCallback
from clip_downloader.domain.services.clip_repository import ClipRepository
from clip_downloader.domain.services.clip_service import ClipService
from clip_downloader.domain.services.configuration_provider import ConfigurationProvider
from clip_downloader.domain.services.storage import ClipStore, CredentialStore
from clip_downloader.infrastructure.twitch.auth_manager import TwitchAuthManager

logger = logging.getLogger(__name__)

UNKNOWN_USER_DIR = "empty"


class DefaultClipService(ClipService):
    """
    Default implementation of the clip acquisition service.

    Runs auth, metadata fetch, link creation and download strictly one after
    another, persisting the credential and clip info between stages.
    """

    def __init__(
        self,
        auth_manager: TwitchAuthManager,
        clip_repository: ClipRepository,
        downloader: ClipDownloader,
        credential_store: CredentialStore,
        clip_store: ClipStore,
        config_provider: ConfigurationProvider,
    ) -> None:
        """
        Initialize the clip service.

        Args:
            auth_manager: Keeps the access token valid
            clip_repository: Source of clip metadata
            downloader: Writes clip media to disk
            credential_store: Persisted credential
            clip_store: Persisted clip info files
            config_provider: Provider for configuration settings
        """
        self.auth_manager = auth_manager
        self.clip_repository = clip_repository
        self.downloader = downloader
        self.credential_store = credential_store
        self.clip_store = clip_store
        self.config_provider = config_provider

    async def check_auth(self) -> Credential:
        """Load the stored credential and refresh it if needed."""
        logger.debug("Checking on auth status")
        credential = self.credential_store.load()
        return await self.auth_manager.ensure_valid_token(credential)

    async def fetch_clip_info(
        self, user: str, clips_path: Optional[Path] = None
    ) -> ClipCollection:
        """Fetch all clips of ``user`` and write them to the clip info file."""
        collection = await self._fetch(user)
        path = clips_path or self.default_clips_path(user)
        self.clip_store.save(path, collection)
        return collection

    async def create_download_links(
        self,
        user: Optional[str] = None,
        clips_path: Optional[Path] = None,
        on_resolved: Optional[Callable[[ClipInfo], None]] = None,
    ) -> ClipCollection:
        """Resolve download links for the stored clips and write them back."""
        path = self._clips_path(user, clips_path)
        collection = await self._load_or_fetch(user, path)

        logger.info(f"Creating download links for {len(collection)} clips")
        resolved = resolve(collection, on_resolved)
        self.clip_store.save(path, resolved)
        return resolved

    async def download_clips(
        self,
        user: Optional[str] = None,
        clips_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        on_complete: Optional[CompletionCallback] = None,
        on_planned: Optional[Callable[[int], None]] = None,
    ) -> BatchDownloadResult:
        """Download every clip of the stored (or freshly fetched) collection."""
        path = self._clips_path(user, clips_path)
        collection = await self._load_or_fetch(user, path)

        if needs_resolution(collection):
            logger.info("No clip contained download info so attempting to create download links")
            collection = resolve(collection)

        directory = output_dir or self.config_provider.get_download_dir() / (user or UNKNOWN_USER_DIR)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(str(directory), "Could not create download dir", e) from e

        tasks = plan_downloads(collection, directory)
        skipped = len(collection) - len(tasks)
        if skipped:
            logger.warning(f"Skipping {skipped} clips without a download link")
        if on_planned is not None:
            on_planned(len(tasks))

        logger.info(f"Downloading {len(tasks)} clips into {directory}")
        return await self.downloader.download_all(tasks, on_complete)

    def default_clips_path(self, user: str) -> Path:
        """Clip info file used when no explicit path is given."""
        return self.config_provider.get_clip_info_dir() / f"{user}.json"

    def _clips_path(self, user: Optional[str], clips_path: Optional[Path]) -> Path:
        if clips_path is not None:
            return clips_path
        if user:
            return self.default_clips_path(user)
        raise ValidationError("user", "", "Must provide either a user or a clip info file")

    async def _load_or_fetch(self, user: Optional[str], path: Path) -> ClipCollection:
        if self.clip_store.exists(path):
            return self.clip_store.load(path)
        if not user:
            raise StorageError(str(path), "Clip info file does not exist and user not provided")
        logger.info(f"No clip info at {path}, fetching clips for {user}")
        return await self._fetch(user)

    async def _fetch(self, user: str) -> ClipCollection:
        credential = await self.check_auth()
        headers = self.auth_manager.request_headers(credential)

        logger.info(f"Retrieving clips for {user}")
        collection = await self.clip_repository.fetch_all_clips(user, headers)

        if collection.truncated:
            logger.error(f"Clip listing for {user} stopped early, got {len(collection)} clips")
        else:
            logger.info(f"Finished with {len(collection)} clips")
        return collection
