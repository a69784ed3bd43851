"""Abstract base class for the clip acquisition workflow."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from clip_downloader.domain.models.clip import ClipCollection
from clip_downloader.domain.models.credential import Credential
from clip_downloader.domain.models.download import BatchDownloadResult
from clip_downloader.domain.services.clip_downloader import CompletionCallback


class ClipService(ABC):
    """
    Abstract service orchestrating the clip acquisition pipeline.

    Each stage can run on its own; every stage persists its output so the
    next one can pick it up in a later run.
    """

    @abstractmethod
    async def check_auth(self) -> Credential:
        """
        Make sure the stored token is usable, refreshing it if needed.

        Raises:
            AuthenticationError: If a new token cannot be obtained
        """
        pass

    @abstractmethod
    async def fetch_clip_info(
        self, user: str, clips_path: Optional[Path] = None
    ) -> ClipCollection:
        """
        Fetch all clips of ``user`` and store them.

        Raises:
            AuthenticationError: If a new token cannot be obtained
            UserNotFoundError: If the user does not exist
            APIError: If the user lookup fails
        """
        pass

    @abstractmethod
    async def create_download_links(
        self, user: Optional[str] = None, clips_path: Optional[Path] = None
    ) -> ClipCollection:
        """
        Derive download links for stored clips, fetching them first if needed.

        Raises:
            ValidationError: If neither a user nor a clip file is given
            StorageError: If the clip file cannot be parsed
        """
        pass

    @abstractmethod
    async def download_clips(
        self,
        user: Optional[str] = None,
        clips_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        on_complete: Optional[CompletionCallback] = None,
        on_planned: Optional[Callable[[int], None]] = None,
    ) -> BatchDownloadResult:
        """
        Download every clip that has a download link.

        ``on_planned`` receives the number of downloads before the first one starts.

        Raises:
            ValidationError: If neither a user nor a clip file is given
            StorageError: If the clip file cannot be parsed
        """
        pass
