"""Abstract base class for batch media downloads."""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from clip_downloader.domain.models.download import (
    BatchDownloadResult,
    DownloadResult,
    DownloadTask,
)

CompletionCallback = Callable[[DownloadResult], None]


class ClipDownloader(ABC):
    """
    Abstract service that writes clip media to disk.

    Individual failures are reported as results and never abort the batch.
    """

    @abstractmethod
    async def download_all(
        self,
        tasks: Sequence[DownloadTask],
        on_complete: Optional[CompletionCallback] = None,
    ) -> BatchDownloadResult:
        """
        Download every task with bounded concurrency.

        Args:
            tasks: Downloads to perform
            on_complete: Called once per finished task, successful or not

        Returns:
            One result per task, in task order
        """
        pass
