"""Download task and result models for tracking batch downloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class DownloadStatus(str, Enum):
    """Outcome of a single download."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class DownloadTask:
    """A media address paired with the file it is written to."""

    video_url: str
    destination: Path

    def __str__(self) -> str:
        return f"{self.video_url} -> {self.destination}"


@dataclass
class DownloadResult:
    """
    Result of downloading a single clip.

    Failures carry a human-readable reason and never affect other tasks.
    """

    task: DownloadTask
    status: DownloadStatus
    error_message: str | None = None
    bytes_written: int = 0
    finished_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def success(cls, task: DownloadTask, bytes_written: int) -> DownloadResult:
        return cls(task=task, status=DownloadStatus.SUCCEEDED, bytes_written=bytes_written)

    @classmethod
    def failure(cls, task: DownloadTask, error_message: str) -> DownloadResult:
        return cls(task=task, status=DownloadStatus.FAILED, error_message=error_message)

    @property
    def is_success(self) -> bool:
        """Whether the file was fully written."""
        return self.status == DownloadStatus.SUCCEEDED

    @property
    def is_failure(self) -> bool:
        """Whether the download failed."""
        return self.status == DownloadStatus.FAILED

    def __str__(self) -> str:
        """Human-readable string representation."""
        emoji = "✅" if self.is_success else "❌"
        error_part = f" - {self.error_message}" if self.error_message else ""
        return f"{emoji} {self.task.destination.name} ({self.status.value}){error_part}"


@dataclass
class BatchDownloadResult:
    """
    Results of a batch download, in the order the tasks were given.

    Aggregates individual results for reporting; a batch with failures is
    still a completed batch.
    """

    results: list[DownloadResult] = field(default_factory=list)
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> list[DownloadResult]:
        """Get only the successful downloads."""
        return [r for r in self.results if r.is_success]

    @property
    def failed(self) -> list[DownloadResult]:
        """Get only the failed downloads."""
        return [r for r in self.results if r.is_failure]

    @property
    def has_failures(self) -> bool:
        return any(r.is_failure for r in self.results)

    @property
    def success_rate(self) -> float:
        """Calculate the success rate as a percentage."""
        if not self.results:
            return 0.0
        return (len(self.succeeded) / len(self.results)) * 100

    @property
    def elapsed_seconds(self) -> float:
        end = self.completed_at or datetime.now()
        return (end - self.started_at).total_seconds()

    def add_result(self, result: DownloadResult) -> None:
        self.results.append(result)

    def complete(self) -> None:
        """Mark the batch as completed."""
        self.completed_at = datetime.now()

    def __str__(self) -> str:
        return (
            f"BatchDownloadResult(total={self.total}, succeeded={len(self.succeeded)}, "
            f"failed={len(self.failed)}, success_rate={self.success_rate:.1f}%)"
        )
