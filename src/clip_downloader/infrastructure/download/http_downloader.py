"""HTTP implementation of the batch clip downloader."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Sequence

import httpx

from clip_downloader.domain.models.download import (
    BatchDownloadResult,
    DownloadResult,
    DownloadTask,
)
from clip_downloader.domain.services.clip_downloader import ClipDownloader, CompletionCallback

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY_LIMIT = 10
DEFAULT_CHUNK_SIZE = 64 * 1024


def chunked(tasks: Sequence[DownloadTask], size: int) -> list[list[DownloadTask]]:
    """Split tasks into consecutive groups of at most ``size`` items."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [list(tasks[i:i + size]) for i in range(0, len(tasks), size)]


class HttpClipDownloader(ClipDownloader):
    """
    Streams clip media to disk in fixed-size chunks of concurrent downloads.

    All downloads of a chunk must finish before the next chunk starts, so
    no more than ``concurrency_limit`` requests and open files exist at any
    time. Each download gets a single attempt.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the downloader.

        Args:
            http_client: Client shared by every download
            concurrency_limit: Maximum downloads in flight
            chunk_size: Bytes read from the response per write
            timeout: Per-request timeout in seconds (None waits indefinitely)
        """
        if concurrency_limit < 1:
            raise ValueError(f"Concurrency limit must be positive, got {concurrency_limit}")
        self.http_client = http_client
        self.concurrency_limit = concurrency_limit
        self.chunk_size = chunk_size
        self.timeout = httpx.Timeout(timeout)

    async def download_all(
        self,
        tasks: Sequence[DownloadTask],
        on_complete: Optional[CompletionCallback] = None,
    ) -> BatchDownloadResult:
        """
        Download every task, one chunk at a time.

        Args:
            tasks: Downloads to perform
            on_complete: Called once per finished task, successful or not

        Returns:
            BatchDownloadResult with one result per task, in task order
        """
        batch_result = BatchDownloadResult()
        chunks = chunked(tasks, self.concurrency_limit)
        logger.info(
            f"Downloading {len(tasks)} clips in {len(chunks)} chunks "
            f"of up to {self.concurrency_limit}"
        )

        for index, chunk in enumerate(chunks, start=1):
            logger.debug(f"Starting chunk {index}/{len(chunks)} with {len(chunk)} downloads")
            outcomes = await asyncio.gather(
                *(self._download_and_report(task, on_complete) for task in chunk),
                return_exceptions=True,
            )

            for task, outcome in zip(chunk, outcomes):
                if isinstance(outcome, DownloadResult):
                    batch_result.add_result(outcome)
                else:
                    # Unexpected error escaped the task; record it like any other failure
                    batch_result.add_result(
                        DownloadResult.failure(task, f"Unexpected error: {outcome}")
                    )

        for failed in batch_result.failed:
            logger.error(f"Could not download clip for reason: {failed.error_message} ({failed.task})")

        batch_result.complete()
        logger.info(
            f"Downloads complete: {len(batch_result.succeeded)} succeeded, "
            f"{len(batch_result.failed)} failed"
        )
        return batch_result

    async def _download_and_report(
        self, task: DownloadTask, on_complete: Optional[CompletionCallback]
    ) -> DownloadResult:
        try:
            result = await self.download_one(task)
        except Exception as e:
            result = DownloadResult.failure(task, f"Unexpected error: {e}")
        if on_complete is not None:
            on_complete(result)
        return result

    async def download_one(self, task: DownloadTask) -> DownloadResult:
        """
        Stream a single clip to its destination.

        The destination is only created once the response has started.

        Returns:
            Success with the number of bytes written, or a failure with the reason
        """
        try:
            async with self.http_client.stream(
                "GET", task.video_url, timeout=self.timeout
            ) as response:
                if response.is_error:
                    return DownloadResult.failure(
                        task, f"Could not make request: HTTP {response.status_code}"
                    )

                try:
                    handle = open(task.destination, "wb")
                except OSError as e:
                    logger.error(f"Could not open file for writing: {task.destination}")
                    return DownloadResult.failure(task, f"Could not open file for writing: {e}")

                bytes_written = 0
                with handle:
                    try:
                        async for data in response.aiter_bytes(self.chunk_size):
                            handle.write(data)
                            bytes_written += len(data)
                    except httpx.HTTPError as e:
                        logger.error(f"Could not get bytes from data: {e!r}")
                        return DownloadResult.failure(
                            task, f"Could not get bytes from response: {e}"
                        )
                    except OSError as e:
                        return DownloadResult.failure(task, f"Could not write to file: {e}")
                    handle.flush()

                return DownloadResult.success(task, bytes_written)

        except httpx.HTTPError as e:
            logger.error(f"File error for {task.destination} with error {e!r}")
            return DownloadResult.failure(task, f"Could not make request: {e}")
