"""
Asynchronous export service.

Drives the full log request workflow:
- wait until the service has processed the request
- download every part into a directory, preserving part order
- optionally create the request first (``run``)
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable, Sequence

from metrika_logs.logging import get_logger
from metrika_logs.models.log_request import LogSource
from metrika_logs.services.export._config import (
    DEFAULT_MAX_PARALLEL_PARTS,
    DEFAULT_POLL_INTERVAL,
)
from metrika_logs.services.export._download import PartDownloader
from metrika_logs.services.export._models import ExportMetrics, ExportResult
from metrika_logs.services.export._poller import ReportPoller

if TYPE_CHECKING:
    from metrika_logs.api.services.logs import LogsService
    from metrika_logs.models.log_request import LogRequest, Part
    from metrika_logs.transport import MetrikaTransport

logger = get_logger(__name__)


class AsyncExportService:
    """
    Asynchronous export service.

    Download policy is fail-fast without cleanup: the first part that fails
    aborts the remaining downloads and its error is raised. Files written
    for earlier parts stay on disk and are not reported; callers that want
    cleanup or retries wrap ``download_parts`` themselves.

    Example:
        >>> async with AsyncMetrikaAPI(token="...", counter_id=123) as api:
        ...     log_request = await api.logs.create(
        ...         "2024-01-01", "2024-01-31", fields="ym:s:visitID", source="visits"
        ...     )
        ...     parts = await api.export.wait_ready(log_request.request_id)
        ...     files = await api.export.download_parts(
        ...         log_request.request_id, parts, Path("./exports")
        ...     )
    """

    def __init__(
        self,
        transport: MetrikaTransport,
        logs: LogsService,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        max_parallel: int = DEFAULT_MAX_PARALLEL_PARTS,
    ) -> None:
        if max_parallel < 1:
            raise ValueError("max_parallel must be >= 1")
        self._transport = transport
        self._logs = logs
        self._poller = ReportPoller(logs, poll_interval)
        self._downloader = PartDownloader(transport, logs.counter_id)
        self._max_parallel = max_parallel

    @property
    def poll_interval(self) -> float:
        return self._poller.poll_interval

    @property
    def max_parallel(self) -> int:
        return self._max_parallel

    def configure(
        self,
        poll_interval: float | None = None,
        max_parallel: int | None = None,
    ) -> None:
        """
        Configure export settings.

        Args:
            poll_interval: Seconds between status checks.
            max_parallel: Max concurrent part downloads.
        """
        if poll_interval is not None:
            self._poller = ReportPoller(self._logs, poll_interval)
        if max_parallel is not None:
            if max_parallel < 1:
                raise ValueError("max_parallel must be >= 1")
            self._max_parallel = max_parallel

    async def wait_ready(
        self,
        request_id: int,
        cancel: asyncio.Event | None = None,
        on_status: Callable[[LogRequest], None] | None = None,
    ) -> list[Part]:
        """
        Poll a log request until it is processed and return its parts.

        See ``ReportPoller.wait`` for the error contract.
        """
        return await self._poller.wait(request_id, cancel=cancel, on_status=on_status)

    async def download_part(
        self,
        request_id: int,
        part_number: int,
        dest_dir: Path | str,
    ) -> Path:
        """Download a single part into ``dest_dir``."""
        return await self._downloader.download(request_id, part_number, dest_dir)

    async def download_parts(
        self,
        request_id: int,
        parts: Sequence[Part],
        dest_dir: Path | str,
        max_parallel: int | None = None,
    ) -> list[Path]:
        """
        Download all parts of a processed log request.

        Args:
            request_id: Log request ID.
            parts: Parts returned by ``wait_ready``.
            dest_dir: Directory for the part files (created if missing).
            max_parallel: Max concurrent downloads (default: service setting).

        Returns:
            File paths in the same order as ``parts``.
        """
        parallel = self._max_parallel if max_parallel is None else max_parallel
        if parallel < 1:
            raise ValueError("max_parallel must be >= 1")

        logger.info(
            "downloading_parts",
            request_id=request_id,
            parts=len(parts),
            parallel=parallel,
        )
        if parallel == 1 or len(parts) <= 1:
            files = []
            for part in parts:
                files.append(
                    await self._downloader.download(request_id, part.part_number, dest_dir)
                )
            return files

        return await self._download_concurrently(request_id, parts, dest_dir, parallel)

    async def _download_concurrently(
        self,
        request_id: int,
        parts: Sequence[Part],
        dest_dir: Path | str,
        parallel: int,
    ) -> list[Path]:
        semaphore = asyncio.Semaphore(parallel)

        async def download_one(part: Part) -> Path:
            async with semaphore:
                return await self._downloader.download(request_id, part.part_number, dest_dir)

        tasks = [
            asyncio.create_task(download_one(part), name=f"part-{part.part_number}")
            for part in parts
        ]
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        for task in tasks:
            if not task.cancelled() and task.exception() is not None:
                raise task.exception()  # type: ignore[misc]
        return [task.result() for task in tasks]

    async def run(
        self,
        date1: str,
        date2: str,
        fields: str | Iterable[str],
        dest_dir: Path | str,
        source: LogSource | str = LogSource.VISITS,
        attribution: str | None = None,
        cancel: asyncio.Event | None = None,
        max_parallel: int | None = None,
    ) -> ExportResult:
        """
        Create a log request, wait for it and download every part.

        Returns:
            ExportResult with the request ID, parts, files and metrics.
        """
        metrics = ExportMetrics()
        total_start = time.perf_counter()

        log_request = await self._logs.create(
            date1, date2, fields, source=source, attribution=attribution
        )
        request_id = log_request.request_id
        logger.info("log_request_created", request_id=request_id, status=log_request.status)

        wait_start = time.perf_counter()
        parts = await self.wait_ready(request_id, cancel=cancel)
        metrics.wait_time = time.perf_counter() - wait_start
        metrics.reported_size = sum(part.size for part in parts)

        download_start = time.perf_counter()
        files = await self.download_parts(request_id, parts, dest_dir, max_parallel=max_parallel)
        metrics.download_time = time.perf_counter() - download_start
        metrics.downloaded_size = sum(path.stat().st_size for path in files)
        metrics.total_time = time.perf_counter() - total_start

        logger.info(
            "export_complete",
            request_id=request_id,
            files=len(files),
            size=metrics.downloaded_size,
            seconds=round(metrics.total_time, 1),
        )
        return ExportResult(request_id=request_id, parts=parts, files=files, metrics=metrics)
