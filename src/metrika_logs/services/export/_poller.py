"""
Report poller.

Re-fetches a log request until the service reports it as processed or as
something that will never become processed. Pending statuses wait a fixed
interval between checks; there is no attempt limit, so callers that need a
deadline wrap the call in ``asyncio.wait_for`` or pass a cancel event.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Callable

from metrika_logs.exceptions import ExportCancelledError, ReportStatusError
from metrika_logs.logging import get_logger
from metrika_logs.services.export._config import DEFAULT_POLL_INTERVAL
from metrika_logs.services.export._status import classify_status

if TYPE_CHECKING:
    from metrika_logs.api.services.logs import LogsService
    from metrika_logs.models.log_request import LogRequest, Part

logger = get_logger(__name__)


class ReportPoller:
    """
    Polls a log request until it is ready.

    Example:
        >>> poller = ReportPoller(api.logs)
        >>> parts = await poller.wait(request_id)
    """

    def __init__(
        self,
        logs: LogsService,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        if poll_interval < 0:
            raise ValueError("poll_interval must be >= 0")
        self._logs = logs
        self._poll_interval = poll_interval

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    async def wait(
        self,
        request_id: int,
        cancel: asyncio.Event | None = None,
        on_status: Callable[[LogRequest], None] | None = None,
    ) -> list[Part]:
        """
        Wait until the log request is processed and return its parts.

        Args:
            request_id: Log request ID.
            cancel: Optional event; once set, polling stops at the next
                wait (or before the next check) with ExportCancelledError.
            on_status: Optional callback invoked with every fetched log request.

        Returns:
            Parts of the processed log request, as decoded from the response.

        Raises:
            ReportStatusError: The request was cleaned, canceled, failed, or
                reported a status the SDK does not know.
            ExportCancelledError: ``cancel`` was set.
            APIError, InternalError: A status check failed.
        """
        cycle = 0
        while True:
            if cancel is not None and cancel.is_set():
                raise ExportCancelledError(request_id)

            cycle += 1
            log_request = await self._logs.get(request_id)
            classification = classify_status(log_request.status)
            logger.debug(
                "log_request_polled",
                request_id=request_id,
                cycle=cycle,
                status=log_request.status,
                kind=classification.kind.value,
            )
            if on_status is not None:
                on_status(log_request)

            if classification.is_ready:
                logger.info(
                    "log_request_ready",
                    request_id=request_id,
                    parts=len(log_request.parts),
                    size=log_request.size,
                )
                return log_request.parts

            if classification.is_terminal:
                logger.warning(
                    "log_request_terminal",
                    request_id=request_id,
                    status=log_request.status,
                    reason=classification.reason,
                )
                raise ReportStatusError(
                    request_id=request_id,
                    status=classification.status,
                    kind=classification.kind.value,
                    code=classification.http_code,
                    reason=classification.reason,
                )

            await self._pause(request_id, cancel)

    async def _pause(self, request_id: int, cancel: asyncio.Event | None) -> None:
        """Sleep one poll interval, returning early with an error if cancelled."""
        if cancel is None:
            await asyncio.sleep(self._poll_interval)
            return
        try:
            await asyncio.wait_for(cancel.wait(), timeout=self._poll_interval)
        except asyncio.TimeoutError:
            return
        raise ExportCancelledError(request_id)
