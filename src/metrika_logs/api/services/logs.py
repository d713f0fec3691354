"""
Log requests service.

Plain request/response operations on log requests: list, get, create,
clean. Waiting for readiness and downloading parts live in
``metrika_logs.services.export``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from metrika_logs.api.config import (
    LOG_REQUEST_CLEAN_PATH,
    LOG_REQUEST_PATH,
    LOG_REQUESTS_PATH,
)
from metrika_logs.models.log_request import (
    LogRequest,
    LogRequestEnvelope,
    LogRequestListEnvelope,
    LogSource,
)

if TYPE_CHECKING:
    from metrika_logs.transport import MetrikaTransport


class LogsService:
    """
    High-level log requests service.

    Example:
        >>> async with AsyncMetrikaAPI(token="...", counter_id=123) as api:
        ...     log_request = await api.logs.create(
        ...         "2024-01-01", "2024-01-31", fields="ym:s:visitID", source="visits"
        ...     )
        ...     info = await api.logs.get(log_request.request_id)
    """

    def __init__(self, transport: MetrikaTransport, counter_id: int) -> None:
        """
        Initialize log requests service.

        Args:
            transport: Authenticated transport
            counter_id: Counter the log requests belong to
        """
        self._transport = transport
        self._counter_id = counter_id

    @property
    def counter_id(self) -> int:
        return self._counter_id

    async def list(self) -> list[LogRequest]:
        """
        List log requests of the counter.

        Returns:
            Log requests in the order returned by the API
        """
        path = LOG_REQUESTS_PATH.format(counter_id=self._counter_id)
        envelope = await self._transport.request("GET", path, LogRequestListEnvelope)
        return envelope.requests

    async def get(self, request_id: int) -> LogRequest:
        """
        Get one log request, including its status and parts.

        Args:
            request_id: Log request ID
        """
        path = LOG_REQUEST_PATH.format(counter_id=self._counter_id, request_id=request_id)
        envelope = await self._transport.request("GET", path, LogRequestEnvelope)
        return envelope.log_request

    async def create(
        self,
        date1: str,
        date2: str,
        fields: str | Iterable[str],
        source: LogSource | str = LogSource.VISITS,
        attribution: str | None = None,
    ) -> LogRequest:
        """
        Create a log request.

        Args:
            date1: First day of the period (YYYY-MM-DD)
            date2: Last day of the period (YYYY-MM-DD)
            fields: Comma-separated field names, or an iterable of them
            source: "visits" or "hits"
            attribution: Optional attribution model (e.g. "LASTSIGN")

        Returns:
            The created log request; its ``request_id`` is what gets polled
        """
        if not isinstance(fields, str):
            fields = ",".join(fields)
        params = {
            "date1": date1,
            "date2": date2,
            "fields": fields,
            "source": source.value if isinstance(source, LogSource) else source,
        }
        if attribution:
            params["attribution"] = attribution
        path = LOG_REQUESTS_PATH.format(counter_id=self._counter_id)
        envelope = await self._transport.request("POST", path, LogRequestEnvelope, params=params)
        return envelope.log_request

    async def clean(self, request_id: int) -> LogRequest:
        """
        Delete the prepared data of a log request.

        Args:
            request_id: Log request ID

        Returns:
            The log request with its resulting status
        """
        path = LOG_REQUEST_CLEAN_PATH.format(counter_id=self._counter_id, request_id=request_id)
        envelope = await self._transport.request("POST", path, LogRequestEnvelope)
        return envelope.log_request

