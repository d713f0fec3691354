"""
Metrika Logs API client.

Unified async client for the counters, log requests and export workflows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from metrika_logs.config import get_settings
from metrika_logs.transport import MetrikaTransport

if TYPE_CHECKING:
    from metrika_logs.api.services.counters import CountersService
    from metrika_logs.api.services.logs import LogsService
    from metrika_logs.services.export import AsyncExportService


class AsyncMetrikaAPI:
    """
    Unified async Metrika Logs API client.

    Anything not passed explicitly is taken from ``SDKSettings``
    (``METRIKA_TOKEN``, ``METRIKA_COUNTER_ID``, ...). Services are created
    lazily on first access.

    Example:
        >>> async with AsyncMetrikaAPI(token="y0_xxx", counter_id=123) as api:
        ...     counters = await api.counters.list()
        ...     result = await api.export.run(
        ...         "2024-01-01", "2024-01-31", VISITS_FIELDS, Path("./exports")
        ...     )

        >>> # From environment variables
        >>> os.environ["METRIKA_TOKEN"] = "y0_xxx"
        >>> os.environ["METRIKA_COUNTER_ID"] = "123"
        >>> async with AsyncMetrikaAPI() as api:
        ...     requests = await api.logs.list()
    """

    def __init__(
        self,
        token: str | None = None,
        counter_id: int | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        poll_interval: float | None = None,
        max_parallel_parts: int | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Metrika API client.

        Args:
            token: OAuth token (or set METRIKA_TOKEN env var)
            counter_id: Counter ID used by log request operations
            base_url: Custom API base URL
            timeout: Request timeout in seconds
            poll_interval: Seconds between log request status checks
            max_parallel_parts: Max concurrent part downloads
            http_client: Pre-built httpx.AsyncClient (not closed by this client)

        Raises:
            ValueError: If no token provided
        """
        settings = get_settings()
        self._token = token or settings.token
        if not self._token:
            raise ValueError(
                "Token required. Pass token or set METRIKA_TOKEN environment variable."
            )
        self._counter_id = counter_id if counter_id is not None else settings.counter_id
        self._poll_interval = (
            poll_interval if poll_interval is not None else settings.poll_interval
        )
        self._max_parallel_parts = (
            max_parallel_parts if max_parallel_parts is not None else settings.max_parallel_parts
        )

        self._transport = MetrikaTransport(
            token=self._token,
            base_url=base_url or settings.api_base_url,
            timeout=timeout or settings.request_timeout,
            http_client=http_client,
        )

        # Lazy-initialized services
        self._counters_service: CountersService | None = None
        self._logs_service: LogsService | None = None
        self._export_service: AsyncExportService | None = None

    def _require_counter(self) -> int:
        if self._counter_id is None:
            raise ValueError(
                "Counter ID required. Pass counter_id or set METRIKA_COUNTER_ID environment variable."
            )
        return self._counter_id

    @property
    def counters(self) -> CountersService:
        """Access counters API."""
        if self._counters_service is None:
            from metrika_logs.api.services.counters import CountersService

            self._counters_service = CountersService(self._transport)
        return self._counters_service

    @property
    def logs(self) -> LogsService:
        """
        Access log requests API.

        Raises:
            ValueError: If no counter ID is configured
        """
        if self._logs_service is None:
            from metrika_logs.api.services.logs import LogsService

            self._logs_service = LogsService(self._transport, self._require_counter())
        return self._logs_service

    @property
    def export(self) -> AsyncExportService:
        """Access the wait/download workflow."""
        if self._export_service is None:
            from metrika_logs.services.export import AsyncExportService

            self._export_service = AsyncExportService(
                self._transport,
                self.logs,
                poll_interval=self._poll_interval,
                max_parallel=self._max_parallel_parts,
            )
        return self._export_service

    @property
    def counter_id(self) -> int | None:
        """Get configured counter ID."""
        return self._counter_id

    @property
    def base_url(self) -> str:
        """Get current base URL."""
        return self._transport.base_url

    @property
    def transport(self) -> MetrikaTransport:
        return self._transport

    async def __aenter__(self) -> AsyncMetrikaAPI:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._transport.aclose()

    def __repr__(self) -> str:
        return f"<AsyncMetrikaAPI base_url={self.base_url!r} counter_id={self._counter_id!r}>"


__all__ = ["AsyncMetrikaAPI"]
