"""
Synchronous Metrika Logs client.

Thin wrapper around AsyncMetrikaAPI. Every call runs on its own event loop
with its own HTTP connection pool, so the client is safe to use from plain
scripts and threads. Long-running waits can be interrupted with Ctrl+C;
for programmatic cancellation use AsyncMetrikaAPI with a cancel event.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable, Sequence, TypeVar

import httpx

from metrika_logs.api.client import AsyncMetrikaAPI
from metrika_logs.config import get_settings
from metrika_logs.models.counter import Counter
from metrika_logs.models.log_request import LogRequest, LogSource, Part
from metrika_logs.services._sync_wrapper import run_sync
from metrika_logs.services.export import ExportResult

T = TypeVar("T")


class MetrikaClient:
    """
    Synchronous Metrika Logs client.

    Example:
        >>> client = MetrikaClient(token="y0_xxx", counter_id=123)
        >>> log_request = client.create_log_request(
        ...     "2024-01-01", "2024-01-31", fields=VISITS_FIELDS, source="visits"
        ... )
        >>> parts = client.wait_ready(log_request.request_id)
        >>> files = client.download_parts(log_request.request_id, parts, "./exports")
    """

    def __init__(
        self,
        token: str | None = None,
        counter_id: int | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        poll_interval: float | None = None,
        max_parallel_parts: int | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize sync client.

        Args:
            token: OAuth token (or set METRIKA_TOKEN env var)
            counter_id: Counter ID used by log request operations
            base_url: Custom API base URL
            timeout: Request timeout in seconds
            poll_interval: Seconds between log request status checks
            max_parallel_parts: Max concurrent part downloads
            http_transport: Custom httpx transport (e.g. ``httpx.MockTransport``)

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
        self._base_url = base_url
        self._timeout = timeout or settings.request_timeout
        self._poll_interval = poll_interval
        self._max_parallel_parts = max_parallel_parts
        self._http_transport = http_transport

    @property
    def counter_id(self) -> int | None:
        return self._counter_id

    def _call(self, fn: Callable[[AsyncMetrikaAPI], Awaitable[T]]) -> T:
        async def runner() -> T:
            transport = self._http_transport or httpx.AsyncHTTPTransport(retries=0)
            async with httpx.AsyncClient(timeout=self._timeout, transport=transport) as http:
                api = AsyncMetrikaAPI(
                    token=self._token,
                    counter_id=self._counter_id,
                    base_url=self._base_url,
                    poll_interval=self._poll_interval,
                    max_parallel_parts=self._max_parallel_parts,
                    http_client=http,
                )
                return await fn(api)

        return run_sync(runner())

    def list_counters(self) -> list[Counter]:
        """List counters available to the token."""
        return self._call(lambda api: api.counters.list())

    def list_log_requests(self) -> list[LogRequest]:
        """List log requests of the counter."""
        return self._call(lambda api: api.logs.list())

    def get_log_request(self, request_id: int) -> LogRequest:
        """Get one log request."""
        return self._call(lambda api: api.logs.get(request_id))

    def create_log_request(
        self,
        date1: str,
        date2: str,
        fields: str | Iterable[str],
        source: LogSource | str = LogSource.VISITS,
        attribution: str | None = None,
    ) -> LogRequest:
        """Create a log request."""
        return self._call(
            lambda api: api.logs.create(
                date1, date2, fields, source=source, attribution=attribution
            )
        )

    def clean_log_request(self, request_id: int) -> LogRequest:
        """Clean a log request."""
        return self._call(lambda api: api.logs.clean(request_id))

    def wait_ready(
        self,
        request_id: int,
        on_status: Callable[[LogRequest], None] | None = None,
    ) -> list[Part]:
        """Block until the log request is processed and return its parts."""
        return self._call(lambda api: api.export.wait_ready(request_id, on_status=on_status))

    def download_parts(
        self,
        request_id: int,
        parts: Sequence[Part],
        dest_dir: Path | str,
        max_parallel: int | None = None,
    ) -> list[Path]:
        """Download parts into ``dest_dir``; paths follow the order of ``parts``."""
        return self._call(
            lambda api: api.export.download_parts(
                request_id, parts, dest_dir, max_parallel=max_parallel
            )
        )

    def export(
        self,
        date1: str,
        date2: str,
        fields: str | Iterable[str],
        dest_dir: Path | str,
        source: LogSource | str = LogSource.VISITS,
        attribution: str | None = None,
        max_parallel: int | None = None,
    ) -> ExportResult:
        """Create, wait for and download a log request in one call."""
        return self._call(
            lambda api: api.export.run(
                date1,
                date2,
                fields,
                dest_dir,
                source=source,
                attribution=attribution,
                max_parallel=max_parallel,
            )
        )

    def __enter__(self) -> MetrikaClient:
        return self

    def __exit__(self, *args: Any) -> None:
        return None

    def __repr__(self) -> str:
        return f"<MetrikaClient counter_id={self._counter_id!r}>"


__all__ = ["MetrikaClient"]
