"""
HTTP transport for the Metrika Logs API.

Wraps an ``httpx.AsyncClient`` and adds bearer authentication to every
request. Transport failures are translated into InternalError with a
fixed tag; nothing is retried here.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, TypeVar

import httpx
from pydantic import BaseModel

from metrika_logs.api.config import get_base_url
from metrika_logs.api.decoder import decode_response, raise_for_api_error
from metrika_logs.exceptions import (
    CREATE_REQUEST_FAILED,
    READ_RESPONSE_FAILED,
    REQUEST_FAILED,
    InternalError,
)
from metrika_logs.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class MetrikaTransport:
    """
    Authenticated HTTP transport.

    Args:
        token: OAuth token, sent as ``Authorization: Bearer <token>``.
        base_url: API base URL.
        timeout: Request timeout in seconds (ignored for injected clients).
        http_client: Optional pre-built ``httpx.AsyncClient``. The transport
            does not close clients it did not create.
    """

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not token:
            raise ValueError("token must not be empty")
        self._base_url = get_base_url(base_url)
        self._headers = {"Authorization": f"Bearer {token}"}
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            transport=httpx.AsyncHTTPTransport(retries=0),
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build an authenticated request, wrapping any failure."""
        try:
            request = self._client.build_request(
                method,
                f"{self._base_url}{path}",
                params=params,
                headers=self._headers,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise InternalError(CREATE_REQUEST_FAILED, e) from e
        if request.url.scheme not in ("http", "https") or not request.url.host:
            raise InternalError(
                CREATE_REQUEST_FAILED,
                ValueError(f"invalid base URL {self._base_url!r}: expected http(s)://host"),
            )
        return request

    async def _send(self, request: httpx.Request) -> httpx.Response:
        logger.debug("http_request", method=request.method, url=str(request.url))
        try:
            return await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise InternalError(REQUEST_FAILED, e) from e

    async def _read(self, response: httpx.Response) -> None:
        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise InternalError(READ_RESPONSE_FAILED, e) from e

    async def request(
        self,
        method: str,
        path: str,
        model: type[M],
        params: Mapping[str, Any] | None = None,
    ) -> M:
        """Send a request and decode its JSON body into ``model``."""
        request = self.build_request(method, path, params)
        response = await self._send(request)
        try:
            await self._read(response)
        finally:
            await response.aclose()
        logger.debug(
            "http_response",
            method=request.method,
            url=str(request.url),
            status=response.status_code,
        )
        return decode_response(response, model)

    @asynccontextmanager
    async def stream(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> AsyncIterator[httpx.Response]:
        """
        Open a streamed request.

        Yields the response only for 2xx statuses; other statuses are read
        and raised as APIError before the body is handed to the caller.
        """
        request = self.build_request(method, path, params)
        response = await self._send(request)
        try:
            if not response.is_success:
                await self._read(response)
                raise_for_api_error(response)
            yield response
        finally:
            await response.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    def __repr__(self) -> str:
        return f"<MetrikaTransport base_url={self._base_url!r}>"


__all__ = ["MetrikaTransport"]
