"""
Exceptions for the Metrika Logs SDK.

Three families:

- InternalError: the request could not be built or sent, the body could
  not be read, or a successful body did not decode into the expected shape.
- APIError: the service answered with a non-success HTTP status.
- ReportStatusError: a log request reached a terminal non-ready status
  (or one the SDK does not recognise) while being polled.
"""

from __future__ import annotations

from typing import Any, Sequence

CREATE_REQUEST_FAILED = "can't create request"
REQUEST_FAILED = "request failed"
READ_RESPONSE_FAILED = "can't read response body"
UNMARSHAL_RESPONSE_FAILED = "can't unmarshal response"
WRITE_FILE_FAILED = "can't write part file"


class MetrikaError(Exception):
    """Base exception for all SDK errors."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self._original_cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class InternalError(MetrikaError):
    """Request construction, transport or decoding failure."""

    def __init__(self, tag: str, cause: BaseException | None = None) -> None:
        self.tag = tag
        message = f"{tag}: {cause}" if cause is not None else tag
        super().__init__(message, cause=cause)


class APIError(MetrikaError):
    """Non-success HTTP response from the Metrika API."""

    def __init__(
        self,
        code: int,
        message: str,
        errors: Sequence[Any] = (),
    ) -> None:
        self.code = code
        self.api_message = message
        self.errors = list(errors)
        super().__init__(f"code: {code}, message: {message}")


class ReportStatusError(APIError):
    """Log request ended in a status that will never produce parts."""

    def __init__(
        self,
        request_id: int,
        status: str,
        kind: str,
        code: int,
        reason: str,
    ) -> None:
        self.request_id = request_id
        self.status = status
        self.kind = kind
        self.reason = reason
        super().__init__(code, f"log request {request_id}: {reason}")


class ExportCancelledError(MetrikaError):
    """Polling was cancelled by the caller."""

    def __init__(self, request_id: int) -> None:
        self.request_id = request_id
        super().__init__(f"Polling of log request {request_id} was cancelled")


__all__ = [
    "CREATE_REQUEST_FAILED",
    "REQUEST_FAILED",
    "READ_RESPONSE_FAILED",
    "UNMARSHAL_RESPONSE_FAILED",
    "WRITE_FILE_FAILED",
    "MetrikaError",
    "InternalError",
    "APIError",
    "ReportStatusError",
    "ExportCancelledError",
]
