"""
Log request status classification.

Maps the raw status string reported by the API onto what the poller should
do next. The mapping is a fixed table; anything outside it is UNKNOWN and
fatal, so polling never loops on a value it does not understand.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from metrika_logs.models.log_request import LogRequestStatus


class StatusKind(str, Enum):
    """Outcome classes for a log request status."""

    PENDING = "pending"
    READY = "ready"
    TERMINAL_REMOVED = "terminal_removed"
    TERMINAL_CANCELED = "terminal_canceled"
    TERMINAL_FAILED = "terminal_failed"
    UNKNOWN = "unknown"


class StatusClassification(NamedTuple):
    """Classified status with the diagnostics used in error messages."""

    kind: StatusKind
    status: str
    reason: str
    http_code: int

    @property
    def is_pending(self) -> bool:
        return self.kind is StatusKind.PENDING

    @property
    def is_ready(self) -> bool:
        return self.kind is StatusKind.READY

    @property
    def is_terminal(self) -> bool:
        return self.kind is not StatusKind.PENDING


# status -> (kind, reason, closest HTTP code)
_STATUS_TABLE: dict[str, tuple[StatusKind, str, int]] = {
    LogRequestStatus.CREATED.value: (
        StatusKind.PENDING,
        "log request is being prepared",
        202,
    ),
    LogRequestStatus.AWAITING_RETRY.value: (
        StatusKind.PENDING,
        "log request is waiting to be retried by the service",
        202,
    ),
    LogRequestStatus.PROCESSED.value: (
        StatusKind.READY,
        "log request is processed",
        200,
    ),
    LogRequestStatus.CLEANED_BY_USER.value: (
        StatusKind.TERMINAL_REMOVED,
        "log request was cleaned by the user",
        404,
    ),
    LogRequestStatus.CLEANED_AUTOMATICALLY_AS_TOO_OLD.value: (
        StatusKind.TERMINAL_REMOVED,
        "log request was cleaned automatically as too old",
        404,
    ),
    LogRequestStatus.CANCELED.value: (
        StatusKind.TERMINAL_CANCELED,
        "log request was canceled",
        404,
    ),
    LogRequestStatus.PROCESSING_FAILED.value: (
        StatusKind.TERMINAL_FAILED,
        "log request processing failed",
        500,
    ),
}


def classify_status(status: str) -> StatusClassification:
    """
    Classify a status string reported by the API.

    Example:
        >>> classify_status("created").kind
        <StatusKind.PENDING: 'pending'>
        >>> classify_status("cleaned_automatically_as_too_old").reason
        'log request was cleaned automatically as too old'
    """
    entry = _STATUS_TABLE.get(status)
    if entry is None:
        return StatusClassification(
            StatusKind.UNKNOWN,
            status,
            f"unknown log request status {status!r}",
            500,
        )
    kind, reason, http_code = entry
    return StatusClassification(kind, status, reason, http_code)


__all__ = ["StatusKind", "StatusClassification", "classify_status"]
