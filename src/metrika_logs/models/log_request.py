"""
Log request models.

A log request is a server-side job that prepares one bulk export. The
service owns its lifecycle; the SDK only reads it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LogRequestStatus(str, Enum):
    """Status values reported by the Logs API."""

    CREATED = "created"
    AWAITING_RETRY = "awaiting_retry"
    PROCESSED = "processed"
    CLEANED_BY_USER = "cleaned_by_user"
    CLEANED_AUTOMATICALLY_AS_TOO_OLD = "cleaned_automatically_as_too_old"
    CANCELED = "canceled"
    PROCESSING_FAILED = "processing_failed"


class LogSource(str, Enum):
    """Data sources a log request can export."""

    VISITS = "visits"
    HITS = "hits"


class Part(BaseModel):
    """One downloadable slice of a processed log request."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    part_number: int = Field(..., ge=0)
    size: int = Field(default=0, ge=0)


class LogRequest(BaseModel):
    """Log request as returned by the API."""

    model_config = ConfigDict(extra="ignore")

    request_id: int
    counter_id: int = 0
    source: str = ""
    date1: str = ""
    date2: str = ""
    fields: list[str] = Field(default_factory=list)
    # Raw string: unknown statuses must reach the classifier intact.
    status: str
    size: int = 0
    parts: list[Part] = Field(default_factory=list)
    attribution: str = ""

    @property
    def is_processed(self) -> bool:
        """Whether the service reports the export as ready."""
        return self.status == LogRequestStatus.PROCESSED.value


class LogRequestEnvelope(BaseModel):
    """``{"log_request": ...}`` response body."""

    model_config = ConfigDict(extra="ignore")

    log_request: LogRequest


class LogRequestListEnvelope(BaseModel):
    """``{"requests": [...]}`` response body."""

    model_config = ConfigDict(extra="ignore")

    requests: list[LogRequest] = Field(default_factory=list)
