"""Structured error body returned by the API on non-success responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """One entry of the ``errors`` list."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    error_type: str = ""
    message: str = ""


class ErrorBody(BaseModel):
    """``{"errors": [...], "code": int, "message": str}``."""

    model_config = ConfigDict(extra="ignore")

    errors: list[ErrorDetail] = Field(default_factory=list)
    code: int
    message: str
