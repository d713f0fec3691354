"""Counter models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Counter(BaseModel):
    """Metrika counter (tag) the current token has access to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str = ""


class CountersEnvelope(BaseModel):
    """``{"counters": [...]}`` response body."""

    model_config = ConfigDict(extra="ignore")

    counters: list[Counter] = Field(default_factory=list)
