"""
Counters service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from metrika_logs.api.config import COUNTERS_PATH
from metrika_logs.models.counter import Counter, CountersEnvelope

if TYPE_CHECKING:
    from metrika_logs.transport import MetrikaTransport


class CountersService:
    """Read-only access to the counters visible to the token."""

    def __init__(self, transport: MetrikaTransport) -> None:
        self._transport = transport

    async def list(self) -> list[Counter]:
        """List counters available to the current token."""
        envelope = await self._transport.request("GET", COUNTERS_PATH, CountersEnvelope)
        return envelope.counters
