"""
Metrika API services.

High-level wrappers over the HTTP endpoints.
"""

from __future__ import annotations

from metrika_logs.api.services.counters import CountersService
from metrika_logs.api.services.logs import LogsService

__all__ = [
    "CountersService",
    "LogsService",
]
