"""
Metrika Logs API client.

Usage:
    >>> from metrika_logs.api import AsyncMetrikaAPI
    >>>
    >>> async with AsyncMetrikaAPI(token="y0_xxx", counter_id=123) as api:
    ...     counters = await api.counters.list()
    ...     requests = await api.logs.list()
"""

from __future__ import annotations

# Main unified client
from metrika_logs.api.client import AsyncMetrikaAPI

# Endpoints and field lists
from metrika_logs.api.config import get_base_url
from metrika_logs.api.fields import VISITS_FIELD_LIST, VISITS_FIELDS

# Services
from metrika_logs.api.services import CountersService, LogsService

__all__ = [
    # Main client
    "AsyncMetrikaAPI",
    # Config
    "get_base_url",
    "VISITS_FIELDS",
    "VISITS_FIELD_LIST",
    # Services
    "CountersService",
    "LogsService",
]
