"""
Metrika Logs SDK.

Client for the Yandex Metrika Logs API: create log requests, wait until
they are processed and download their parts.

Usage:
    >>> from metrika_logs import AsyncMetrikaAPI, VISITS_FIELDS
    >>>
    >>> async with AsyncMetrikaAPI(token="y0_xxx", counter_id=123) as api:
    ...     result = await api.export.run(
    ...         "2024-01-01", "2024-01-31", VISITS_FIELDS, "./exports"
    ...     )
    ...     print(result.files)

    >>> from metrika_logs import MetrikaClient
    >>> client = MetrikaClient(token="y0_xxx", counter_id=123)
    >>> counters = client.list_counters()
"""

from metrika_logs.api import AsyncMetrikaAPI, VISITS_FIELD_LIST, VISITS_FIELDS
from metrika_logs.client import MetrikaClient
from metrika_logs.config import SDKSettings, configure_settings, get_settings
from metrika_logs.exceptions import (
    APIError,
    ExportCancelledError,
    InternalError,
    MetrikaError,
    ReportStatusError,
)
from metrika_logs.models import Counter, LogRequest, LogRequestStatus, LogSource, Part
from metrika_logs.services.export import ExportResult, StatusKind, classify_status

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # Clients
    "AsyncMetrikaAPI",
    "MetrikaClient",
    # Config
    "SDKSettings",
    "configure_settings",
    "get_settings",
    # Field lists
    "VISITS_FIELDS",
    "VISITS_FIELD_LIST",
    # Models
    "Counter",
    "LogRequest",
    "LogRequestStatus",
    "LogSource",
    "Part",
    "ExportResult",
    # Status
    "StatusKind",
    "classify_status",
    # Errors
    "MetrikaError",
    "InternalError",
    "APIError",
    "ReportStatusError",
    "ExportCancelledError",
]
