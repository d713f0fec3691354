"""
Pydantic models for the Metrika Logs API.
"""

from metrika_logs.models.counter import Counter, CountersEnvelope
from metrika_logs.models.errors import ErrorBody, ErrorDetail
from metrika_logs.models.log_request import (
    LogRequest,
    LogRequestEnvelope,
    LogRequestListEnvelope,
    LogRequestStatus,
    LogSource,
    Part,
)

__all__ = [
    "Counter",
    "CountersEnvelope",
    "ErrorBody",
    "ErrorDetail",
    "LogRequest",
    "LogRequestEnvelope",
    "LogRequestListEnvelope",
    "LogRequestStatus",
    "LogSource",
    "Part",
]
