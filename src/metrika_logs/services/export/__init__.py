"""
Export service for the Metrika Logs SDK.

Features:
- Status polling with a fixed interval and cancellable waits
- Status classification (pending / ready / removed / canceled / failed / unknown)
- Byte-for-byte part downloads into uniquely named files
- Ordered, fail-fast multi-part downloads (optionally concurrent)
"""

from metrika_logs.services.export._aio import AsyncExportService
from metrika_logs.services.export._download import PartDownloader
from metrika_logs.services.export._models import ExportMetrics, ExportResult
from metrika_logs.services.export._poller import ReportPoller
from metrika_logs.services.export._status import (
    StatusClassification,
    StatusKind,
    classify_status,
)

__all__ = [
    "AsyncExportService",
    "ExportMetrics",
    "ExportResult",
    "PartDownloader",
    "ReportPoller",
    "StatusClassification",
    "StatusKind",
    "classify_status",
]
