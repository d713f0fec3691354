"""
Metrika Logs API endpoints.

Paths are relative to the API base URL and are rendered with
``str.format``.
"""

from __future__ import annotations

from metrika_logs.config import DEFAULT_BASE_URL

LOG_REQUESTS_PATH = "/management/v1/counter/{counter_id}/logrequests"
LOG_REQUEST_PATH = "/management/v1/counter/{counter_id}/logrequest/{request_id}"
LOG_PART_DOWNLOAD_PATH = (
    "/management/v1/counter/{counter_id}/logrequest/{request_id}/part/{part_number}/download"
)
LOG_REQUEST_CLEAN_PATH = "/management/v1/counter/{counter_id}/logrequest/{request_id}/clean"
COUNTERS_PATH = "/management/v1/counters"


def get_base_url(base_url: str | None = None) -> str:
    """
    Normalize the API base URL.

    Example:
        >>> get_base_url()
        'https://api-metrika.yandex.net'
        >>> get_base_url("http://localhost:8080/")
        'http://localhost:8080'
    """
    return (base_url or DEFAULT_BASE_URL).rstrip("/")


__all__ = [
    "LOG_REQUESTS_PATH",
    "LOG_REQUEST_PATH",
    "LOG_PART_DOWNLOAD_PATH",
    "LOG_REQUEST_CLEAN_PATH",
    "COUNTERS_PATH",
    "get_base_url",
]
