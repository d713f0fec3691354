"""
Pytest configuration and fixtures for Metrika Logs SDK tests.
"""

from __future__ import annotations

import json
import re

import httpx
import pytest

from metrika_logs.api.client import AsyncMetrikaAPI
from metrika_logs.config import reset_settings
from metrika_logs.logging import reset_logging

TOKEN = "y0_test_token_123"
COUNTER_ID = 123
REQUEST_ID = 42


def log_request_payload(
    request_id: int = REQUEST_ID,
    status: str = "created",
    parts: list[dict] | None = None,
    **extra,
) -> dict:
    """Log request JSON as the API returns it."""
    payload = {
        "request_id": request_id,
        "counter_id": COUNTER_ID,
        "source": "visits",
        "date1": "2024-01-01",
        "date2": "2024-01-31",
        "fields": ["ym:s:visitID"],
        "status": status,
        "size": sum(p["size"] for p in parts or []),
        "attribution": "LASTSIGN",
    }
    if parts is not None:
        payload["parts"] = parts
    payload.update(extra)
    return payload


# ============================================================================
# Fake Metrika server
# ============================================================================


class FakeMetrika:
    """
    In-memory stand-in for the Logs API, served through httpx.MockTransport.

    ``statuses`` is consumed one entry per status check; the last entry is
    repeated once the list runs out.
    """

    _STATUS = re.compile(r"^/management/v1/counter/(\d+)/logrequest/(\d+)$")
    _PART = re.compile(r"^/management/v1/counter/(\d+)/logrequest/(\d+)/part/(\d+)/download$")
    _CLEAN = re.compile(r"^/management/v1/counter/(\d+)/logrequest/(\d+)/clean$")
    _LIST = re.compile(r"^/management/v1/counter/(\d+)/logrequests$")

    def __init__(self) -> None:
        self.statuses: list[str] = ["processed"]
        self.parts: list[dict] = []
        self.part_bodies: dict[int, bytes] = {}
        self.overrides: dict[str, httpx.Response] = {}
        self.requests: list[httpx.Request] = []
        self.counters = [{"id": COUNTER_ID, "name": "example.com"}]
        self.log_requests = [log_request_payload(status="processed", parts=[{"part_number": 0, "size": 3}])]

    @property
    def status_checks(self) -> int:
        return sum(1 for r in self.requests if self._STATUS.match(r.url.path) and r.method == "GET")

    def set_parts(self, sizes: list[int]) -> None:
        """Serve ``len(sizes)`` parts, each filled with a distinct byte."""
        self.parts = [{"part_number": i, "size": size} for i, size in enumerate(sizes)]
        self.part_bodies = {
            i: bytes([65 + i]) * size for i, size in enumerate(sizes)
        }

    def _json(self, payload: dict, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.overrides:
            return self.overrides[path]

        if path == "/management/v1/counters":
            return self._json({"counters": self.counters})

        if match := self._PART.match(path):
            body = self.part_bodies.get(int(match.group(3)))
            if body is None:
                return self._json(
                    {"errors": [{"error_type": "not_found", "message": "Part not found"}],
                     "code": 404, "message": "Part not found"},
                    status_code=404,
                )
            return httpx.Response(200, content=body)

        if match := self._CLEAN.match(path):
            return self._json(
                {"log_request": log_request_payload(int(match.group(2)), status="cleaned_by_user")}
            )

        if match := self._STATUS.match(path):
            status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
            parts = self.parts if status == "processed" else None
            return self._json(
                {"log_request": log_request_payload(int(match.group(2)), status=status, parts=parts)}
            )

        if self._LIST.match(path):
            if request.method == "POST":
                return self._json({"log_request": log_request_payload(status="created")})
            return self._json({"requests": self.log_requests})

        return httpx.Response(404, text="not found")


@pytest.fixture
def fake() -> FakeMetrika:
    """Provide a fake Metrika server."""
    return FakeMetrika()


@pytest.fixture
def http_client(fake: FakeMetrika) -> httpx.AsyncClient:
    """Provide an httpx client routed to the fake server."""
    return httpx.AsyncClient(transport=httpx.MockTransport(fake.handler))


@pytest.fixture
def api(http_client: httpx.AsyncClient) -> AsyncMetrikaAPI:
    """Provide an API client with a zero poll interval."""
    return AsyncMetrikaAPI(
        token=TOKEN,
        counter_id=COUNTER_ID,
        poll_interval=0,
        http_client=http_client,
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep METRIKA_* variables from the environment out of the tests."""
    for name in (
        "METRIKA_TOKEN",
        "METRIKA_COUNTER_ID",
        "METRIKA_API_BASE_URL",
        "METRIKA_POLL_INTERVAL",
        "METRIKA_MAX_PARALLEL_PARTS",
        "METRIKA_LOG_JSON",
        "METRIKA_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def isolated_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    reset_logging()


def error_body(code: int, message: str, errors: list[tuple[str, str]] = ()) -> bytes:
    """Structured API error body."""
    return json.dumps(
        {
            "errors": [{"error_type": t, "message": m} for t, m in errors],
            "code": code,
            "message": message,
        }
    ).encode()
