"""
Tests for AsyncExportService.
"""

import asyncio

import httpx
import pytest

from metrika_logs.exceptions import APIError, ExportCancelledError, ReportStatusError
from metrika_logs.models import Part
from metrika_logs.services.export import ExportMetrics, ExportResult

from tests.conftest import COUNTER_ID, error_body


def part_path(part_number: int) -> str:
    return f"/management/v1/counter/{COUNTER_ID}/logrequest/42/part/{part_number}/download"


class TestDownloadParts:
    """Tests for AsyncExportService.download_parts."""

    @pytest.mark.asyncio
    async def test_sequential(self, api, fake, tmp_path):
        fake.set_parts([10, 20, 30])
        parts = [Part(**p) for p in fake.parts]

        files = await api.export.download_parts(42, parts, tmp_path)

        assert [f.stat().st_size for f in files] == [10, 20, 30]
        assert [f.read_bytes()[:1] for f in files] == [b"A", b"B", b"C"]

    @pytest.mark.asyncio
    async def test_parallel_keeps_input_order(self, api, fake, tmp_path):
        fake.set_parts([10, 20, 30])
        parts = [Part(part_number=2, size=30), Part(part_number=0, size=10), Part(part_number=1, size=20)]

        files = await api.export.download_parts(42, parts, tmp_path, max_parallel=3)

        assert [f.name.split("-")[0] for f in files] == [
            f"{COUNTER_ID}_42_2",
            f"{COUNTER_ID}_42_0",
            f"{COUNTER_ID}_42_1",
        ]
        assert [f.stat().st_size for f in files] == [30, 10, 20]

    @pytest.mark.asyncio
    async def test_sequential_keeps_input_order(self, api, fake, tmp_path):
        fake.set_parts([10, 20])
        parts = [Part(part_number=1, size=20), Part(part_number=0, size=10)]

        files = await api.export.download_parts(42, parts, tmp_path)

        assert [f.stat().st_size for f in files] == [20, 10]

    @pytest.mark.asyncio
    async def test_no_parts(self, api, tmp_path):
        assert await api.export.download_parts(42, [], tmp_path) == []

    @pytest.mark.asyncio
    async def test_sequential_stops_at_first_failure(self, api, fake, tmp_path):
        fake.set_parts([10, 20, 30])
        fake.overrides[part_path(1)] = httpx.Response(500, content=error_body(500, "Internal error"))
        parts = [Part(**p) for p in fake.parts]

        with pytest.raises(APIError) as exc:
            await api.export.download_parts(42, parts, tmp_path)

        assert exc.value.code == 500
        requested = [r.url.path for r in fake.requests]
        assert part_path(2) not in requested
        # Files of earlier parts stay on disk
        assert len(list(tmp_path.iterdir())) == 1

    @pytest.mark.asyncio
    async def test_parallel_fail_fast(self, api, fake, tmp_path):
        fake.set_parts([10, 20, 30, 40])
        fake.overrides[part_path(0)] = httpx.Response(500, content=error_body(500, "Internal error"))
        parts = [Part(**p) for p in fake.parts]

        with pytest.raises(APIError) as exc:
            await api.export.download_parts(42, parts, tmp_path, max_parallel=2)

        assert exc.value.code == 500

    @pytest.mark.asyncio
    @pytest.mark.parametrize("max_parallel", [0, -1])
    async def test_invalid_parallelism(self, api, fake, tmp_path, max_parallel):
        fake.set_parts([3])
        with pytest.raises(ValueError):
            await api.export.download_parts(
                42, [Part(part_number=0)], tmp_path, max_parallel=max_parallel
            )
        assert fake.requests == []
        assert list(tmp_path.iterdir()) == []


class TestWaitAndDownload:
    """End-to-end wait then download."""

    @pytest.mark.asyncio
    async def test_pending_then_processed(self, api, fake, tmp_path):
        fake.statuses = ["created", "created", "processed"]
        fake.set_parts([1024, 2048])

        parts = await api.export.wait_ready(42)
        files = await api.export.download_parts(42, parts, tmp_path)

        assert fake.status_checks == 3
        assert [p.part_number for p in parts] == [0, 1]
        assert [f.stat().st_size for f in files] == [1024, 2048]

    @pytest.mark.asyncio
    async def test_removed_request(self, api, fake):
        fake.statuses = ["cleaned_by_user"]

        with pytest.raises(ReportStatusError) as exc:
            await api.export.wait_ready(42)

        assert exc.value.code == 404

    @pytest.mark.asyncio
    async def test_cancel(self, api, fake):
        fake.statuses = ["created"]
        api.export.configure(poll_interval=30)
        cancel = asyncio.Event()

        with pytest.raises(ExportCancelledError):
            await asyncio.wait_for(
                api.export.wait_ready(42, cancel=cancel, on_status=lambda lr: cancel.set()),
                timeout=2,
            )


class TestRun:
    """Tests for AsyncExportService.run."""

    @pytest.mark.asyncio
    async def test_run(self, api, fake, tmp_path):
        fake.statuses = ["created", "processed"]
        fake.set_parts([100, 200])

        result = await api.export.run(
            "2024-01-01", "2024-01-31", ["ym:s:visitID", "ym:s:date"], tmp_path, max_parallel=2
        )

        assert isinstance(result, ExportResult)
        assert result.request_id == 42
        assert [p.part_number for p in result.parts] == [0, 1]
        assert len(result.files) == 2
        assert result.metrics.reported_size == 300
        assert result.metrics.downloaded_size == 300
        assert result.metrics.total_time >= result.metrics.download_time
        assert "Size:" in str(result)
        assert "files=2" in repr(result)

        create = next(r for r in fake.requests if r.method == "POST")
        assert create.url.params["fields"] == "ym:s:visitID,ym:s:date"


class TestConfigure:
    """Tests for AsyncExportService.configure."""

    def test_defaults(self, api):
        assert api.export.poll_interval == 0
        assert api.export.max_parallel == 1

    def test_configure(self, api):
        api.export.configure(poll_interval=5, max_parallel=4)
        assert api.export.poll_interval == 5
        assert api.export.max_parallel == 4

    def test_configure_rejects_invalid(self, api):
        with pytest.raises(ValueError):
            api.export.configure(max_parallel=0)
        with pytest.raises(ValueError):
            api.export.configure(poll_interval=-1)


class TestExportMetrics:
    """Tests for ExportMetrics."""

    def test_speed(self):
        metrics = ExportMetrics(download_time=2.0, downloaded_size=4 * 1024 * 1024)
        assert metrics.download_speed_mbps == 2.0

    def test_speed_without_time(self):
        assert ExportMetrics(downloaded_size=10).download_speed_mbps == 0.0
