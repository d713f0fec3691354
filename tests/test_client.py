"""
Tests for Metrika Logs SDK client classes.
"""

import httpx
import pytest

from metrika_logs import AsyncMetrikaAPI, MetrikaClient
from metrika_logs.api.services import CountersService, LogsService
from metrika_logs.config import configure_settings
from metrika_logs.exceptions import ReportStatusError
from metrika_logs.services.export import AsyncExportService

from tests.conftest import COUNTER_ID, TOKEN


class TestAsyncMetrikaAPI:
    """Tests for AsyncMetrikaAPI."""

    def test_requires_token(self):
        with pytest.raises(ValueError) as exc:
            AsyncMetrikaAPI()
        assert "METRIKA_TOKEN" in str(exc.value)

    def test_token_from_settings(self):
        configure_settings(token="y0_from_settings", counter_id=555, poll_interval=3.0)
        api = AsyncMetrikaAPI()
        assert api.counter_id == 555
        assert api.export.poll_interval == 3.0

    def test_base_url(self):
        api = AsyncMetrikaAPI(token=TOKEN, base_url="http://localhost:8080/")
        assert api.base_url == "http://localhost:8080"

    def test_service_namespaces(self, api):
        assert isinstance(api.counters, CountersService)
        assert isinstance(api.logs, LogsService)
        assert isinstance(api.export, AsyncExportService)
        # Same instance on repeated access
        assert api.logs is api.logs
        assert api.export is api.export

    def test_logs_requires_counter(self):
        api = AsyncMetrikaAPI(token=TOKEN)
        with pytest.raises(ValueError) as exc:
            api.logs
        assert "METRIKA_COUNTER_ID" in str(exc.value)

    def test_counters_without_counter_id(self):
        api = AsyncMetrikaAPI(token=TOKEN)
        assert isinstance(api.counters, CountersService)

    def test_zero_parallel_parts_rejected(self):
        api = AsyncMetrikaAPI(token=TOKEN, counter_id=COUNTER_ID, max_parallel_parts=0)
        with pytest.raises(ValueError):
            api.export

    def test_repr(self, api):
        assert "AsyncMetrikaAPI" in repr(api)
        assert str(COUNTER_ID) in repr(api)

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with AsyncMetrikaAPI(token=TOKEN, counter_id=COUNTER_ID) as api:
            assert api is not None
        assert api.transport._client.is_closed


class TestMetrikaClient:
    """Tests for the synchronous MetrikaClient."""

    def _client(self, fake, **kwargs) -> MetrikaClient:
        return MetrikaClient(
            token=TOKEN,
            counter_id=COUNTER_ID,
            poll_interval=0,
            http_transport=httpx.MockTransport(fake.handler),
            **kwargs,
        )

    def test_requires_token(self):
        with pytest.raises(ValueError):
            MetrikaClient()

    def test_list_counters(self, fake):
        counters = self._client(fake).list_counters()
        assert [c.id for c in counters] == [COUNTER_ID]

    def test_create_and_get(self, fake):
        client = self._client(fake)
        created = client.create_log_request("2024-01-01", "2024-01-31", ["ym:s:visitID", "ym:s:date"])
        assert created.status == "created"
        post = fake.requests[-1]
        assert post.method == "POST"
        assert post.url.params["fields"] == "ym:s:visitID,ym:s:date"

        fake.statuses = ["created"]
        assert client.get_log_request(created.request_id).status == "created"

    def test_wait_and_download(self, fake, tmp_path):
        fake.statuses = ["created", "processed"]
        fake.set_parts([10, 20])
        client = self._client(fake)

        parts = client.wait_ready(42)
        files = client.download_parts(42, parts, tmp_path)

        assert [p.part_number for p in parts] == [0, 1]
        assert [f.stat().st_size for f in files] == [10, 20]

    def test_terminal_status_raises(self, fake):
        fake.statuses = ["processing_failed"]
        with pytest.raises(ReportStatusError) as exc:
            self._client(fake).wait_ready(42)
        assert exc.value.code == 500

    def test_export(self, fake, tmp_path):
        fake.statuses = ["created", "processed"]
        fake.set_parts([5])
        result = self._client(fake).export("2024-01-01", "2024-01-31", "ym:s:visitID", tmp_path)
        assert result.request_id == 42
        assert len(result.files) == 1
        assert result.metrics.downloaded_size == 5

    def test_clean(self, fake):
        assert self._client(fake).clean_log_request(42).status == "cleaned_by_user"

    def test_repr(self, fake):
        assert "MetrikaClient" in repr(self._client(fake))
