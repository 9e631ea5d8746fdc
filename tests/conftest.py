import logging
from datetime import UTC, datetime

import pytest

from reportdesk.errors import TransportError
from reportdesk.history import HistoryStore
from reportdesk.models import SubmissionResult
from reportdesk.request_builder import RequestBuilder
from reportdesk.transport import Transport

FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, 589000, tzinfo=UTC)


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def builder():
    # детерминированные часы и суффикс: id и timestamp предсказуемы
    return RequestBuilder(now_fn=lambda: FIXED_NOW, suffix_fn=lambda: "abc123xyz")


@pytest.fixture
def counting_builder():
    """Каждая сборка получает новый суффикс: s00000001, s00000002, ..."""
    counter = {"n": 0}

    def _suffix():
        counter["n"] += 1
        return f"s{counter['n']:08d}"

    return RequestBuilder(now_fn=lambda: FIXED_NOW, suffix_fn=_suffix)


@pytest.fixture
def make_request(counting_builder):
    def _make(name="Acme Corporation", rtype="P&L", year=2025):
        res = counting_builder.build(rtype, year, name)
        assert res.ok, res.error
        return res.data

    return _make


@pytest.fixture
def history():
    return HistoryStore()


class FakeTransportOk(Transport):
    def __init__(self):
        self.calls = []

    def submit(self, request):
        self.calls.append(request)
        return SubmissionResult(
            report_id=request.request_id,
            download_url=f"https://storage.example.com/reports/{request.request_id}.docx",
            generated_at=request.timestamp,
        )


class FakeTransportBoom(Transport):
    def __init__(self):
        self.calls = []

    def submit(self, request):
        self.calls.append(request)
        raise TransportError("boom")


@pytest.fixture
def ok_transport():
    return FakeTransportOk()


@pytest.fixture
def boom_transport():
    return FakeTransportBoom()


@pytest.fixture
def quiet_logger():
    lg = logging.getLogger("reportdesk.tests")
    lg.addHandler(logging.NullHandler())
    return lg
