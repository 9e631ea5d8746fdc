import dataclasses

import pytest

from reportdesk.errors import NotFoundError
from reportdesk.history import HistoryStore
from reportdesk.models import HistoryEntry, ReplayFields, ReportType


def test_starts_empty(history):
    assert history.list() == ()
    assert len(history) == 0
    assert history.capacity == 5


def test_record_prepends_projection(history, make_request):
    req = make_request(name="Acme", rtype="Cash Flow", year=2030)
    entry = history.record(req)

    assert history.list() == (entry,)
    assert entry == HistoryEntry(
        report_type=ReportType.CASH_FLOW,
        client_name="Acme",
        reporting_year=2030,
        timestamp=req.timestamp,
        request_id=req.request_id,
    )


def test_newest_first(history, make_request):
    a = make_request(name="First")
    b = make_request(name="Second")
    history.record(a)
    history.record(b)

    assert [e.client_name for e in history.list()] == ["Second", "First"]


def test_capacity_law_six_records(history, make_request):
    reqs = [make_request(name=f"Client {i}") for i in range(1, 7)]
    for r in reqs:
        history.record(r)

    listed = history.list()
    assert len(listed) == 5
    # #1 вытеснен, остальные от новых к старым
    assert [e.request_id for e in listed] == [r.request_id for r in reversed(reqs[1:])]
    assert reqs[0].request_id not in {e.request_id for e in listed}


def test_rapid_inserts_keep_only_last_five(history, make_request):
    reqs = [make_request(name=f"Client {i}") for i in range(100)]
    for r in reqs:
        history.record(r)

    assert [e.client_name for e in history.list()] == [f"Client {i}" for i in range(99, 94, -1)]


def test_custom_capacity(make_request):
    store = HistoryStore(capacity=2)
    for i in range(3):
        store.record(make_request(name=f"C{i}"))
    assert [e.client_name for e in store.list()] == ["C2", "C1"]


@pytest.mark.parametrize("bad", [0, -1])
def test_capacity_must_be_positive(bad):
    with pytest.raises(ValueError):
        HistoryStore(capacity=bad)


def test_list_is_a_snapshot(history, make_request):
    history.record(make_request(name="Acme"))
    snap = history.list()
    history.record(make_request(name="Globex"))

    assert len(snap) == 1
    assert len(history.list()) == 2
    assert isinstance(snap, tuple)


def test_entries_are_immutable(history, make_request):
    entry = history.record(make_request())
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.client_name = "Hacked"


def test_clear_is_idempotent(history, make_request):
    history.record(make_request())
    history.clear()
    assert history.list() == ()
    history.clear()
    assert history.list() == ()


def test_clear_on_empty_store(history):
    history.clear()
    assert len(history) == 0


def test_replay_projects_form_fields(history, make_request):
    entry = history.record(make_request(name="Initech", rtype="Balance Sheet", year=2019))
    before = history.list()

    fields = history.replay(entry)

    assert fields == ReplayFields(report_type=ReportType.BALANCE_SHEET, reporting_year=2019, client_name="Initech")
    assert history.list() == before


def test_replay_does_not_reorder(history, make_request):
    old = history.record(make_request(name="Old"))
    history.record(make_request(name="New"))

    history.replay(old)
    assert [e.client_name for e in history.list()] == ["New", "Old"]


def test_replay_unknown_entry_raises(history, make_request):
    stray = HistoryEntry.from_request(make_request())
    with pytest.raises(NotFoundError):
        history.replay(stray)


def test_replay_evicted_entry_raises(history, make_request):
    first = history.record(make_request(name="Evicted"))
    for i in range(5):
        history.record(make_request(name=f"C{i}"))

    with pytest.raises(NotFoundError):
        history.replay(first)


def test_iter_yields_newest_first(history, make_request):
    history.record(make_request(name="A1"))
    history.record(make_request(name="B2"))
    assert [e.client_name for e in history] == ["B2", "A1"]
