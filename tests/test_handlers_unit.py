import types

import pytest

import reportdesk.handlers as H
from reportdesk.controller import FormController
from reportdesk.handlers import MSG_CLEARED, MSG_FAILED, MSG_LOADED, MSG_SUCCESS, Handlers
from reportdesk.history import HistoryStore
from reportdesk.models import ReportType
from reportdesk.request_builder import USER_MESSAGES


class DummyPage:
    def __init__(self):
        self.clipboard = None
        self.updated = 0
        self.overlay = []  # нужно для Handlers.toast()
        self.cursor = None
        self.window = types.SimpleNamespace(
            minimized=False,
            closed=False,
        )
        self.window.close = lambda: setattr(self.window, "closed", True)

    def update(self):
        self.updated += 1

    def set_clipboard(self, text):
        self.clipboard = text


class DummyLogger:
    def __getattr__(self, name):
        def _noop(*_a, **_k):
            pass

        return _noop


class Btn:
    def __init__(self):
        self.on_click = None
        self.disabled = False


class Field:
    def __init__(self, val=""):
        self.value = val
        self.suffix = types.SimpleNamespace(on_click=None)
        self.visible = True
        self.color = None


class Chip:
    def __init__(self, data):
        self.data = data
        self.selected = False


class Box:
    def __init__(self):
        self.content = None
        self.visible = False


class MockPyperclip:
    def __init__(self):
        self._clipboard = ""

    def paste(self):
        return self._clipboard


def _event(control):
    return types.SimpleNamespace(control=control)


@pytest.fixture
def ui(monkeypatch, counting_builder, ok_transport):
    mock_pyperclip = MockPyperclip()
    monkeypatch.setattr(H, "pyperclip", mock_pyperclip)

    page = DummyPage()
    controller = FormController(counting_builder, HistoryStore(), ok_transport, DummyLogger())
    chips = {rt.value: Chip(rt.value) for rt in ReportType}
    ns = types.SimpleNamespace(
        page=page,
        controller=controller,
        transport=ok_transport,
        chips=chips,
        year_value=Field("2025"),
        client=Field(""),
        download=Field(""),
        generate=Btn(),
        status=Field(""),
        history_box=Box(),
        clip=mock_pyperclip,
    )
    ns.h = Handlers(
        page,
        DummyLogger(),
        controller,
        chips,
        ns.year_value,
        ns.client,
        ns.download,
        ns.generate,
        ns.status,
        ns.history_box,
    )  # type: ignore[arg-type]
    return ns


def _select(ui, value):
    ui.h.on_select_type(_event(ui.chips[value]))


def test_select_type_is_exclusive(ui):
    _select(ui, "P&L")
    _select(ui, "Cash Flow")

    assert ui.controller.selected_type is ReportType.CASH_FLOW
    assert [c.selected for c in ui.chips.values()] == [False, False, True]


def test_year_buttons(ui):
    ui.h.on_year_up(None)
    assert ui.year_value.value == "2026"

    ui.controller.year = 2000
    ui.year_value.value = "2000"
    ui.h.on_year_down(None)
    assert ui.year_value.value == "2000"
    assert ui.controller.year == 2000


def test_generate_without_type_shows_error(ui):
    ui.client.value = "Acme"
    ui.h.on_generate(None)

    assert ui.status.value == USER_MESSAGES["report type required"]
    assert ui.status.visible is True
    assert ui.transport.calls == []
    assert ui.history_box.visible is False


def test_generate_success_flow(ui):
    _select(ui, "P&L")
    ui.client.value = "  Acme Corporation "

    ui.h.on_generate(None)

    sent = ui.transport.calls[0]
    assert sent.client_name == "Acme Corporation"
    assert ui.status.value == MSG_SUCCESS
    assert ui.download.value.endswith(f"{sent.request_id}.docx")
    assert ui.generate.disabled is False
    # форма сброшена, история показана
    assert ui.client.value == ""
    assert not any(c.selected for c in ui.chips.values())
    assert ui.history_box.visible is True
    assert ui.history_box.content is not None


def test_generate_builds_request_once(ui):
    _select(ui, "P&L")
    ui.client.value = "Acme"

    ui.h.on_generate(None)

    # первый же собранный запрос и уходит в транспорт, лишних id нет
    assert ui.transport.calls[0].request_id.endswith("-s00000001")
    assert ui.controller.history.list()[0].request_id == ui.transport.calls[0].request_id


def test_generate_transport_failure(ui, boom_transport):
    ui.controller.transport = boom_transport
    _select(ui, "Balance Sheet")
    ui.client.value = "Globex"

    ui.h.on_generate(None)

    assert ui.status.value == MSG_FAILED
    assert ui.controller.history.list() == ()
    assert ui.generate.disabled is False
    # поля не сбрасываются, можно повторить
    assert ui.client.value == "Globex"


def test_generate_unexpected_error_is_reported(ui):
    def explode(*_a):
        raise RuntimeError("bug")

    ui.controller.submit = explode
    _select(ui, "P&L")
    ui.client.value = "Acme"

    ui.h.on_generate(None)

    assert ui.status.value == MSG_FAILED
    assert ui.generate.disabled is False


def test_history_item_click_loads_form(ui):
    _select(ui, "Cash Flow")
    ui.client.value = "Initech"
    ui.h.on_year_up(None)
    ui.h.on_generate(None)

    entry = ui.controller.history.list()[0]
    ui.h.on_history_item(entry)

    assert ui.client.value == "Initech"
    assert ui.year_value.value == "2026"
    assert ui.chips["Cash Flow"].selected is True
    assert ui.status.value == MSG_LOADED


def test_clear_history(ui):
    _select(ui, "P&L")
    ui.client.value = "Acme"
    ui.h.on_generate(None)

    ui.h.on_clear_history()

    assert ui.controller.history.list() == ()
    assert ui.history_box.visible is False
    assert ui.status.value == MSG_CLEARED


def test_client_name_change_hides_status(ui):
    ui.h.show_status("oops", "error")
    ui.client.value = "Ac"
    ui.h.on_client_name_change(None)

    assert ui.controller.client_name == "Ac"
    assert ui.status.visible is False


def test_paste_fills_client_name(ui):
    ui.clip._clipboard = "Umbrella Corp"
    ui.h.on_paste(None)
    assert ui.client.value == "Umbrella Corp"
    assert ui.controller.client_name == "Umbrella Corp"


def test_copy_download_link(ui):
    ui.download.value = "https://storage.kokoodi.com/reports/x.docx"
    ui.h.on_copy(None)
    assert ui.page.clipboard == "https://storage.kokoodi.com/reports/x.docx"


def test_copy_nothing(ui):
    ui.h.on_copy(None)
    assert ui.page.clipboard is None
    assert len(ui.page.overlay) == 1  # тост «Nothing to copy!»


def test_clear_form(ui):
    _select(ui, "P&L")
    ui.client.value = "Acme"
    ui.h.on_client_name_change(None)

    ui.h.on_clear(None)

    assert ui.client.value == ""
    assert ui.controller.selected_type is None


def test_clear_empty_form_toasts(ui):
    ui.h.on_clear(None)
    assert len(ui.page.overlay) == 1


def test_window_buttons(ui):
    ui.h.on_minimize(None)
    assert ui.page.window.minimized is True
    ui.h.on_close(None)
    assert ui.page.window.closed is True
