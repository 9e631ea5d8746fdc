# 1) Imports
from __future__ import annotations

from reportdesk.config import (
    LOG_DEBUG,
    LOG_ENABLED,
    OUTPUT_DIR,
    REPORT_ENDPOINT,
    REQUEST_TIMEOUT,
    TRANSPORT_KIND,
)
from reportdesk.history import HistoryStore
from reportdesk.logging_utils import get_logger, setup_logging
from reportdesk.request_builder import RequestBuilder
from reportdesk.transport import HttpTransport, LocalDocumentTransport, SimulatedTransport, Transport

__all__ = ["build_transport", "main", "run"]


def build_transport(kind: str = TRANSPORT_KIND, logger=None) -> Transport:
    """simulated | http | local → экземпляр Transport."""
    kind = (kind or "simulated").strip().lower()
    if kind == "http":
        return HttpTransport(REPORT_ENDPOINT, REQUEST_TIMEOUT, logger=logger)
    if kind == "local":
        return LocalDocumentTransport(OUTPUT_DIR, logger=logger)
    if kind == "simulated":
        return SimulatedTransport(logger=logger)
    raise ValueError(f"unknown transport: {kind!r}")


# 2) Точка входа (инициализация и «провода»)
def main(page):  # без аннотации, чтобы не держать Flet на импорте
    # локальные импорты, чтобы тестовый monkeypatch их перехватывал
    import flet as ft

    import reportdesk.ui_builders as U  # noqa: PLC0415
    from reportdesk.controller import FormController  # noqa: PLC0415
    from reportdesk.handlers import Handlers  # noqa: PLC0415

    # путь и ротация файла берутся из config внутри setup_logging
    logger = setup_logging(enabled=LOG_ENABLED, debug=LOG_DEBUG)
    U.configure_window_and_theme(page)

    controller = FormController(
        RequestBuilder(),
        HistoryStore(),
        build_transport(TRANSPORT_KIND, get_logger("transport")),
        logger,
    )
    logger.info("app_start transport=%s", TRANSPORT_KIND)

    # --- форма ---
    header_col = U.build_header()
    chips_row, chips = U.build_type_chips()
    year_row, year_value, year_down, year_up = U.build_year_stepper(controller.year)
    client_name_field, download_field = U.build_inputs()
    button_row, generate_button, clear_button, copy_button = U.build_buttons()
    status_text = U.build_status()
    footer_container = U.build_footer()

    # история появляется только когда в ней что-то есть
    history_box = ft.Container(visible=False)

    handlers = Handlers(
        page=page,
        logger=logger,
        controller=controller,
        chips=chips,
        year_value=year_value,
        client_name_field=client_name_field,
        download_field=download_field,
        generate_button=generate_button,
        status_text=status_text,
        history_box=history_box,
    )

    title_row, _menu_btn, _minimize_btn, _close_btn, _drag_area = U.build_title_bar(
        t=lambda k: k,
        on_clear_history=handlers.on_clear_history,
        on_copy=handlers.on_copy,
        on_minimize=handlers.on_minimize,
        on_close=handlers.on_close,
    )

    root = U.compose_page(
        title_bar=title_row,
        header_col=header_col,
        chips_row=chips_row,
        year_row=year_row,
        client_name_field=client_name_field,
        download_field=download_field,
        button_row=button_row,
        status_text=status_text,
        history_box=history_box,
        footer_container=footer_container,
    )
    page.add(root)

    # бинды
    for chip in chips.values():
        chip.on_select = handlers.on_select_type
    year_up.on_click = handlers.on_year_up
    year_down.on_click = handlers.on_year_down
    client_name_field.on_change = handlers.on_client_name_change
    client_name_field.on_submit = handlers.on_generate
    client_name_field.suffix.on_click = handlers.on_paste
    generate_button.on_click = handlers.on_generate
    clear_button.on_click = handlers.on_clear
    copy_button.on_click = handlers.on_copy

    page.update()
    return handlers


def run():  # pragma: no cover
    import flet as ft

    ft.app(target=main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":  # pragma: no cover
    run()
