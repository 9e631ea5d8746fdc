import logging

import flet as ft
import pyperclip

from reportdesk.controller import FormController
from reportdesk.models import HistoryEntry
from reportdesk.request_builder import USER_MESSAGES
from reportdesk.ui.history.view import make_history_section

STATUS_COLORS = {
    "error": ft.Colors.RED_600,
    "success": ft.Colors.GREEN_700,
    "loading": ft.Colors.GREY_700,
}

MSG_GENERATING = "Generating report..."
MSG_SUCCESS = "Report generated successfully!"
MSG_FAILED = "Failed to generate report. Please try again."
MSG_LOADED = "Settings loaded from history"
MSG_CLEARED = "History cleared"


class Handlers:
    def __init__(  # noqa: PLR0913
        self,
        page: ft.Page,
        logger: logging.Logger,
        controller: FormController,
        chips: dict[str, ft.Chip],
        year_value: ft.Text,
        client_name_field: ft.TextField,
        download_field: ft.TextField,
        generate_button: ft.ElevatedButton,
        status_text: ft.Text,
        history_box: ft.Container,
    ):
        self.page = page
        self.logger = logger
        self.controller = controller
        self.chips = chips
        self.year_value = year_value
        self.client_name_field = client_name_field
        self.download_field = download_field
        self.generate_button = generate_button
        self.status_text = status_text
        self.history_box = history_box

    # UX-утилиты
    def toast(self, msg: str, ms: int = 1500):
        sb = ft.SnackBar(ft.Text(msg), bgcolor=ft.Colors.BLACK, duration=ms)
        self.page.overlay.append(sb)
        sb.open = True
        self.page.update()

    def busy(self, on: bool):
        self.page.cursor = ft.MouseCursor.WAIT if on else ft.MouseCursor.BASIC
        self.generate_button.disabled = on
        self.page.update()

    def show_status(self, msg: str, kind: str):
        self.status_text.value = msg
        self.status_text.color = STATUS_COLORS.get(kind)
        self.status_text.visible = True
        self.page.update()

    def hide_status(self):
        self.status_text.value = ""
        self.status_text.visible = False
        self.page.update()

    def sync_form(self):
        """Переносит состояние контроллера в контролы."""
        selected = self.controller.selected_type
        for value, chip in self.chips.items():
            chip.selected = selected is not None and value == selected.value
        self.year_value.value = str(self.controller.year)
        self.client_name_field.value = self.controller.client_name
        self.page.update()

    def render_history(self):
        entries = self.controller.history.list()
        self.history_box.content = make_history_section(
            entries,
            on_select=self.on_history_item,
            on_clear=self.on_clear_history,
        )
        self.history_box.visible = bool(entries)
        self.page.update()

    # Поля формы
    def on_select_type(self, e):
        self.controller.select_type(e.control.data)
        self.sync_form()
        self.hide_status()

    def on_year_up(self, _):
        self.controller.year_up()
        self.year_value.value = str(self.controller.year)
        self.hide_status()

    def on_year_down(self, _):
        if self.controller.year_down():
            self.year_value.value = str(self.controller.year)
            self.hide_status()

    def on_client_name_change(self, _):
        self.controller.set_client_name(self.client_name_field.value)
        self.hide_status()

    def on_paste(self, _):
        pasted_text = pyperclip.paste() or ""
        self.client_name_field.value = pasted_text
        self.controller.set_client_name(pasted_text)
        self.logger.debug("on_paste len=%d", len(pasted_text))
        self.page.update()

    def on_clear(self, _):
        if self.client_name_field.value or self.controller.selected_type:
            self.controller.reset()
            self.sync_form()
            self.hide_status()
        else:
            self.toast("Nothing to clear!", 1000)

    def on_copy(self, _):
        text = (self.download_field.value or "").strip()
        if text:
            self.page.set_clipboard(text)
            self.toast("Copied to clipboard!")
            self.logger.info("copy_to_clipboard ok")
        else:
            self.toast("Nothing to copy!")
            self.logger.info("copy_to_clipboard skipped reason=empty")

    # Главный сценарий: валидация → отправка → история
    def on_generate(self, _):
        self.controller.set_client_name(self.client_name_field.value)

        built = self.controller.prepare()
        if not built.ok:
            self.show_status(USER_MESSAGES.get(built.error, built.error), "error")
            self.logger.info("generate_reject reason=%s", built.error)
            return

        self.show_status(MSG_GENERATING, "loading")
        self.busy(True)
        try:
            outcome = self.controller.submit(built)
        except Exception:
            self.logger.exception("generate_failed unexpected error")
            self.show_status(MSG_FAILED, "error")
            return
        finally:
            self.busy(False)

        if outcome.kind == "success":
            self.download_field.value = outcome.result.download_url
            self.render_history()
            self.controller.reset()
            self.sync_form()
            self.show_status(MSG_SUCCESS, "success")
        elif outcome.kind == "invalid":
            self.show_status(USER_MESSAGES.get(outcome.error, outcome.error), "error")
        elif outcome.kind == "busy":
            self.toast("A report is already being generated.")
        else:
            self.show_status(MSG_FAILED, "error")

    # История
    def on_history_item(self, entry: HistoryEntry):
        try:
            self.controller.load_from_history(entry)
        except Exception:
            self.logger.exception("Failed to load history item")
            self.toast("Failed to load history item.")
            return
        self.sync_form()
        self.show_status(MSG_LOADED, "success")

    def on_clear_history(self, _=None):
        self.controller.clear_history()
        self.render_history()
        self.show_status(MSG_CLEARED, "success")

    def on_close(self, _):
        self.page.window.close()

    def on_minimize(self, _):
        self.page.window.minimized = True
        self.page.update()
