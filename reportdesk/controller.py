"""Состояние формы и сценарий отправки, без зависимости от Flet."""

from __future__ import annotations

import logging

from reportdesk.config import DEFAULT_YEAR, MIN_YEAR
from reportdesk.errors import TransportError
from reportdesk.history import HistoryStore
from reportdesk.models import (
    BuildResult,
    HistoryEntry,
    ReplayFields,
    ReportType,
    SubmissionResult,
    SubmitOutcome,
)
from reportdesk.request_builder import RequestBuilder
from reportdesk.transport import Transport


class FormController:
    """
    Хранит всё, что меняет форма: выбранный тип, год, имя клиента,
    историю и флаг «запрос в полёте». UI-хендлеры работают только с этим объектом.
    """

    def __init__(  # noqa: PLR0913
        self,
        builder: RequestBuilder,
        history: HistoryStore,
        transport: Transport,
        logger: logging.Logger,
        *,
        default_year: int = DEFAULT_YEAR,
        min_year: int = MIN_YEAR,
    ):
        self.builder = builder
        self.history = history
        self.transport = transport
        self.logger = logger
        self.min_year = min_year

        self.selected_type: ReportType | None = None
        self.year = max(default_year, min_year)
        self.client_name = ""
        self.busy = False
        self.last_result: SubmissionResult | None = None

    # Поля формы
    def select_type(self, value: ReportType | str | None) -> None:
        self.selected_type = ReportType.parse(value)

    def year_up(self) -> int:
        self.year += 1
        return self.year

    def year_down(self) -> bool:
        """Год на шаг назад; False, если уже на нижней границе."""
        if self.year <= self.min_year:
            return False
        self.year -= 1
        return True

    def set_client_name(self, text: str | None) -> None:
        self.client_name = text or ""

    def reset(self) -> None:
        # год оставляем как есть, сбрасываем только выбор и имя
        self.selected_type = None
        self.client_name = ""

    # Главный сценарий: валидация → отправка → история
    def prepare(self) -> BuildResult:
        return self.builder.build(self.selected_type, self.year, self.client_name)

    def submit(self, built: BuildResult | None = None) -> SubmitOutcome:
        """Отправляет форму; built из prepare() переиспользуется, чтобы не собирать запрос дважды."""
        if self.busy:
            self.logger.warning("submit_reject reason=in_flight")
            return SubmitOutcome(kind="busy")

        if built is None:
            built = self.prepare()
        if not built.ok:
            self.logger.info("submit_reject reason=%s", built.error)
            return SubmitOutcome(kind="invalid", error=built.error)

        request = built.data
        self.logger.info(
            "submit_start request_id=%s type=%s year=%d",
            request.request_id,
            request.report_type.value,
            request.reporting_year,
        )

        self.busy = True
        try:
            result = self.transport.submit(request)
        except TransportError as e:
            self.logger.error("submit_failed request_id=%s err=%s", request.request_id, e)
            return SubmitOutcome(kind="failed", error=str(e), request=request)
        finally:
            self.busy = False

        self.history.record(request)
        self.last_result = result
        self.logger.info("submit_success request_id=%s url=%s", request.request_id, result.download_url)
        return SubmitOutcome(kind="success", request=request, result=result)

    # История
    def load_from_history(self, entry: HistoryEntry) -> ReplayFields:
        fields = self.history.replay(entry)
        self.selected_type = fields.report_type
        self.year = fields.reporting_year
        self.client_name = fields.client_name
        self.logger.debug("history_loaded request_id=%s", entry.request_id)
        return fields

    def clear_history(self) -> None:
        self.history.clear()
        self.logger.info("history_cleared")
