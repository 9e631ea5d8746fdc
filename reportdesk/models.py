"""Контракты данных (DTO) для запросов на отчёт и их истории. Бизнес-логики здесь нет."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Literal

from reportdesk.config import CLIENT_NAME_MIN_LEN, MIN_YEAR

OutcomeKind = Literal["invalid", "busy", "failed", "success"]


class ReportType(StrEnum):
    PNL = "P&L"
    BALANCE_SHEET = "Balance Sheet"
    CASH_FLOW = "Cash Flow"

    @classmethod
    def parse(cls, value: ReportType | str | None) -> ReportType | None:
        """Значение чипа → ReportType; None, если ничего или неизвестное."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            return None


def iso_timestamp(dt: datetime) -> str:
    """UTC ISO-8601 с миллисекундами и Z в конце: 2025-01-31T09:15:00.123Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


@dataclass(frozen=True, slots=True)
class ReportRequest:
    """
    Проверенное намерение сгенерировать отчёт.

    Создаёт их только RequestBuilder; проверки ниже ловят ошибки
    программиста, а не пользовательский ввод.
    """

    report_type: ReportType
    reporting_year: int
    client_name: str
    timestamp: str
    request_id: str

    def __post_init__(self):
        if not isinstance(self.report_type, ReportType):
            raise ValueError(f"report_type must be ReportType, got {self.report_type!r}")
        if self.reporting_year < MIN_YEAR:
            raise ValueError(f"reporting_year must be >= {MIN_YEAR}")
        if len(self.client_name) < CLIENT_NAME_MIN_LEN or self.client_name != self.client_name.strip():
            raise ValueError("client_name must be trimmed and at least 2 characters")

    def to_payload(self) -> dict[str, Any]:
        """Тело JSON для сервиса отчётов."""
        return {
            "reportType": self.report_type.value,
            "reportingYear": self.reporting_year,
            "clientName": self.client_name,
            "timestamp": self.timestamp,
            "requestId": self.request_id,
        }


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    report_type: ReportType
    client_name: str
    reporting_year: int
    timestamp: str
    request_id: str

    @classmethod
    def from_request(cls, request: ReportRequest) -> HistoryEntry:
        return cls(
            report_type=request.report_type,
            client_name=request.client_name,
            reporting_year=request.reporting_year,
            timestamp=request.timestamp,
            request_id=request.request_id,
        )


@dataclass(frozen=True, slots=True)
class ReplayFields:
    """То, что запись истории возвращает в форму."""

    report_type: ReportType
    reporting_year: int
    client_name: str


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Задано либо `error`, либо `data`, но не оба."""

    error: str | None = None
    data: ReportRequest | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    report_id: str
    download_url: str
    generated_at: str


@dataclass(slots=True)
class SubmitOutcome:
    kind: OutcomeKind
    error: str | None = None
    request: ReportRequest | None = None
    result: SubmissionResult | None = None
