"""Поля формы → проверенный ReportRequest."""

from __future__ import annotations

import random
import string
from collections.abc import Callable
from datetime import UTC, datetime

from reportdesk.config import CLIENT_NAME_MIN_LEN
from reportdesk.models import BuildResult, ReportRequest, ReportType, iso_timestamp

__all__ = [
    "ERR_TYPE_REQUIRED",
    "ERR_NAME_REQUIRED",
    "ERR_NAME_TOO_SHORT",
    "USER_MESSAGES",
    "RequestBuilder",
    "make_request_id",
]

ERR_TYPE_REQUIRED = "report type required"
ERR_NAME_REQUIRED = "client name required"
ERR_NAME_TOO_SHORT = "client name too short"

# Что видит пользователь в статусе формы
USER_MESSAGES = {
    ERR_TYPE_REQUIRED: "Please select a report type",
    ERR_NAME_REQUIRED: "Please enter a client name or ID",
    ERR_NAME_TOO_SHORT: f"Client name must be at least {CLIENT_NAME_MIN_LEN} characters",
}

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
SUFFIX_LEN = 9


def _now_default() -> datetime:
    return datetime.now(UTC)


def _suffix_default() -> str:
    return "".join(random.choices(_SUFFIX_ALPHABET, k=SUFFIX_LEN))


def _as_utc(now: datetime) -> datetime:
    # наивное время считаем UTC, как и iso_timestamp
    return now.replace(tzinfo=UTC) if now.tzinfo is None else now


def make_request_id(now: datetime, suffix: str) -> str:
    """REQ-<миллисекунды epoch>-<суффикс>."""
    now = _as_utc(now)
    millis = int(now.timestamp()) * 1000 + now.microsecond // 1000
    return f"REQ-{millis}-{suffix}"


class RequestBuilder:
    """
    Проверяет три поля формы и собирает ReportRequest.

    Часы и случайность подставляются снаружи, чтобы id и timestamp воспроизводились в тестах.
    """

    def __init__(
        self,
        *,
        now_fn: Callable[[], datetime] = _now_default,
        suffix_fn: Callable[[], str] = _suffix_default,
    ):
        self._now_fn = now_fn
        self._suffix_fn = suffix_fn

    def build(self, selected_type: ReportType | str | None, year: int, raw_client_name: str | None) -> BuildResult:
        report_type = ReportType.parse(selected_type)
        client_name = (raw_client_name or "").strip()

        # порядок проверок важен: первая ошибка выигрывает
        if report_type is None:
            return BuildResult(error=ERR_TYPE_REQUIRED)
        if not client_name:
            return BuildResult(error=ERR_NAME_REQUIRED)
        if len(client_name) < CLIENT_NAME_MIN_LEN:
            return BuildResult(error=ERR_NAME_TOO_SHORT)

        now = _as_utc(self._now_fn())
        request = ReportRequest(
            report_type=report_type,
            reporting_year=int(year),
            client_name=client_name,
            timestamp=iso_timestamp(now),
            request_id=make_request_id(now, self._suffix_fn()),
        )
        return BuildResult(data=request)
