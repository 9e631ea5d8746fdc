"""Отправка запросов на отчёт в сервис документов.

Три бэкенда за одним интерфейсом:
- HttpTransport      — POST JSON на эндпоинт отчётов (DI через _post для юнит-тестов)
- SimulatedTransport — фиксированная задержка и заготовленный ответ, без сети
- LocalDocumentTransport — рендерит .docx на этой машине через python-docx
"""

from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import UTC, datetime
from http import HTTPStatus
from pathlib import Path

import requests
import validators

from reportdesk.config import OUTPUT_DIR, REPORT_ENDPOINT, REQUEST_TIMEOUT, SIMULATED_DELAY_SEC, STORAGE_BASE_URL
from reportdesk.documents import create_simple_report
from reportdesk.errors import DocumentError, TransportError, ValidationError
from reportdesk.logging_utils import get_logger
from reportdesk.models import ReportRequest, SubmissionResult, iso_timestamp

__all__ = [
    "Transport",
    "HttpTransport",
    "SimulatedTransport",
    "LocalDocumentTransport",
    "parse_response",
]

_RESPONSE_KEYS = ("reportId", "downloadUrl", "generatedAt")


def _default_logger() -> logging.Logger:
    return get_logger("transport")


def parse_response(body: object) -> SubmissionResult:
    """JSON сервиса отчётов → SubmissionResult. Всё неожиданное превращается в TransportError."""
    if not isinstance(body, dict):
        raise TransportError("Report service returned non-object payload")
    if not body.get("success"):
        raise TransportError("Report service reported failure")

    missing = [k for k in _RESPONSE_KEYS if not body.get(k)]
    if missing:
        raise TransportError(f"Report service response missing: {', '.join(missing)}")

    download_url = str(body["downloadUrl"]).strip()
    try:
        is_url = bool(validators.url(download_url))
    except Exception:
        is_url = False
    if not is_url:
        raise TransportError("Report service returned invalid download URL")

    return SubmissionResult(
        report_id=str(body["reportId"]),
        download_url=download_url,
        generated_at=str(body["generatedAt"]),
    )


class Transport(ABC):
    """Контракт: отправить проверенный запрос, вернуть результат или поднять TransportError."""

    @abstractmethod
    def submit(self, request: ReportRequest) -> SubmissionResult:
        raise NotImplementedError


class HttpTransport(Transport):
    def __init__(
        self,
        endpoint: str = REPORT_ENDPOINT,
        timeout: float = REQUEST_TIMEOUT,
        *,
        logger: logging.Logger | None = None,
        _post: Callable[..., object] | None = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.logger = logger or _default_logger()
        self._post = _post

    def submit(self, request: ReportRequest) -> SubmissionResult:
        post = self._post or requests.post
        payload = request.to_payload()
        self.logger.info("http_submit endpoint=%s request_id=%s", self.endpoint, request.request_id)

        try:
            resp = post(self.endpoint, json=payload, timeout=self.timeout)
        except Exception as e:
            raise TransportError(f"Report request failed: {e}") from e

        status = getattr(resp, "status_code", HTTPStatus.OK)
        if status != HTTPStatus.OK:
            raise TransportError(f"Report service HTTP {status}")

        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError("Report service returned invalid JSON") from e

        return parse_response(body)


class SimulatedTransport(Transport):
    """Заглушка вместо бэкенда: ждёт, пишет payload в лог, отвечает успехом."""

    def __init__(
        self,
        *,
        logger: logging.Logger | None = None,
        delay: float = SIMULATED_DELAY_SEC,
        storage_base_url: str = STORAGE_BASE_URL,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        self.logger = logger or _default_logger()
        self.delay = delay
        self.storage_base_url = storage_base_url.rstrip("/")
        self._sleep = sleep_fn

    def submit(self, request: ReportRequest) -> SubmissionResult:
        if self.delay > 0:
            self._sleep(self.delay)

        self.logger.info("Payload to be sent to backend:\n%s", json.dumps(request.to_payload(), indent=2))

        return SubmissionResult(
            report_id=request.request_id,
            download_url=f"{self.storage_base_url}/{request.request_id}.docx",
            generated_at=request.timestamp,
        )


class LocalDocumentTransport(Transport):
    def __init__(
        self,
        output_dir: str | Path | None = OUTPUT_DIR,
        *,
        logger: logging.Logger | None = None,
        render: Callable[..., Path] = create_simple_report,
    ):
        self.output_dir = output_dir
        self.logger = logger or _default_logger()
        self._render = render

    def submit(self, request: ReportRequest) -> SubmissionResult:
        try:
            path = self._render(
                request.client_name,
                request.report_type.value,
                request.reporting_year,
                output_dir=self.output_dir,
            )
        except (ValidationError, DocumentError) as e:
            raise TransportError(str(e)) from e

        return SubmissionResult(
            report_id=request.request_id,
            download_url=Path(path).resolve().as_uri(),
            generated_at=iso_timestamp(datetime.now(UTC)),
        )
