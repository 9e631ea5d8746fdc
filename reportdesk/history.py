"""История отчётов в памяти: новые сверху, фиксированная ёмкость, после перезапуска пусто."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from reportdesk.config import HISTORY_CAPACITY
from reportdesk.errors import NotFoundError
from reportdesk.models import HistoryEntry, ReplayFields, ReportRequest


class HistoryStore:
    """
    Ограниченная история принятых запросов.

    Заметки по реализации:
      - deque(maxlen=capacity) + appendleft: вставка O(1), самая старая запись
        выпадает с правого конца, когда хранилище заполнено;
      - записи это frozen dataclass, на месте ничего не меняется;
      - list() отдаёт снимок-кортеж, снаружи порядок не испортить.
    """

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def record(self, request: ReportRequest) -> HistoryEntry:
        entry = HistoryEntry.from_request(request)
        self._entries.appendleft(entry)
        return entry

    def list(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def replay(self, entry: HistoryEntry) -> ReplayFields:
        """Поля для возврата в форму. Само хранилище не меняется."""
        if not any(e.request_id == entry.request_id for e in self._entries):
            raise NotFoundError(f"request_id={entry.request_id} not in history")
        return ReplayFields(
            report_type=entry.report_type,
            reporting_year=entry.reporting_year,
            client_name=entry.client_name,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))
