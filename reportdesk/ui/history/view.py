"""Блок недавних отчётов (только разметка; состояние живёт в FormController)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

import flet as ft

from reportdesk.models import HistoryEntry, parse_timestamp

FS_TYPE = 14
FS_DETAILS = 12
PAD = 10


def format_relative(timestamp: str, now: datetime | None = None) -> str:
    """Just now / 5m ago / 3h ago, а старше суток локальная дата."""
    dt = parse_timestamp(timestamp)
    now = now or datetime.now(UTC)
    diff_mins = int((now - dt).total_seconds() // 60)

    if diff_mins < 1:
        return "Just now"
    if diff_mins < 60:  # noqa: PLR2004
        return f"{diff_mins}m ago"
    if diff_mins < 1440:  # noqa: PLR2004
        return f"{diff_mins // 60}h ago"
    return dt.astimezone().strftime("%Y-%m-%d")


def history_details(entry: HistoryEntry, now: datetime | None = None) -> str:
    return f"{entry.client_name} • {entry.reporting_year} • {format_relative(entry.timestamp, now)}"


def make_history_section(
    entries: Sequence[HistoryEntry],
    *,
    on_select: Callable[[HistoryEntry], None] | None = None,
    on_clear: Callable | None = None,
    now: datetime | None = None,
) -> ft.Column:
    def make_row(entry: HistoryEntry) -> ft.Container:
        return ft.Container(
            content=ft.Column(
                [
                    ft.Text(entry.report_type.value, size=FS_TYPE, weight=ft.FontWeight.BOLD),
                    ft.Text(history_details(entry, now), size=FS_DETAILS, color=ft.Colors.GREY_700),
                ],
                spacing=2,
            ),
            data=entry.request_id,
            padding=PAD,
            border_radius=8,
            bgcolor=ft.Colors.GREY_100,
            ink=True,
            tooltip="Click to reuse these settings",
            on_click=(lambda e, it=entry: on_select(it)) if on_select else None,
        )

    header = ft.Row(
        controls=[
            ft.Text("Recent reports", weight=ft.FontWeight.BOLD, expand=True),
            ft.TextButton("Clear", icon=ft.Icons.DELETE_OUTLINE, on_click=on_clear),
        ],
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )

    return ft.Column(
        controls=[header, *[make_row(e) for e in entries]],
        spacing=6,
        width=350,
    )
