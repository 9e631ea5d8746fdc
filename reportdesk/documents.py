"""Рендер отчёта Word (.docx) через python-docx."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from docx import Document
from docx.shared import Pt, RGBColor

from reportdesk.errors import DocumentError, ValidationError
from reportdesk.logging_utils import get_logger

__all__ = ["create_simple_report", "report_filename"]

FONT_NAME = "Calibri"
TITLE_PT = 16
BODY_PT = 12
FOOTNOTE_PT = 10
FOOTNOTE_COLOR = RGBColor(0x66, 0x66, 0x66)

logger = get_logger("documents")


def report_filename(report_type: str, when: datetime) -> str:
    return f"GeneratedReport_{report_type.replace(' ', '')}_{when.strftime('%Y%m%d_%H%M%S')}.docx"


def _add_paragraph(doc, text: str, *, bold: bool = False, size_pt: int = BODY_PT):
    p = doc.add_paragraph()
    r = p.add_run(text)
    r.bold = bold
    r.font.name = FONT_NAME
    r.font.size = Pt(size_pt)
    return p


def create_simple_report(
    client_name: str,
    report_type: str,
    reporting_year: int,
    *,
    output_dir: str | Path | None = None,
    now_fn: Callable[[], datetime] = datetime.now,
) -> Path:
    """Пишет одностраничный финансовый отчёт и возвращает полный путь к файлу.

    Исключения:
      ValidationError — пустое имя клиента или тип отчёта.
      DocumentError   — файл не удалось сохранить.
    """
    if not client_name or not str(client_name).strip():
        raise ValidationError("Client name cannot be empty")
    if not report_type or not str(report_type).strip():
        raise ValidationError("Report type cannot be empty")

    report_type = str(report_type)
    now = now_fn()
    folder = Path(output_dir) if output_dir else Path.cwd()
    path = folder / report_filename(report_type, now)

    doc = Document()
    _add_paragraph(doc, f"Financial Report: {report_type}", bold=True, size_pt=TITLE_PT)
    _add_paragraph(doc, "")
    _add_paragraph(doc, f"Report: {report_type} for Client: {client_name}")
    _add_paragraph(doc, f"Reporting Year: {reporting_year}")
    _add_paragraph(doc, "")

    stamp = _add_paragraph(doc, f"Generated: {now:%Y-%m-%d %H:%M:%S}", size_pt=FOOTNOTE_PT)
    stamp.runs[0].font.color.rgb = FOOTNOTE_COLOR

    try:
        folder.mkdir(parents=True, exist_ok=True)
        doc.save(str(path))
    except OSError as e:
        logger.error("docx_save_failed path=%s err=%s", path, e)
        raise DocumentError(f"Error creating report: {e}") from e

    logger.info("docx_created path=%s", path)
    return path
