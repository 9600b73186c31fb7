"""
Excel export functionality for Junk Shop Ledger
"""
from __future__ import annotations
from typing import Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from app_logging import get_logger
from csv_handler import DEFAULT_HEADERS
from models import ReportFilters, ReportRow
from reports import summarize_by_material, total_result

logger = get_logger(__name__)

MATERIAL_HEADERS = ("Material", "Lines", "Net weight", "Result")


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F46E5")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=45):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            if cell.value is None:
                continue
            max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def _filter_note(filters: Optional[ReportFilters]) -> str:
    if filters is None:
        return ""
    parts = []
    if filters.date_start or filters.date_end:
        parts.append(f"Dates: {filters.date_start or '...'} to {filters.date_end or '...'}")
    if filters.material:
        parts.append(f"Material contains: {filters.material}")
    return "; ".join(parts)


def export_excel(
    rows: Sequence[ReportRow],
    filepath: str,
    headers: Sequence[str] = DEFAULT_HEADERS,
    filters: Optional[ReportFilters] = None,
    total_label: str = "TOTAL",
) -> None:
    """
    Export report rows to an Excel file with two sheets:
    - Report: one line per row in report order, with a totals row
    - Materials: totals per material
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Report"

    ws.append(list(headers))
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for r in rows:
        ws.append([r.date, r.material, r.weight, r.deduction, r.price, r.result])

    ws.append([total_label, "", "", "", "", total_result(rows)])
    trow = ws.max_row
    ws.cell(trow, 1).font = Font(bold=True)
    ws.cell(trow, 6).font = Font(bold=True)

    note = _filter_note(filters)
    if note:
        ws.append([])
        ws.append([note])
        ws.cell(ws.max_row, 1).font = Font(italic=True, color="666666")

    for row_idx in range(2, trow + 1):
        for c in (3, 5):
            ws.cell(row_idx, c).number_format = "0.##"
        ws.cell(row_idx, 4).number_format = '0.##"%"'
        ws.cell(row_idx, 6).number_format = "#,##0"
    _autosize_columns(ws)

    ms = wb.create_sheet("Materials")
    ms.append(list(MATERIAL_HEADERS))
    _style_header(ms, 1)
    ms.freeze_panes = "A2"
    for s in summarize_by_material(rows):
        ms.append([s.material, s.lines, round(s.net_weight, 2), s.result])
    for row_idx in range(2, ms.max_row + 1):
        ms.cell(row_idx, 3).number_format = "0.00"
        ms.cell(row_idx, 4).number_format = "#,##0"
    _autosize_columns(ms)

    wb.save(filepath)
    logger.info("Exported %d rows to %s", len(rows), filepath)
