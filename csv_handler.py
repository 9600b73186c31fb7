"""
CSV export for the Junk Shop Ledger records report
"""
from __future__ import annotations
from typing import Iterable, Sequence

from app_logging import get_logger
from models import ReportRow
from utils import format_number

logger = get_logger(__name__)

BOM = "\ufeff"
DEFAULT_HEADERS = ("Date", "Material", "Weight", "Deduction", "Price", "Result")


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def _cell(text: str) -> str:
    """Quote a cell only when it holds a separator, quote or line break"""
    if any(ch in text for ch in ',"\r\n'):
        return _quote(text)
    return text


def report_filename(day: str) -> str:
    """Suggested file name for a report exported on day (YYYY-MM-DD)"""
    return f"amc_report_{day}.csv"


def render_csv(rows: Iterable[ReportRow], headers: Sequence[str] = DEFAULT_HEADERS) -> str:
    """
    Report rows as CSV text, prefixed with a byte-order mark so spreadsheet
    programs detect UTF-8.
    Columns: date, material (always quoted), weight, deduction, price, result
    """
    lines = [",".join(_cell(h) for h in headers)]
    for r in rows:
        lines.append(",".join([
            _cell(r.date),
            _quote(r.material),
            format_number(r.weight),
            format_number(r.deduction),
            format_number(r.price),
            str(r.result),
        ]))
    return BOM + "\n".join(lines)


def export_rows_to_csv(
    rows: Sequence[ReportRow],
    filepath: str,
    headers: Sequence[str] = DEFAULT_HEADERS,
) -> None:
    """Write report rows to a CSV file"""
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        f.write(render_csv(rows, headers))
    logger.info("Exported %d rows to %s", len(rows), filepath)
