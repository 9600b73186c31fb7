"""
Records report: flatten, filter, sort and page saved records
"""
from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from models import (
    ASC,
    SORT_COLUMNS,
    ExpenseRecord,
    ReportFilters,
    ReportRow,
    SortState,
)
from utils import is_iso_date

PAGE_SIZE = 12


def flatten_record(record: ExpenseRecord) -> List[ReportRow]:
    """One row per line; a legacy record without lines becomes a single row"""
    if record.details:
        return [
            ReportRow(
                id=f"{record.id}-{idx}",
                record_id=record.id,
                date=record.date,
                material=detail.material,
                weight=detail.weight,
                deduction=detail.deduction,
                price=detail.price,
                result=detail.result,
                timestamp=record.timestamp,
            )
            for idx, detail in enumerate(record.details)
        ]
    return [
        ReportRow(
            id=record.id,
            record_id=record.id,
            date=record.date,
            material=record.description,
            weight=0.0,
            deduction=0.0,
            price=0.0,
            result=record.amount,
            timestamp=record.timestamp,
        )
    ]


def flatten_records(records: Iterable[ExpenseRecord]) -> List[ReportRow]:
    rows: List[ReportRow] = []
    for record in records:
        rows.extend(flatten_record(record))
    return rows


def row_matches(row: ReportRow, filters: ReportFilters) -> bool:
    # ISO dates compare correctly as strings
    if filters.date_start and row.date < filters.date_start:
        return False
    if filters.date_end and row.date > filters.date_end:
        return False
    if filters.material and filters.material.lower() not in row.material.lower():
        return False
    return True


def filter_rows(rows: Iterable[ReportRow], filters: ReportFilters) -> List[ReportRow]:
    """Keep rows inside the date range whose material contains the search text"""
    return [row for row in rows if row_matches(row, filters)]


def sort_rows(rows: Iterable[ReportRow], sort: SortState) -> List[ReportRow]:
    """Stable sort on one column; equal keys keep their input order in both directions"""
    if sort.key not in SORT_COLUMNS and sort.key != "timestamp":
        raise ValueError(f"Cannot sort by {sort.key!r}")
    return sorted(rows, key=lambda row: getattr(row, sort.key), reverse=sort.direction != ASC)


def total_result(rows: Iterable[ReportRow]) -> int:
    return sum(row.result for row in rows)


def page_count(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def clamp_page(page: int, count: int, page_size: int = PAGE_SIZE) -> int:
    """Keep page inside 1..last page (page 1 when there are no rows)"""
    return min(max(page, 1), max(page_count(count, page_size), 1))


def paginate(rows: Sequence[ReportRow], page: int, page_size: int = PAGE_SIZE) -> List[ReportRow]:
    """Rows shown on a 1-indexed page"""
    start = (page - 1) * page_size
    return list(rows[start:start + page_size])


@dataclass(frozen=True)
class Report:
    """Filtered and sorted rows of one records snapshot"""
    rows: Tuple[ReportRow, ...]
    total: int

    @property
    def count(self) -> int:
        return len(self.rows)


def build_report(records: Iterable[ExpenseRecord], filters: ReportFilters, sort: SortState) -> Report:
    """Recompute the whole report from a records snapshot"""
    rows = sort_rows(filter_rows(flatten_records(records), filters), sort)
    return Report(rows=tuple(rows), total=total_result(rows))


@dataclass(frozen=True)
class MaterialSummary:
    material: str
    lines: int
    net_weight: float
    result: int


def summarize_by_material(rows: Iterable[ReportRow]) -> List[MaterialSummary]:
    """Totals per material name (case-insensitive, first spelling kept), largest result first"""
    groups: Dict[str, List[ReportRow]] = {}
    names: Dict[str, str] = {}
    for row in rows:
        k = row.material.strip().lower()
        names.setdefault(k, row.material.strip() or "Item")
        groups.setdefault(k, []).append(row)

    out = [
        MaterialSummary(
            material=names[k],
            lines=len(items),
            net_weight=sum(r.weight * (1 - r.deduction / 100) for r in items),
            result=total_result(items),
        )
        for k, items in groups.items()
    ]
    out.sort(key=lambda s: s.result, reverse=True)
    return out


class ReportBrowser:
    """
    Filter, sort and page selection of the records view.

    Holds criteria only; every snapshot from the store is passed in again and
    the report rebuilt from scratch.
    """

    def __init__(self, page_size: int = PAGE_SIZE):
        self.page_size = page_size
        self.filters = ReportFilters()
        self.sort = SortState()
        self.page = 1

    def set_filters(
        self,
        date_start: Optional[str] = None,
        date_end: Optional[str] = None,
        material: Optional[str] = None,
    ) -> None:
        """Update any of the filters; a change returns to page 1"""
        changes = {}
        if date_start is not None:
            changes["date_start"] = date_start.strip()
        if date_end is not None:
            changes["date_end"] = date_end.strip()
        if material is not None:
            changes["material"] = material
        updated = replace(self.filters, **changes)
        if updated != self.filters:
            self.filters = updated
            self.page = 1

    def apply_filter_input(self, date_start: str, date_end: str, material: str) -> None:
        """
        Filters as typed in the view. A date box holding a partly typed date
        keeps its previous criterion; the other boxes still apply.
        """
        start = date_start.strip()
        end = date_end.strip()
        self.set_filters(
            date_start=start if not start or is_iso_date(start) else None,
            date_end=end if not end or is_iso_date(end) else None,
            material=material,
        )

    def sort_by(self, key: str) -> None:
        if key not in SORT_COLUMNS:
            raise ValueError(f"Cannot sort by {key!r}")
        self.sort = self.sort.toggled(key)

    def report(self, records: Iterable[ExpenseRecord]) -> Report:
        return build_report(records, self.filters, self.sort)

    def total_pages(self, report: Report) -> int:
        return page_count(report.count, self.page_size)

    def current_rows(self, report: Report) -> List[ReportRow]:
        self.page = clamp_page(self.page, report.count, self.page_size)
        return paginate(report.rows, self.page, self.page_size)

    def next_page(self, report: Report) -> None:
        self.page = clamp_page(self.page + 1, report.count, self.page_size)

    def previous_page(self, report: Report) -> None:
        self.page = clamp_page(self.page - 1, report.count, self.page_size)
