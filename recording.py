"""
Building and saving transaction records for Junk Shop Ledger
"""
from __future__ import annotations
import hmac
import json
import time
from dataclasses import asdict
from typing import Callable, List, Optional, Sequence

from app_logging import get_logger
from calculations import is_blank_line, line_result
from errors import (
    DuplicateSubmissionError,
    EmptyRecordError,
    LockedError,
    SaveInProgressError,
    ZeroTotalError,
)
from models import Category, ExpenseRecord, LineItem, RecordDetail
from storage import RecordStore
from utils import format_number, safe_float

logger = get_logger(__name__)


class RecordClock:
    """Hands out epoch-millisecond timestamps, strictly increasing within a process"""

    def __init__(self, now_ms: Optional[Callable[[], int]] = None):
        self._now_ms = now_ms or (lambda: int(time.time() * 1000))
        self._last = 0

    def next(self) -> int:
        ts = max(self._now_ms(), self._last + 1)
        self._last = ts
        return ts


_default_clock = RecordClock()


def build_details(items: Sequence[LineItem]) -> List[RecordDetail]:
    """Turn the non-blank entry rows into persisted lines"""
    return [
        RecordDetail(
            material=item.material,
            weight=safe_float(item.weight),
            deduction=safe_float(item.deduction),
            price=safe_float(item.price),
            result=line_result(item),
        )
        for item in items
        if not is_blank_line(item)
    ]


def describe_details(details: Sequence[RecordDetail], company_name: str) -> str:
    """Summary text kept on each record for list display and search"""
    summary = ", ".join(
        f"{d.material or 'Item'}: {format_number(d.weight)}kg @ {format_number(d.price)}"
        for d in details
    )
    return f"{company_name} - {len(details)} items. {summary}"


def build_record(
    items: Sequence[LineItem],
    day: str,
    company_name: str,
    clock: Optional[RecordClock] = None,
) -> ExpenseRecord:
    """
    Assemble a record from the entry rows.
    Blank rows are dropped; amount is the sum of the stored line results.
    """
    details = build_details(items)
    ts = (clock or _default_clock).next()
    return ExpenseRecord(
        id=str(ts),
        amount=sum(d.result for d in details),
        category=Category.OTHER,
        description=describe_details(details, company_name),
        date=day,
        timestamp=ts,
        details=tuple(details),
    )


def serialize_rows(items: Sequence[LineItem]) -> str:
    """Canonical form of the raw rows, for the duplicate-submission check"""
    return json.dumps([asdict(item) for item in items], sort_keys=True, ensure_ascii=False)


def check_unlock_code(entered: Optional[str], expected: str) -> bool:
    """True when no code is configured or the entered one matches"""
    if not expected:
        return True
    if entered is None:
        return False
    return hmac.compare_digest(entered.strip().encode("utf-8"), expected.encode("utf-8"))


class RecordSession:
    """
    Save flow for one record-entry page.

    Remembers the rows of the last successful save so the same form cannot be
    stored twice, and refuses re-entry while a save is running.
    """

    def __init__(
        self,
        store: RecordStore,
        day: str,
        company_name: str,
        unlock_gate: Optional[Callable[[], bool]] = None,
        clock: Optional[RecordClock] = None,
    ):
        self.store = store
        self.day = day
        self.company_name = company_name
        self.unlock_gate = unlock_gate
        self.clock = clock or _default_clock
        self.last_saved: Optional[str] = None
        self.saving = False

    def save(self, items: Sequence[LineItem], allow_zero_total: bool = False) -> ExpenseRecord:
        """
        Build a record from the rows and add it to the store.
        Raises a SaveRejected subclass when the save is refused, StoreError when
        the store fails. Nothing in the session changes unless the save succeeds.
        """
        if self.saving:
            raise SaveInProgressError("A save is already in progress.")

        snapshot = serialize_rows(items)
        if snapshot == self.last_saved:
            logger.info("Ignoring duplicate save of %d rows", len(items))
            raise DuplicateSubmissionError("This record has already been saved.")

        record = build_record(items, self.day, self.company_name, self.clock)
        if not record.details:
            raise EmptyRecordError("Nothing to save.")
        if record.amount == 0 and not allow_zero_total:
            raise ZeroTotalError()

        if self.unlock_gate is not None and not self.unlock_gate():
            logger.warning("Save refused: unlock code rejected")
            raise LockedError("Invalid code.")

        self.saving = True
        try:
            self.store.add_record(record)
        finally:
            self.saving = False

        self.last_saved = snapshot
        logger.info("Saved record %s: %d items, amount %d", record.id, len(record.details), record.amount)
        return record
