"""Record builders shared by the tests."""

from __future__ import annotations

from models import Category, ExpenseRecord, RecordDetail


def make_record(record_id, day, timestamp, lines=(), description="", amount=None):
    """Record with lines given as (material, weight, deduction, price, result) tuples."""
    details = tuple(RecordDetail(*line) for line in lines) if lines else None
    if amount is None:
        amount = sum(d.result for d in details or ())
    return ExpenseRecord(
        id=record_id,
        amount=amount,
        category=Category.OTHER,
        description=description,
        date=day,
        timestamp=timestamp,
        details=details,
    )
