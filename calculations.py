"""
Pricing logic for Junk Shop Ledger
"""
from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

from models import LineItem
from utils import Number, parse_number

Field = Union[str, Number, None]


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, .5 going away from zero"""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calculate_row_result(weight: Field, deduction: Field, price: Field) -> int:
    """
    Price one line: weight less deduction percent, times price, rounded.
    Blank or invalid weight/price gives 0; blank or invalid deduction counts as 0%.
    """
    w = parse_number(weight)
    p = parse_number(price)
    if w is None or p is None:
        return 0
    d = parse_number(deduction) or 0.0

    net_weight = w * (1 - d / 100)
    return round_half_away_from_zero(net_weight * p)


def line_result(item: LineItem) -> int:
    """Result of a raw entry row"""
    return calculate_row_result(item.weight, item.deduction, item.price)


def is_blank_line(item: LineItem) -> bool:
    """A row with no material and not both a positive weight and price"""
    if item.material.strip():
        return False
    w = parse_number(item.weight)
    p = parse_number(item.price)
    return not (w is not None and w > 0 and p is not None and p > 0)


def grand_total(items: Iterable[LineItem]) -> int:
    """Sum of results over the rows that would be saved"""
    return sum(line_result(item) for item in items if not is_blank_line(item))
