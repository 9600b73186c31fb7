"""Tests for line pricing."""

import pytest

from calculations import (
    calculate_row_result,
    grand_total,
    is_blank_line,
    line_result,
    round_half_away_from_zero,
)
from models import LineItem
from utils import parse_number


def test_deduction_is_taken_off_weight_before_pricing() -> None:
    assert calculate_row_result("100", "2", "10") == 980


def test_missing_weight_gives_zero() -> None:
    assert calculate_row_result("", "5", "10") == 0


def test_missing_deduction_counts_as_no_deduction() -> None:
    assert calculate_row_result("10", "", "5") == 50


def test_half_rounds_up() -> None:
    assert calculate_row_result("10", "0", "10.05") == 101


@pytest.mark.parametrize(
    ("weight", "deduction", "price", "expected"),
    [
        ("1", "0", "2.5", 3),
        ("1", "0", "0.5", 1),
        ("3", "50", "1", 2),
        ("1", "0", "2.49", 2),
        ("-1", "0", "2.5", -3),
    ],
)
def test_ties_round_away_from_zero(weight: str, deduction: str, price: str, expected: int) -> None:
    assert calculate_row_result(weight, deduction, price) == expected


@pytest.mark.parametrize(
    ("weight", "deduction", "price"),
    [
        ("abc", "0", "10"),
        ("10", "0", ""),
        ("nan", "0", "10"),
        ("10", "0", "inf"),
        ("1,5", "0", "10"),
        (None, "0", "10"),
        ("1_0", "0", "5"),
        ("١٠", "0", "5"),
        ("10", "0", "５"),
        ("12abc", "0", "5"),
    ],
)
def test_invalid_weight_or_price_gives_zero(weight, deduction, price) -> None:
    assert calculate_row_result(weight, deduction, price) == 0


def test_invalid_deduction_counts_as_zero() -> None:
    assert calculate_row_result("10", "x", "5") == 50
    assert calculate_row_result("10", "nan", "5") == 50
    assert calculate_row_result("10", "١", "5") == 50


def test_accepts_numbers_and_padded_text() -> None:
    assert calculate_row_result(100, 2, 10) == 980
    assert calculate_row_result(" 100 ", " 2", "10 ") == 980


def test_same_input_same_output() -> None:
    results = {calculate_row_result("12.34", "7.5", "18.2") for _ in range(5)}
    assert len(results) == 1


def test_round_half_away_from_zero() -> None:
    assert round_half_away_from_zero(0.5) == 1
    assert round_half_away_from_zero(1.4999) == 1
    assert round_half_away_from_zero(-0.5) == -1
    assert round_half_away_from_zero(0.0) == 0


@pytest.mark.parametrize(
    ("item", "blank"),
    [
        (LineItem(), True),
        (LineItem("", "10", "", ""), True),
        (LineItem("", "10", "", "0"), True),
        (LineItem("", "0", "", "10"), True),
        (LineItem("   ", "abc", "", "10"), True),
        (LineItem("Copper", "", "", ""), False),
        (LineItem("", "10", "", "5"), False),
    ],
)
def test_is_blank_line(item: LineItem, blank: bool) -> None:
    assert is_blank_line(item) is blank


def test_grand_total_ignores_blank_rows() -> None:
    items = [
        LineItem("Copper", "10", "0", "250"),
        LineItem("", "5", "10", "20"),
        LineItem("", "-4", "", "10"),
        LineItem(),
    ]
    assert line_result(items[2]) == -40
    assert grand_total(items) == 2500 + 90


@pytest.mark.parametrize(
    ("text", "expected"),
    [("10", 10.0), ("-2.5", -2.5), (".5", 0.5), ("5.", 5.0), ("1e3", 1000.0), ("+3", 3.0)],
)
def test_parse_number_accepts_plain_decimals(text: str, expected: float) -> None:
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["1_0", "١٠", "５", "1,5", "0x10", "1e999", "", " ", "."])
def test_parse_number_rejects_other_forms(text: str) -> None:
    assert parse_number(text) is None
