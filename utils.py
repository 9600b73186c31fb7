"""
Utility functions for Junk Shop Ledger
"""
from __future__ import annotations
import math
import os
import re
from datetime import date, datetime
from typing import Optional, Union

Number = Union[int, float]

DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def today_str() -> str:
    """Get today's date as ISO string"""
    return date.today().isoformat()


def parse_date(s: str) -> date:
    """Parse YYYY-MM-DD date string"""
    return datetime.strptime(s.strip(), "%Y-%m-%d").date()


def is_iso_date(s: str) -> bool:
    try:
        parse_date(s)
    except ValueError:
        return False
    return True


def parse_number(x: Union[str, Number, None]) -> Optional[float]:
    """
    Parse user input as a finite float.
    Returns None for blank, non-numeric, infinite or NaN input. Only ASCII
    digits are read and "." is the only decimal separator, whatever the
    process locale says.
    """
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, (int, float)):
        value = float(x)
    else:
        text = str(x).strip()
        if not DECIMAL_RE.fullmatch(text):
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value


def safe_float(x: Union[str, Number, None], default: float = 0.0) -> float:
    """Convert input to float safely, returning default on error"""
    value = parse_number(x)
    return default if value is None else value


def format_number(x: Number) -> str:
    """Format a number without a trailing '.0' (100 -> '100', 10.5 -> '10.5')"""
    value = float(x)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def app_dir() -> str:
    """
    Get application data directory: ~/.junkshop_ledger, or $JUNKSHOP_HOME.
    Creates directory if it doesn't exist.
    """
    path = os.environ.get("JUNKSHOP_HOME") or os.path.join(os.path.expanduser("~"), ".junkshop_ledger")
    os.makedirs(path, exist_ok=True)
    return path
