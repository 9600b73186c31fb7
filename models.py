"""
Data models for Junk Shop Ledger
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Category(str, Enum):
    """Record category tag"""
    FOOD = "food"
    TRANSPORT = "transport"
    SHOPPING = "shopping"
    ENTERTAINMENT = "entertainment"
    HOUSING = "housing"
    OTHER = "other"


class Language(str, Enum):
    """UI language"""
    EN = "en"
    ZH_TW = "zh-TW"
    FIL = "fil"


@dataclass
class LineItem:
    """One row of the entry grid, exactly as typed"""
    material: str = ""
    weight: str = ""
    deduction: str = ""  # percent
    price: str = ""


@dataclass(frozen=True)
class RecordDetail:
    """Persisted line of a record"""
    material: str
    weight: float
    deduction: float
    price: float
    result: int


@dataclass(frozen=True)
class ExpenseRecord:
    """Saved transaction"""
    id: str
    amount: int
    category: Category
    description: str
    date: str  # YYYY-MM-DD
    timestamp: int  # epoch milliseconds
    details: Optional[Tuple[RecordDetail, ...]] = None  # None for legacy records

    @property
    def is_legacy(self) -> bool:
        return not self.details


@dataclass(frozen=True)
class ReportRow:
    """One flattened line of the records report"""
    id: str  # "<record_id>-<index>", or the record id for legacy rows
    record_id: str
    date: str
    material: str
    weight: float
    deduction: float
    price: float
    result: int
    timestamp: int


SORT_COLUMNS = ("date", "material", "weight", "deduction", "price", "result")
ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Selected report column and direction"""
    key: str = "timestamp"
    direction: str = DESC

    def toggled(self, key: str) -> SortState:
        """Header click: same column flips, another column starts descending"""
        if key == self.key and self.direction == DESC:
            return SortState(key, ASC)
        return SortState(key, DESC)


@dataclass(frozen=True)
class ReportFilters:
    """Report filter criteria; empty strings match everything"""
    date_start: str = ""
    date_end: str = ""
    material: str = ""


@dataclass
class Settings:
    """Application settings loaded once at startup"""
    language: Language = Language.EN
    company_name: str = "AMC Junk Shop"
    unlock_code: str = ""  # empty: no unlock prompt
    records_file: str = "records.json"
    blank_rows: int = 5
