"""
Configuration and data loading/saving for Junk Shop Ledger
"""
from __future__ import annotations
import json
import os
from dataclasses import asdict
from typing import Optional

from app_logging import get_logger
from models import Category, ExpenseRecord, Language, RecordDetail, Settings
from utils import app_dir, safe_float

logger = get_logger(__name__)

SETTINGS_FILE = "settings.json"


def settings_path(base: Optional[str] = None) -> str:
    return os.path.join(base or app_dir(), SETTINGS_FILE)


def _language(value) -> Language:
    try:
        return Language(value)
    except ValueError:
        logger.warning("Unknown language %r, using English", value)
        return Language.EN


def dict_to_settings(d: dict) -> Settings:
    """Convert dictionary from JSON to Settings object"""
    defaults = Settings()
    return Settings(
        language=_language(d.get("language", defaults.language.value)),
        company_name=str(d.get("company_name") or defaults.company_name),
        unlock_code=str(d.get("unlock_code") or ""),
        records_file=str(d.get("records_file") or defaults.records_file),
        blank_rows=max(1, int(d.get("blank_rows", defaults.blank_rows))),
    )


def settings_to_dict(settings: Settings) -> dict:
    d = asdict(settings)
    d["language"] = settings.language.value
    return d


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from JSON file, defaults when the file is missing"""
    path = path or settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return Settings()
    except (OSError, ValueError) as ex:
        logger.error("Could not read settings from %s: %s", path, ex)
        return Settings()
    try:
        return dict_to_settings(data)
    except (AttributeError, TypeError, ValueError) as ex:
        logger.error("Invalid settings in %s: %s", path, ex)
        return Settings()


def save_settings(settings: Settings, path: Optional[str] = None) -> None:
    """Write settings to JSON file"""
    path = path or settings_path()
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings_to_dict(settings), f, ensure_ascii=False, indent=2)


def records_path(settings: Settings, base: Optional[str] = None) -> str:
    if os.path.isabs(settings.records_file):
        return settings.records_file
    return os.path.join(base or app_dir(), settings.records_file)


def record_to_dict(record: ExpenseRecord) -> dict:
    """Convert ExpenseRecord to dictionary for JSON serialization"""
    d = {
        "id": record.id,
        "amount": record.amount,
        "category": record.category.value,
        "description": record.description,
        "date": record.date,
        "timestamp": record.timestamp,
    }
    if record.details is not None:
        d["details"] = [asdict(detail) for detail in record.details]
    return d


def _category(value) -> Category:
    try:
        return Category(value)
    except ValueError:
        return Category.OTHER


def dict_to_detail(d: dict) -> RecordDetail:
    return RecordDetail(
        material=str(d.get("material") or ""),
        weight=safe_float(d.get("weight")),
        deduction=safe_float(d.get("deduction")),
        price=safe_float(d.get("price")),
        result=int(safe_float(d.get("result"))),
    )


def dict_to_record(d: dict) -> ExpenseRecord:
    """
    Convert dictionary from JSON to ExpenseRecord.
    Stored results are taken as-is, never recalculated.
    """
    details = d.get("details")
    return ExpenseRecord(
        id=str(d["id"]),
        amount=int(safe_float(d.get("amount"))),
        category=_category(d.get("category", Category.OTHER.value)),
        description=str(d.get("description") or ""),
        date=str(d.get("date") or ""),
        timestamp=int(safe_float(d.get("timestamp"))),
        details=tuple(dict_to_detail(x) for x in details) if details is not None else None,
    )
