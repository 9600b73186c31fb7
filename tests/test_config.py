"""Tests for settings and record serialization."""

import json
import os

from helpers import make_record

from config import (
    dict_to_record,
    load_settings,
    record_to_dict,
    records_path,
    save_settings,
    settings_path,
)
from models import Category, Language, Settings
from utils import app_dir


def test_missing_settings_file_gives_defaults(tmp_path) -> None:
    settings = load_settings(str(tmp_path / "settings.json"))
    assert settings == Settings()
    assert settings.language is Language.EN


def test_settings_round_trip(tmp_path) -> None:
    path = str(tmp_path / "settings.json")
    save_settings(Settings(language=Language.FIL, unlock_code="01021129", blank_rows=8), path)

    loaded = load_settings(path)
    assert loaded.language is Language.FIL
    assert loaded.unlock_code == "01021129"
    assert loaded.blank_rows == 8


def test_unknown_language_falls_back_to_english(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"language": "xx", "company_name": "Tindahan"}), encoding="utf-8")

    settings = load_settings(str(path))
    assert settings.language is Language.EN
    assert settings.company_name == "Tindahan"


def test_unreadable_settings_give_defaults(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[", encoding="utf-8")
    assert load_settings(str(path)) == Settings()


def test_default_paths_live_in_app_dir(junkshop_home) -> None:
    assert app_dir() == str(junkshop_home)
    assert os.path.isdir(junkshop_home)
    assert settings_path() == os.path.join(str(junkshop_home), "settings.json")
    assert records_path(Settings()) == os.path.join(str(junkshop_home), "records.json")


def test_legacy_record_has_no_details_key() -> None:
    record = make_record("old", "2023-12-31", 50, description="AMC - legacy", amount=300)
    d = record_to_dict(record)
    assert "details" not in d
    assert dict_to_record(d) == record


def test_stored_result_is_not_recalculated() -> None:
    d = {
        "id": 17, "amount": "999", "category": "other", "description": "x", "date": "2024-01-01",
        "timestamp": "17",
        "details": [{"material": "Copper", "weight": "10", "deduction": 0, "price": 250, "result": 999}],
    }
    record = dict_to_record(d)
    assert record.id == "17"
    assert record.timestamp == 17
    assert record.details[0].weight == 10.0
    assert record.details[0].result == 999


def test_unknown_category_becomes_other() -> None:
    record = dict_to_record({"id": "1", "category": "junk", "amount": 0, "timestamp": 1})
    assert record.category is Category.OTHER


def test_page_size_in_an_old_settings_file_is_ignored(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"language": "zh-TW", "page_size": 30}), encoding="utf-8")

    settings = load_settings(str(path))

    assert settings.language is Language.ZH_TW
    assert not hasattr(settings, "page_size")
