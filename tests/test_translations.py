"""Tests for UI string tables."""

import pytest

from models import Language
from translations import TRANSLATIONS, get_translation, report_headers


def keys(table: dict, prefix: str = "") -> set:
    out = set()
    for k, v in table.items():
        if isinstance(v, dict):
            out |= keys(v, f"{prefix}{k}.")
        else:
            out.add(prefix + k)
    return out


@pytest.mark.parametrize("language", [Language.ZH_TW, Language.FIL])
def test_tables_have_the_same_keys(language: Language) -> None:
    assert keys(TRANSLATIONS[language]) == keys(TRANSLATIONS[Language.EN])


def test_get_translation() -> None:
    assert get_translation("zh-TW") is TRANSLATIONS[Language.ZH_TW]
    assert get_translation("xx") is TRANSLATIONS[Language.EN]


def test_report_headers_follow_export_order() -> None:
    assert report_headers(get_translation(Language.EN)) == (
        "Date", "Material", "Weight", "Deduction", "Price", "Result",
    )
