"""Shared pytest fixtures for Junk Shop Ledger tests."""

from __future__ import annotations

import pytest

from storage import InMemoryRecordStore


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture(autouse=True)
def junkshop_home(tmp_path, monkeypatch):
    """Keep app_dir() inside the test's temp directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("JUNKSHOP_HOME", str(home))
    return home
