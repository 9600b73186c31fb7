"""Tests for the record stores."""

import json

import pytest
from helpers import make_record

from errors import StoreError
from storage import InMemoryRecordStore, JsonRecordStore


def copper(record_id="r1", amount=2500):
    return make_record(record_id, "2024-01-10", 100, [("Copper", 10.0, 0.0, 250.0, amount)])


def test_subscribe_delivers_current_records_immediately() -> None:
    store = InMemoryRecordStore([copper()])
    seen = []
    store.subscribe(seen.append)
    assert seen == [(copper(),)]


def test_every_change_pushes_a_new_snapshot(store: InMemoryRecordStore) -> None:
    seen = []
    store.subscribe(seen.append)
    store.add_record(copper("r1"))
    store.add_record(copper("r2"))
    store.delete_record("r1")

    assert [tuple(r.id for r in snap) for snap in seen] == [(), ("r1",), ("r1", "r2"), ("r2",)]
    assert all(isinstance(snap, tuple) for snap in seen)


def test_add_record_replaces_same_id(store: InMemoryRecordStore) -> None:
    store.add_record(copper("r1", 2500))
    store.add_record(copper("r1", 2600))
    assert [r.amount for r in store.snapshot()] == [2600]


def test_delete_unknown_record_is_ignored(store: InMemoryRecordStore) -> None:
    seen = []
    store.subscribe(seen.append)
    store.delete_record("nope")
    assert len(seen) == 1


def test_subscription_closes_once(store: InMemoryRecordStore) -> None:
    seen = []
    sub = store.subscribe(seen.append)
    sub.close()
    sub.close()
    store.add_record(copper())
    assert seen == [()]
    assert sub.closed


def test_subscription_closes_when_block_raises(store: InMemoryRecordStore) -> None:
    seen = []
    with pytest.raises(RuntimeError):
        with store.subscribe(seen.append):
            raise RuntimeError("boom")
    store.add_record(copper())
    assert seen == [()]


def test_failing_listener_does_not_stop_others(store: InMemoryRecordStore) -> None:
    def broken(_snapshot):
        raise ValueError("bad listener")

    seen = []
    store.subscribe(broken)
    store.subscribe(seen.append)
    store.add_record(copper())
    assert len(seen) == 2


def test_json_store_round_trip(tmp_path) -> None:
    path = tmp_path / "records.json"
    store = JsonRecordStore(str(path))
    store.add_record(copper("r1"))
    store.add_record(make_record("old", "2023-12-31", 50, description="AMC - legacy", amount=300))

    reopened = JsonRecordStore(str(path))
    assert reopened.snapshot() == store.snapshot()
    assert reopened.snapshot()[1].details is None


def test_json_store_reads_legacy_rows(tmp_path) -> None:
    path = tmp_path / "records.json"
    path.write_text(json.dumps({"records": [
        {"id": "1", "amount": 120, "category": "other", "description": "scrap", "date": "2023-01-01",
         "timestamp": 1},
    ]}), encoding="utf-8")

    (record,) = JsonRecordStore(str(path)).snapshot()
    assert record.is_legacy
    assert record.amount == 120


def test_json_store_missing_file_is_empty(tmp_path) -> None:
    assert JsonRecordStore(str(tmp_path / "none.json")).snapshot() == ()


def test_json_store_rejects_corrupt_file(tmp_path) -> None:
    path = tmp_path / "records.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError):
        JsonRecordStore(str(path))


def test_failed_write_leaves_records_unchanged(tmp_path) -> None:
    store = JsonRecordStore(str(tmp_path / "records.json"))
    store.add_record(copper("r1"))
    seen = []
    store.subscribe(seen.append)

    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store.path = str(blocker / "records.json")

    with pytest.raises(StoreError):
        store.add_record(copper("r2"))
    assert [r.id for r in store.snapshot()] == ["r1"]
    assert len(seen) == 1
