"""
Record store for Junk Shop Ledger

Stores push the whole record collection to subscribers on every change, the
way a live document database does. Each snapshot is a new tuple.
"""
from __future__ import annotations
import json
import os
import tempfile
from typing import Callable, Dict, List, Tuple

from app_logging import get_logger
from config import dict_to_record, record_to_dict
from errors import StoreError
from models import ExpenseRecord

logger = get_logger(__name__)

Snapshot = Tuple[ExpenseRecord, ...]
Listener = Callable[[Snapshot], None]


class Subscription:
    """Handle returned by subscribe(); detaches its listener exactly once"""

    def __init__(self, detach: Callable[[], None]):
        self._detach = detach
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._detach()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class RecordStore:
    """
    Base store: keeps records by id and notifies listeners.
    Subclasses override _persist to write the collection somewhere durable.
    """

    def __init__(self):
        self._records: Dict[str, ExpenseRecord] = {}
        self._listeners: List[Listener] = []

    def snapshot(self) -> Snapshot:
        return tuple(self._records.values())

    def subscribe(self, listener: Listener) -> Subscription:
        """Register listener; it receives the current records now and after each change"""
        self._listeners.append(listener)
        self._deliver(listener, self.snapshot())

        def detach():
            self._listeners.remove(listener)

        return Subscription(detach)

    def add_record(self, record: ExpenseRecord) -> None:
        """Insert or replace the record with the same id"""
        updated = dict(self._records)
        updated[record.id] = record
        self._commit(updated)
        logger.info("Stored record %s (%s, amount %d)", record.id, record.date, record.amount)

    def delete_record(self, record_id: str) -> None:
        """Remove a record; removing an unknown id is not an error"""
        if record_id not in self._records:
            logger.warning("Delete of unknown record %s ignored", record_id)
            return
        updated = dict(self._records)
        del updated[record_id]
        self._commit(updated)
        logger.info("Deleted record %s", record_id)

    def _commit(self, updated: Dict[str, ExpenseRecord]) -> None:
        self._persist(updated)
        self._records = updated
        self._notify()

    def _persist(self, records: Dict[str, ExpenseRecord]) -> None:
        pass

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            self._deliver(listener, snap)

    def _deliver(self, listener: Listener, snap: Snapshot) -> None:
        try:
            listener(snap)
        except Exception:
            logger.exception("Record listener failed")


class InMemoryRecordStore(RecordStore):
    """Store that keeps records only for the life of the process"""

    def __init__(self, records=()):
        super().__init__()
        self._records = {r.id: r for r in records}


class JsonRecordStore(RecordStore):
    """Store backed by a JSON file holding {"records": [...]}"""

    def __init__(self, path: str):
        super().__init__()
        self.path = path
        self._records = self._load()

    def _load(self) -> Dict[str, ExpenseRecord]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as ex:
            raise StoreError(f"Could not read records from {self.path}: {ex}") from ex
        try:
            records = [dict_to_record(d) for d in data.get("records", [])]
        except (KeyError, TypeError, ValueError, AttributeError) as ex:
            raise StoreError(f"Malformed records file {self.path}: {ex}") from ex
        logger.info("Loaded %d records from %s", len(records), self.path)
        return {r.id: r for r in records}

    def _persist(self, records: Dict[str, ExpenseRecord]) -> None:
        payload = {"version": 1, "records": [record_to_dict(r) for r in records.values()]}
        folder = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(folder, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=".records-", suffix=".json", dir=folder)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False, indent=2)
                os.replace(tmp, self.path)
            except BaseException:
                if os.path.exists(tmp):
                    os.remove(tmp)
                raise
        except OSError as ex:
            logger.error("Could not write records to %s: %s", self.path, ex)
            raise StoreError(f"Could not write records to {self.path}: {ex}") from ex
