"""CRUD use cases over the mock collections."""

from __future__ import annotations

import copy
import logging
from typing import Any

from apimocker.domain.identifiers import (
    ID_FIELD,
    IdentifierCoercionError,
    coerce_like,
    find_index,
    identifier_of,
)
from apimocker.repositories.memory_store import MemoryStore
from apimocker.services.persistence import PersistenceSink

logger = logging.getLogger(__name__)


class CollectionError(Exception):
    """Base exception for collection operations."""

    message = "Collection error"


class RecordNotFoundError(CollectionError):
    """Raised when the collection or the requested id does not exist."""

    message = "Not found"


class InvalidIdentifierTypeError(CollectionError):
    """Raised when a replace cannot give the path id the stored id's kind."""

    message = "Invalid ID type"


class CollectionService:
    """
    Runs one operation per call against the store.

    Reads take the shared lock; create/replace/update/delete take the
    exclusive lock and flush the whole store before releasing it. Failed
    operations leave the store untouched and do not flush.
    """

    def __init__(self, store: MemoryStore, sink: PersistenceSink) -> None:
        self.store = store
        self.sink = sink

    def list(self, name: str) -> list[dict]:
        with self.store.read() as db:
            return copy.deepcopy(db.get(name, []))

    def get_one(self, name: str, record_id: str) -> dict:
        with self.store.read() as db:
            records = db.get(name, [])
            idx = find_index(records, record_id)
            if idx is None:
                raise RecordNotFoundError(f"{name}/{record_id} not found")
            return copy.deepcopy(records[idx])

    def create(self, name: str, record: dict) -> dict:
        with self.store.write() as db:
            stored = copy.deepcopy(record)
            db.setdefault(name, []).append(stored)
            self.sink.flush(db)
            logger.info("Created record in %s (id=%s)", name, stored.get(ID_FIELD))
            return copy.deepcopy(stored)

    def replace(self, name: str, record_id: str, body: dict) -> dict:
        with self.store.write() as db:
            records, idx = self._locate(db, name, record_id)
            existing = identifier_of(records[idx])
            if existing is None:
                raise InvalidIdentifierTypeError(f"{name}/{record_id} has no numeric or text id")
            try:
                new_id = coerce_like(existing, record_id)
            except IdentifierCoercionError as exc:
                raise InvalidIdentifierTypeError(str(exc)) from exc

            replacement: dict[str, Any] = copy.deepcopy(body)
            replacement[ID_FIELD] = new_id.value
            records[idx] = replacement
            self.sink.flush(db)
            logger.info("Replaced %s/%s", name, record_id)
            return copy.deepcopy(replacement)

    def update(self, name: str, record_id: str, patch: dict) -> dict:
        with self.store.write() as db:
            records, idx = self._locate(db, name, record_id)
            record = records[idx]
            for key, value in patch.items():
                record[key] = copy.deepcopy(value)
            self.sink.flush(db)
            logger.info("Updated %s/%s (%d fields)", name, record_id, len(patch))
            return copy.deepcopy(record)

    def delete(self, name: str, record_id: str) -> dict:
        with self.store.write() as db:
            records, idx = self._locate(db, name, record_id)
            removed = records.pop(idx)
            self.sink.flush(db)
            logger.info("Deleted %s/%s", name, record_id)
            return removed

    def _locate(self, db: dict, name: str, record_id: str) -> tuple[list[dict], int]:
        records = db.get(name)
        if records is None:
            raise RecordNotFoundError(f"collection {name} not found")
        idx = find_index(records, record_id)
        if idx is None:
            raise RecordNotFoundError(f"{name}/{record_id} not found")
        return records, idx
