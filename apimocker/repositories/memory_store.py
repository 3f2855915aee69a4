"""In-memory collections guarded by a single reader/writer lock."""
from __future__ import annotations

import copy
from contextlib import contextmanager
from typing import Iterator

from apimocker.core.locks import RWLock
from apimocker.repositories import json_storage

Collections = dict[str, list[dict]]


class MemoryStore:
    """
    Holds every collection of the mock dataset.

    One lock covers all collections: a write to ``users`` also holds off reads
    of ``posts``. Callers only touch the data inside ``read()``/``write()``.
    """

    def __init__(self, data: Collections | None = None) -> None:
        self._data: Collections = data if data is not None else {}
        self._lock = RWLock()

    @classmethod
    def from_file(cls, path) -> "MemoryStore":
        return cls(json_storage.load(path))

    @contextmanager
    def read(self) -> Iterator[Collections]:
        with self._lock.read_locked():
            yield self._data

    @contextmanager
    def write(self) -> Iterator[Collections]:
        with self._lock.write_locked():
            yield self._data

    def collection_names(self) -> list[str]:
        with self.read() as data:
            return list(data.keys())

    def snapshot(self) -> Collections:
        with self.read() as data:
            return copy.deepcopy(data)
