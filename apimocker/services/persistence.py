"""Writes the whole store back to its JSON file after mutations."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from apimocker.repositories import json_storage

logger = logging.getLogger(__name__)

FlushErrorHook = Callable[[Exception], None]


class PersistenceSink:
    """
    Best-effort flush of the dataset to ``path``.

    Write failures are logged and passed to ``on_failure``; they never reach
    the caller. The in-memory store stays authoritative until a later flush
    succeeds.
    """

    def __init__(
        self,
        path: str | Path | None,
        *,
        on_failure: Optional[FlushErrorHook] = None,
        enabled: bool = True,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.on_failure = on_failure
        self.enabled = enabled and self.path is not None
        self.flush_count = 0

    def flush(self, db: dict) -> bool:
        if not self.enabled:
            return False
        try:
            json_storage.save(self.path, db)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not persist data to %s: %s", self.path, exc)
            if self.on_failure is not None:
                self.on_failure(exc)
            return False
        self.flush_count += 1
        logger.debug("Persisted %d collections to %s", len(db), self.path)
        return True
