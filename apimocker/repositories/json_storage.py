"""
JSON file adapter: reads the startup document and writes the store back.

The document maps collection names to arrays of record objects, e.g.
``{"users": [{"id": 1, "name": "Alice"}]}``.
"""

from __future__ import annotations

from pathlib import Path
import json
import os
import stat
import tempfile


class StartupError(RuntimeError):
    """Raised when the data file cannot be used to start the server."""


def load(path: str | os.PathLike) -> dict[str, list[dict]]:
    data_file = Path(path)
    try:
        with data_file.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise StartupError(f"Failed to read JSON file {data_file}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise StartupError(f"Failed to parse JSON file {data_file}: {exc}") from exc
    return validate_document(raw)


def validate_document(raw: object) -> dict[str, list[dict]]:
    if not isinstance(raw, dict):
        raise StartupError("Top level of the data file must be an object of collections")
    for name, records in raw.items():
        if not isinstance(records, list):
            raise StartupError(f"Collection '{name}' must be an array")
        for pos, record in enumerate(records):
            if not isinstance(record, dict):
                raise StartupError(f"Collection '{name}' item {pos} must be an object")
    return raw


def dumps(db: dict) -> str:
    return json.dumps(db, ensure_ascii=False, indent=2)


def save(path: str | os.PathLike, db: dict) -> None:
    """Overwrite ``path`` with ``db`` through a temp file + rename."""
    # symlinked data files are written through to their target
    target = Path(path).resolve()
    payload = dumps(db)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        if target.exists():
            os.chmod(tmp_name, stat.S_IMODE(os.stat(target).st_mode))
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
