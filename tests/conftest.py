from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Keep the apimocker package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from apimocker.core import config as core_config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings."""
    for name in (
        "APIMOCKER_API_PREFIX",
        "APIMOCKER_LEGACY_STATUS",
        "APIMOCKER_READ_ONLY",
        "APIMOCKER_CORS_ORIGINS",
        "LOG_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def data_file(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(
        json.dumps(
            {
                "users": [{"id": 1, "name": "Alice", "age": 5}],
                "tags": [{"id": "a1", "label": "first"}],
            }
        ),
        encoding="utf-8",
    )
    return path
