"""
FastAPI application for the mock server.

``create_app`` wires one MemoryStore, its PersistenceSink and the
CollectionService into ``app.state`` and mounts the collection routes under
the configured prefix (``/api`` by default).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apimocker.core.config import Settings, get_settings
from apimocker.core.logging_config import setup_logging
from apimocker.repositories.memory_store import MemoryStore
from apimocker.routers import collections as collections_router
from apimocker.services.collection_service import CollectionService
from apimocker.services.persistence import FlushErrorHook, PersistenceSink

logger = logging.getLogger(__name__)


def create_app(
    store: MemoryStore,
    data_file: str | Path | None = None,
    *,
    settings: Optional[Settings] = None,
    on_flush_error: Optional[FlushErrorHook] = None,
) -> FastAPI:
    """Build the app around an already loaded store.

    ``data_file`` is where mutations are written back; without it (or with
    APIMOCKER_READ_ONLY set) the dataset only lives in memory.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="API Mocker",
        description="Mocks REST endpoints from a JSON file and creates CRUD operations",
        version="1.0.0",
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_credentials="*" not in settings.cors_origins,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    sink = PersistenceSink(data_file, on_failure=on_flush_error, enabled=not settings.read_only)
    app.state.store = store
    app.state.persistence_sink = sink
    app.state.collection_service = CollectionService(store, sink)
    app.state.legacy_error_status = settings.legacy_error_status

    app.include_router(collections_router.router, prefix=settings.api_prefix)

    logger.info(
        "Serving collections %s under %s/",
        ", ".join(store.collection_names()) or "(none)",
        settings.api_prefix,
    )
    return app
