#!/usr/bin/env python3
"""
Start the mock server from a JSON data file.

Usage:
  apimocker --file db.json [--host 127.0.0.1] [--port 3000] [--log-level DEBUG]
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import uvicorn

from apimocker.app import create_app
from apimocker.core.config import get_settings
from apimocker.core.logging_config import setup_logging
from apimocker.repositories.json_storage import StartupError
from apimocker.repositories.memory_store import MemoryStore

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    ap = argparse.ArgumentParser(
        prog="apimocker",
        description="Mocks REST endpoints from a JSON file and creates CRUD operations",
    )
    ap.add_argument("-f", "--file", required=True, help="Path to the JSON data file")
    ap.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    ap.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    ap.add_argument("--version", action="version", version="%(prog)s 1.0")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = dataclasses.replace(get_settings(), host=args.host, port=args.port, log_level=args.log_level)
    setup_logging(settings.log_level, settings.log_file)

    try:
        store = MemoryStore.from_file(args.file)
    except StartupError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
    logger.info("Loaded %s", args.file)

    app = create_app(store, args.file, settings=settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
