from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send apimocker logs to stderr, and to ``logfile`` when LOG_FILE is set.

    The root logger is left alone if something (uvicorn, pytest) already
    attached handlers to it.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric = getattr(logging, level.upper(), None)
    root.setLevel(numeric if isinstance(numeric, int) else logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
