"""
Configuration helpers for the mock server.

Settings are read from environment variables once and cached, so routers and
services never fetch os.environ directly. Command-line flags override the
listener and log level at startup.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    api_prefix: str
    legacy_error_status: bool
    read_only: bool
    cors_origins: tuple[str, ...]
    log_level: str
    log_file: str | None


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _prefix(value: str | None) -> str:
        raw = (value or "/api").strip().rstrip("/")
        if raw and not raw.startswith("/"):
            raw = "/" + raw
        return raw

    def _level(value: str | None) -> str:
        level = (value or "INFO").strip().upper()
        return level if level in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"} else "INFO"

    origins = os.getenv("APIMOCKER_CORS_ORIGINS", "*")
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("APIMOCKER_HOST", "0.0.0.0"),
        port=_int(os.getenv("APIMOCKER_PORT", "3000"), 3000),
        api_prefix=_prefix(os.getenv("APIMOCKER_API_PREFIX")),
        legacy_error_status=_bool(os.getenv("APIMOCKER_LEGACY_STATUS"), False),
        read_only=_bool(os.getenv("APIMOCKER_READ_ONLY"), False),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        log_level=_level(os.getenv("LOG_LEVEL")),
        log_file=os.getenv("LOG_FILE") or None,
    )
