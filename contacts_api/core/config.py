"""
Configuration helpers for the Contacts backend.

Routers/services read settings from here instead of fetching os.environ
directly. A .env file in the working directory is honoured but never overrides real env vars.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    database_url: str
    host: str
    port: int
    log_level: str
    create_tables: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        host=os.getenv("HOST") or "0.0.0.0",
        port=_int(os.getenv("PORT", str(DEFAULT_PORT)), DEFAULT_PORT),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        create_tables=_bool(os.getenv("DB_CREATE_TABLES"), False),
    )
