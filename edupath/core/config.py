"""
Configuration helpers for the EduPath backend.

Settings are read once from environment variables so that stores, services and
routers never touch os.environ directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    accounts_file: Path
    universities_file: Path
    applications_file: Path
    log_level: str
    cors_origins: tuple[str, ...]


def _resolve(data_dir: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else data_dir / path


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    data_dir = Path(os.getenv("EDUPATH_DATA_DIR") or DEFAULT_DATA_DIR)
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=data_dir,
        accounts_file=_resolve(data_dir, os.getenv("ACCOUNTS_FILE", "accounts.json")),
        universities_file=_resolve(data_dir, os.getenv("UNIVERSITIES_FILE", "universities.json")),
        applications_file=_resolve(data_dir, os.getenv("APPLICATIONS_FILE", "applications.json")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
    )
