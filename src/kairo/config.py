"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    """Read a non-negative float from the environment."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc
    if parsed < 0:
        raise ValueError(f"{name} must not be negative, got {value!r}")
    return parsed


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "Kairo"
    DB_FILENAME = "kairo.db"
    LOG_FILENAME = "kairo.log"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("KAIRO_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("KAIRO_DATABASE_URL", self._build_sqlite_url())
        self.ASSISTANT_DELAY = _env_float("KAIRO_ASSISTANT_DELAY", 1.0)
        self.LOG_LEVEL = os.getenv("KAIRO_LOG_LEVEL", "INFO").strip().upper()

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite store and logs live."""

        data_root = os.getenv("KAIRO_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.DATABASE_URL.startswith("sqlite"):
            return {"connect_args": {"check_same_thread": False}}
        return {}
