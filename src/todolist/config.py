# src/todolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Only the composition root (bootstrap) reads these; EntryStore and the
importer take everything they need as arguments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODOLIST"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths ----
    data_dir: Path

    # ---- Initial import ----
    import_path: Path | None
    import_encoding: str

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "todolist").strip() or "todolist"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todolist")) or Path(".local/todolist")

        import_path = _env_path(_k("IMPORT_PATH"), None)
        import_encoding = _env(_k("IMPORT_ENCODING"), "utf-8").strip() or "utf-8"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            import_path=import_path,
            import_encoding=import_encoding,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
