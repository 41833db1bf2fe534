# src/workboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a default.
- Settings are passed explicitly into the composition root so tests can substitute them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "WORKBOARD"

DEFAULT_PORT = 8002


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- HTTP server ----
    host: str
    port: int
    cors_origin: str

    # ---- Store ----
    seed_data: bool
    task_create_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "workboard").strip() or "workboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        host = _env(_k("HOST"), "0.0.0.0").strip() or "0.0.0.0"
        port = _env_int(_k("PORT"), DEFAULT_PORT)
        cors_origin = _env(_k("CORS_ORIGIN"), "*").strip() or "*"

        seed_data = _env_bool(_k("SEED_DATA"), True)
        task_create_enabled = _env_bool(_k("TASK_CREATE_ENABLED"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/workboard"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            host=host,
            port=port,
            cors_origin=cors_origin,
            seed_data=seed_data,
            task_create_enabled=task_create_enabled,
            data_dir=data_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
