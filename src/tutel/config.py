# src/tutel/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Real environment wins over .env; .env is looked up from the current directory.
- Consumers accept an injected Settings so tests never read the real environment.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TUTEL"

DEFAULT_PROJECT_FILE = ".tutel.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def load_dotenv_from_cwd() -> None:
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Optional[Path]

    # ---- Projects ----
    project_file_name: str

    # ---- Terminal ----
    editor: Optional[str]
    color: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tutel").strip() or "tutel"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_path(_k("LOG_FILE"))

        project_file_name = _env(_k("PROJECT_FILE"), DEFAULT_PROJECT_FILE).strip() or DEFAULT_PROJECT_FILE

        # Explicit TUTEL_EDITOR first, then the usual $EDITOR.
        editor = _first_env(_k("EDITOR"), "EDITOR", default=None)

        # https://no-color.org: any non-empty NO_COLOR disables styling.
        if _first_env("NO_COLOR", default=None) is not None:
            color = False
        else:
            color = _env_bool(_k("COLOR"), sys.stdout.isatty())

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            project_file_name=project_file_name,
            editor=editor,
            color=color,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings, built on first use (after loading .env)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv_from_cwd()
        _SETTINGS = Settings.from_env()
    return _SETTINGS
