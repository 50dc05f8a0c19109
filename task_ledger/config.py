from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def _first_existing(name: str) -> Path | None:
    for base in (Path.cwd(), PROJECT_ROOT):
        candidate = base / name
        if candidate.exists():
            return candidate
    return None


def load_env() -> None:
    env_name = os.getenv("TASK_LEDGER_ENV", "development")
    env_path = _first_existing(".env")
    if env_path:
        load_dotenv(env_path)

    env_specific = _first_existing(f".env.{env_name}")
    if env_specific:
        load_dotenv(env_specific, override=True)


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_dir: str | None = None


def load_settings() -> Settings:
    load_env()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        log_dir=os.getenv("LOG_DIR", "").strip() or None,
    )


SETTINGS = load_settings()
