from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from task_ledger.config import SETTINGS, Settings


def build_handlers(settings: Settings) -> list[logging.Handler]:
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if settings.log_dir:
        # relative to where the command runs, not where the package is installed
        log_dir = Path.cwd() / settings.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "task_ledger.log", maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    return handlers


def setup_logging(settings: Settings = SETTINGS) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=build_handlers(settings),
    )
