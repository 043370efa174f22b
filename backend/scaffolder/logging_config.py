"""Logging setup for the scaffolder service.

Two log roots are configured: ``scaffolder`` (analysis, integrations,
codegen, app lifecycle) and ``api`` (HTTP routes). Module loggers
such as ``scaffolder.analysis`` or ``api.figma`` propagate to
their root, which writes to ``LOG_DIR/<root>.log`` and to stderr.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

from . import settings

LOG_DIR = Path(os.getenv("LOG_DIR", str(Path(__file__).parent.parent / "logs")))

# Root logger name -> log file under LOG_DIR
LOG_ROOTS: Dict[str, str] = {
    "scaffolder": "scaffolder.log",
    "api": "api.log",
}

FILE_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONSOLE_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

_configured: Dict[str, logging.Logger] = {}


def _resolve_level(level: Optional[str]) -> int:
    name = (level or settings.LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {name}")
    return resolved


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger(name: str, filename: str, level: Optional[str] = None) -> logging.Logger:
    """Attach a file handler and a console handler to the `name` logger.

    Calling again for a configured name returns the same logger without
    adding handlers. `level` defaults to the LOG_LEVEL setting.
    """
    if name in _configured:
        return _configured[name]

    numeric = _resolve_level(level)
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(numeric)
    logger.propagate = False
    logger.addHandler(_file_handler(LOG_DIR / filename, numeric))
    logger.addHandler(_console_handler(numeric))

    _configured[name] = logger
    return logger


def configure_logging(level: Optional[str] = None) -> Dict[str, logging.Logger]:
    """Set up every root in LOG_ROOTS; safe to call on each app startup."""
    return {name: setup_logger(name, filename, level) for name, filename in LOG_ROOTS.items()}
