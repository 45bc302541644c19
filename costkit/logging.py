"""Logging helpers. Library code only gets loggers; the CLI installs handlers."""

from __future__ import annotations

import logging
from typing import Optional

from rich.logging import RichHandler

from costkit.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    level = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False, markup=False)],
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
