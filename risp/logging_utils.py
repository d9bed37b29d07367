"""Runtime logging helpers."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from risp import config

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"


def configure_logging(level: str | None = None, sink: Any = sys.stderr) -> int:
    """Route risp's log records to `sink` at `level` (default RISP_LOG_LEVEL).

    Replaces loguru's existing handlers and returns the new handler id.
    """
    level = (level or config.get_log_level()).upper()
    logger.remove()
    handler_id = logger.add(sink, level=level, format=_FORMAT, backtrace=False)
    logger.enable("risp")
    return handler_id
