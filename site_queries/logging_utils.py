"""
Logging setup for query runs.

Console output goes to stderr through Rich so that command output on
stdout stays pipeable. An optional JSONL file receives the same records
with their structured ``extra`` fields.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

LOGGER_NAME = "site_queries"

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def setup_logging(cfg: LoggingConfig) -> logging.Logger:
    """Configure the package logger from ``cfg`` and return it.

    Calling it again replaces the handlers installed by a previous call.
    """
    level = _level_from_string(cfg.level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if cfg.console:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    if cfg.log_path:
        path = Path(cfg.log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        if cfg.format == "jsonl":
            handler.setFormatter(JsonlFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)

    return logger


def log_event(
    logger: logging.Logger | None, message: str, level: int = logging.INFO, **fields: Any
) -> None:
    """Log ``message`` with ``fields`` attached as structured extras."""
    if logger is None or not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra=fields)


class JsonlFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _level_from_string(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO
