"""JSON-lines logging shared by the bridge server, the SDK and the demo producer."""

import json
import logging
import logging.config
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import DEFAULT_LOG_PATH

# Rotate the bridge log at 10 MB, keep five old files
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


class JSONFormatter(logging.Formatter):
    """Renders a record as a single JSON object.

    Replay code attaches `extra={"context": {"connection_id": ...}}` so the
    lines for one viewer connection can be filtered out of a busy log.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context = getattr(record, "context", None)
        if context is not None:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def _handlers(log_file: str, console: bool) -> dict[str, dict[str, Any]]:
    handlers: dict[str, dict[str, Any]] = {
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": MAX_LOG_BYTES,
            "backupCount": LOG_BACKUPS,
            "formatter": "json",
            "encoding": "utf-8",
        },
    }
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        }
    return handlers


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    console: bool = True,
) -> None:
    """Route every logger, uvicorn's included, through the JSON formatter.

    `log_level` falls back to LOG_LEVEL (default INFO) and `log_file` to
    LOG_FILE, then to 04_logs/bridge.log. uvicorn is started without its
    own log config, so its records arrive here too; per-request access lines
    are only kept at DEBUG.
    """
    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_file = log_file or os.getenv("LOG_FILE") or str(DEFAULT_LOG_PATH)
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    handlers = _handlers(log_file, console)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": "fundamentals.logging_config.JSONFormatter"},
            },
            "handlers": handlers,
            "loggers": {
                "uvicorn.access": {"level": "DEBUG" if level == "DEBUG" else "WARNING"},
            },
            "root": {"level": level, "handlers": list(handlers)},
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__."""
    return logging.getLogger(name)
