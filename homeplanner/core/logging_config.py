"""Logging setup for the planner service.

Console output only; deployments collect stdout. ``log_json`` switches the
console format to one JSON object per line.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from homeplanner.core.config import Settings

ROOT_LOGGER_NAME = "homeplanner"


class JSONFormatter(logging.Formatter):
    """Render a record and its ``extra`` fields as a single JSON line."""

    _STANDARD_ATTRS = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "exc_info",
        "exc_text", "stack_info", "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in self._STANDARD_ATTRS}
        if extra:
            data["extra"] = extra
        return json.dumps(data, default=str, ensure_ascii=False)


def setup_logging(config: Settings) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(config.log_level.upper())
    # Reconfiguring (reload, tests) must not stack handlers.
    logger.handlers.clear()

    handler = logging.StreamHandler()
    if config.log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
