"""Logging configuration for the API process.

Module loggers (``logging.getLogger(__name__)``) propagate to the ``app``
parent logger configured here, either as plain lines or as JSON lines.
"""

import json
import logging
from datetime import datetime, timezone

from app.core.config import LogFormatEnum, settings

LOG_FORMAT = "[%(asctime)s.%(msecs)03d][%(levelname)s][%(name)s:%(lineno)d]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(level: str | None = None, log_format: str | None = None) -> logging.Logger:
    """Attach a single console handler to the ``app`` and ``models`` loggers."""
    level = level or settings.log_level.value
    log_format = log_format or settings.log_format.value

    handler = logging.StreamHandler()
    if log_format == LogFormatEnum.json.value:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    for name in ("app", "models"):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False

    return logging.getLogger("app")
