"""
Hotel API - Structured Logging
================================

What:  JSON log lines tagged with the current request's correlation id.
How:   CorrelationIdFilter stamps `record.correlation_id` when the record is
       handled; JsonFormatter renders one JSON object per line.
When:  setup_logging() runs once from the FastAPI lifespan.

Log line:
    {
        "timestamp": "2026-03-01T07:57:02.123456+00:00",
        "level": "INFO",
        "logger": "hotel_api.repositories.hotel_repository",
        "message": "Hotel created",
        "data": {"hotel_id": 7},
        "correlationId": "0b8c6f0e-3a4d-4a57-9a0e-7f1d2c1b5a9e"
    }

`data` is whatever the caller passed as extra={"data": {...}}; it is {}
when nothing was passed.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List

from hotel_api.config import settings
from hotel_api.context import get_correlation_id


class CorrelationIdFilter(logging.Filter):
    """Attach the active correlation id to every record passing through a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, data, correlationId."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "data": getattr(record, "data", None) or {},
            "correlationId": getattr(record, "correlation_id", None) or get_correlation_id(),
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def build_handlers() -> List[logging.Handler]:
    """stdout, plus an hourly-rotated file when LOG_FILE is set."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                log_path,
                when="H",
                backupCount=settings.log_backup_count,
                encoding="utf-8",
                utc=True,
            )
        )

    formatter = JsonFormatter()
    correlation_filter = CorrelationIdFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(correlation_filter)
    return handlers


def setup_logging() -> None:
    """
    Configure the root logger for the whole application.

    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        handlers=build_handlers(),
        force=True,  # Override any existing logging config
    )

    # Third-party loggers that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
