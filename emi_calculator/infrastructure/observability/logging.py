"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from emi_calculator.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(
    request_id: str,
    outcome: str,
    duration_ms: float | None = None,
    kind: str | None = None,
    field: str | None = None,
) -> None:
    """Log structured calculation outcome ("computed" or "rejected")"""
    extra: Dict[str, Any] = {
        "request_id": request_id,
        "step": "emi_calculation",
        "outcome": outcome,
    }
    if duration_ms is not None:
        extra["duration_ms"] = duration_ms
    if kind is not None:
        extra["error_kind"] = kind
        extra["field"] = field
    logging.info("EMI calculation completed", extra=extra)
