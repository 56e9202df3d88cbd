"""Structured JSON logging"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from payments_query.config import settings


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter that stamps timestamp, level and service name"""

    def __init__(self, *args: Any, service_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.service_name = service_name or settings.service_name

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(record.created, UTC).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name


def setup_logging(level: str | None = None, stream: Any = None) -> logging.Handler:
    """Configure JSON logging on the ``payments_query`` logger.

    Returns the installed handler. Calling again replaces the previous
    handler instead of stacking a second one.
    """
    logger = logging.getLogger("payments_query")
    logger.setLevel((level or settings.log_level).upper())

    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ServiceJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return handler
