"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from registration_gateway.config import settings


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


def log_registration(
    request_id: str,
    client_id: int,
    accepted: bool,
    reason: Optional[str],
    credit_limit: Optional[int],
    duration_ms: float,
) -> None:
    """Log structured registration outcome for analysis"""
    logging.info(
        "Registration completed",
        extra={
            "request_id": request_id,
            "client_id": client_id,
            "step": "registration_complete",
            "outcome": "accepted" if accepted else "rejected",
            "rejection_reason": reason,
            "credit_limit": credit_limit,
            "duration_ms": duration_ms,
        },
    )
