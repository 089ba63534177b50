"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Iterable
from pythonjsonlogger import jsonlogger
from budget_timeline.domain.models import RecordDiagnostic


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "budget-timeline"


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


def log_timeline_built(
    request_id: str,
    user_id: str | None,
    view: str,
    event_count: int,
    skipped_count: int,
    duration_ms: float,
) -> None:
    """Log structured timeline build outcome"""
    logging.info(
        "Timeline built",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "timeline_complete",
            "view": view,
            "event_count": event_count,
            "skipped_count": skipped_count,
            "duration_ms": duration_ms,
        },
    )


def log_skipped_records(request_id: str, diagnostics: Iterable[RecordDiagnostic]) -> None:
    """One warning per record left out of a timeline"""
    for diagnostic in diagnostics:
        logging.warning(
            "Skipped malformed record",
            extra={
                "request_id": request_id,
                "source_type": diagnostic.source_type,
                "source_id": diagnostic.source_id,
                "reason": diagnostic.reason,
            },
        )
