"""Structured Logging — one root handler, JSON in production, text in development.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Audit ids (applicant_id, recommendation_id) and error fields
      (error_code, path) are copied from `extra=` when set
    - setup_logging is idempotent: calling it again swaps the handler it
      installed earlier instead of stacking a second one
    - uvicorn loggers propagate to root so server and app lines share a format
"""

import logging
import json
from datetime import datetime, timezone

AUDIT_FIELDS = ("applicant_id", "recommendation_id")
ERROR_FIELDS = ("error_code", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def __init__(self, fields: tuple[str, ...] = AUDIT_FIELDS + ERROR_FIELDS):
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: getattr(record, key)
            for key in self.fields
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the root handler for the advisor; returns it."""
    global _installed_handler
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
    _installed_handler = handler
    return handler
