"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (descriptor_id, error_code, result_count, ...) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging runs on every lifespan start; it swaps out its previous
      handler so restarts never duplicate log lines
"""

import logging
import json
from datetime import datetime, timezone

from app.core.domain_types import LogFormat

_EXTRA_FIELDS = (
    "descriptor_id", "error_code", "path", "source",
    "query_length", "result_count", "keyword_count", "descriptor_count",
)

_HANDLER_MARK = "_zoo_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: LogFormat | str = LogFormat.JSON):
    """Configure logging for the application. Replaces its own earlier handler."""
    for previous in [h for h in logging.root.handlers if getattr(h, _HANDLER_MARK, False)]:
        logging.root.removeHandler(previous)
    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_MARK, True)
    if LogFormat(fmt) is LogFormat.JSON:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
