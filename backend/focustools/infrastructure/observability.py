"""Structured Logging — one JSON object per line, or plain text for local runs.

Invariants:
    - Every JSON line carries timestamp, level, logger, service and message
    - timestamp is the record's creation time (UTC), not the time it was formatted
    - Known extras (task_id, session_id, error_code, path, operation) appear only
      when set on the record; anything else passed via extra= is dropped
    - setup_logging owns exactly one root handler: calling it again replaces that
      handler instead of stacking a second one

Design Decisions:
    - Plain logging.Formatter subclass, no structlog: request code only ever calls
      logger.info(..., extra={...})
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "focustools-api"

_EXTRA_KEYS = (
    "task_id", "session_id", "error_code", "path", "operation",
)
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "focustools"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def __init__(self, service: str = SERVICE_NAME):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = getattr(record, key, None)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the application's root handler; returns it."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
