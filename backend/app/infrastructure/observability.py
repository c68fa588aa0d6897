"""Structured Logging — one root handler, JSON lines carrying request and store context.

Invariants:
    - Every line has timestamp (the event time, UTC), level, logger and message
    - Store context (user_id, operation, table) and request context (method, path,
      error_code, http_status) appear only when the call site passed them via extra=
    - setup_logging is idempotent: calling it again replaces its handler instead of stacking
    - boto3/botocore/urllib3 log at WARNING and above only

Design Decisions:
    - stdlib logging throughout: uvicorn and botocore loggers share the root handler
    - Extras json.dumps cannot encode (UUID, datetime) are written as str()
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "users-api"

_STORE_KEYS = ("user_id", "operation", "table")
_REQUEST_KEYS = ("method", "path", "error_code", "http_status")
_QUIET_LOGGERS = ("boto3", "botocore", "urllib3")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key])
            for key in _STORE_KEYS + _REQUEST_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the application handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
