"""Structured logging: JSON formatter and one-shot setup.

Every record carries timestamp, level, logger and message; ``user_id``,
``error_code`` and ``path`` are added when passed through ``extra``.
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("user_id", "error_code", "path")

# handler added by the last setup_logging() call, replaced on the next one
_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure the root logger with a single stream handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    global _installed_handler
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    _installed_handler = handler
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
