"""Structured Logging — diagnostics for the batch driver, kept off the trace stream.

Invariants:
    - stdout carries trace lines only; every log record goes to stderr
    - JSON records hold timestamp, level, logger, message plus the run extras
      (start_value, iterations, outcome, error_code, batch_size) when present
    - A skipped or aborted start value carries its KaprekarError envelope under "error"

Design Decisions:
    - Piping `kaprekar > traces.txt` yields exactly the printed traces, with logs still visible
    - setup_logging called once by main() before the batch runs
"""

import logging
import json
import sys
from datetime import datetime, timezone


EXTRA_KEYS: tuple[str, ...] = (
    "start_value", "iterations", "outcome", "error_code", "batch_size", "error",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
