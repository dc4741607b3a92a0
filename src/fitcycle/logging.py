"""Structured logging for fitcycle.

Controlled via FITCYCLE_LOG_FORMAT env var: "json" (default) or "text".
Both formats carry the ``fitcycle_*`` extras passed to a log call, e.g.
``logger.debug("...", extra={"fitcycle_goal": goal})``.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

EXTRA_PREFIX = "fitcycle_"


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key.startswith(EXTRA_PREFIX)
    }


class JSONFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
        }

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = "".join(traceback.format_exception(*record.exc_info))

        log_entry.update(_extras(record))
        return json.dumps(log_entry, default=str)


class TextFormatter(logging.Formatter):
    """Plaintext lines with fitcycle extras appended as key=value pairs."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if not extras:
            return line
        pairs = " ".join(f"{key[len(EXTRA_PREFIX):]}={value}" for key, value in extras.items())
        return f"{line} [{pairs}]"


def setup_logging(log_format: str, level: int | str = logging.INFO) -> None:
    """Configure root logger with either JSON or plaintext format."""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers to avoid duplicate output
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if log_format == "json" else TextFormatter())
    root.addHandler(handler)
