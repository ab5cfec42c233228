"""Structured JSON logging with query correlation."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import sys
from typing import Any, TextIO

import orjson

from lexisearch.observability.context import get_query_context


_PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_RESERVED_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """JSON formatter carrying the active query id.

    Extra fields passed through ``extra=`` (term, candidate and document counts)
    are copied into the entry as-is.
    """

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_query_context()
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "query_id": ctx.get("query_id", ""),
        }

        if "." in record.name:
            log_entry["component"] = record.name.split(".")[-1]

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_entry[key] = value

        return orjson.dumps(log_entry, default=repr).decode("utf-8")


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
    *,
    stream: TextIO | None = None,
    logger_levels: dict[str, str] | None = None,
) -> None:
    """Configure the root logger with a single stream handler.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Emit structured JSON logs when True
        stream: Destination stream, stderr by default so logs stay out of command output
        logger_levels: Per-logger level overrides (logger name -> level string)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    root.addHandler(handler)

    for logger_name, logger_level in (logger_levels or {}).items():
        resolved = getattr(logging, logger_level.upper(), logging.INFO)
        logging.getLogger(logger_name).setLevel(resolved)
