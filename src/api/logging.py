"""
Structured logging for the Prague Guide API.

Lines look like:
    2025-06-01 12:00:00.123 | INFO     | main | Chat submit | session=ab12 chars=42
"""

import logging
import sys
from datetime import datetime
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Pipe-separated formatter with millisecond timestamps and key=value extras."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        level = record.levelname.ljust(8)
        module = record.name.split(".")[-1] if record.name else "root"

        line = f"{timestamp} | {level} | {module} | {record.getMessage()}"

        extras = getattr(record, "extras", None)
        if extras:
            line = f"{line} | " + " ".join(f"{k}={v}" for k, v in extras.items())

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"

        return line


def get_logger(name: str) -> logging.Logger:
    """Get a logger writing structured lines to stdout."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        logger.propagate = False

    return logger


def log_request(logger: logging.Logger, action: str, **kwargs: Any) -> None:
    """Log an API action with structured extras."""
    logger.info(action, extra={"extras": kwargs})


def log_error(
    logger: logging.Logger,
    action: str,
    error: Exception,
    **kwargs: Any,
) -> None:
    """Log a failed action with the exception type and structured extras."""
    logger.error(
        f"{action}: {type(error).__name__}: {error}",
        extra={"extras": kwargs},
    )
