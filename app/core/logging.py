"""Structured logging for the DigiForm path engine.

Log lines are ``key=value`` pairs. Recommendation context (project, chosen
path, score, flag count) travels on the record either as attributes passed
through ``extra=`` or as the ``extra_data`` dict built by
``log_with_context``, and is rendered after the message.
"""

import logging
import sys
from enum import Enum
from typing import Any

# Record attributes promoted to log fields when passed via ``extra=``
CONTEXT_FIELDS = (
    "project_id",
    "recommended_path",
    "confidence",
    "overall_score",
    "risk_flags",
    "responses",
)


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    text = str(value)
    if not text or any(c.isspace() for c in text):
        return f'"{text}"'
    return text


class StructuredFormatter(logging.Formatter):
    """Key=value structured log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if isinstance(getattr(record, "extra_data", None), dict):
            log_data.update(record.extra_data)

        parts = [f"{k}={_format_value(v)}" for k, v in log_data.items()]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger writing structured lines to stdout; DEBUG in dev, INFO otherwise
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        try:
            from app.core.config import get_settings

            settings = get_settings()
            if settings.PATH_ENGINE_ENV == "dev":
                logger.setLevel(logging.DEBUG)
            else:
                logger.setLevel(logging.INFO)
        except Exception:
            # Settings need Supabase credentials; the engine must log without them
            logger.setLevel(logging.INFO)

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **context: Any) -> None:
    """
    Log a message with structured context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **context: Fields rendered after the message (e.g. project_id, overall_score)
    """
    # stacklevel points funcName at the caller, not this helper
    logger.log(level, msg, extra={"extra_data": context}, stacklevel=2)
