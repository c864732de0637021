"""
Structured logging configuration.

Provides JSON-formatted logging for agent tool invocations.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional


TOOL_LOGGER_NAME = "vivaagent.tool_events"


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that outputs log records as JSON.

    Each log entry includes:
    - timestamp: ISO format datetime
    - level: Log level name
    - logger: Logger name
    - message: Log message
    - extra: Any additional fields passed to the log call
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra"):
            log_entry["extra"] = record.extra

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: int = logging.INFO,
    logger_name: str = TOOL_LOGGER_NAME,
) -> logging.Logger:
    """
    Configure structured JSON logging.

    Args:
        level: Logging level (default: INFO)
        logger_name: Name for the logger instance.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False

    logger.handlers = []

    formatter = StructuredFormatter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def log_tool_call(
    event: str,
    tool_name: str,
    session_id: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a tool invocation event.

    Args:
        event: Name of the event (e.g., "tool_start", "tool_complete", "tool_failed")
        tool_name: Name of the invoked tool
        session_id: Planning session the call belongs to
        extra: Additional context to include in the log
        logger: Logger instance to use. If not provided, uses the tool logger.
    """
    if logger is None:
        logger = logging.getLogger(TOOL_LOGGER_NAME)

    log_data = {
        "event": event,
        "tool": tool_name,
        "session_id": session_id,
    }

    if extra:
        log_data["extra"] = extra

    record = logger.makeRecord(
        logger.name,
        logging.INFO,
        "",
        0,
        f"Tool call: {tool_name} ({event})",
        args=(),
        exc_info=None,
    )
    record.extra = log_data

    logger.handle(record)
