"""Logging configuration and utilities."""

from vivaagent.shared.logging.config import setup_logging, log_tool_call, StructuredFormatter

__all__ = [
    "setup_logging",
    "log_tool_call",
    "StructuredFormatter",
]
