"""
Tests for the structured tool-event logging.
"""

import json
import logging

from vivaagent.shared.logging.config import (
    TOOL_LOGGER_NAME,
    StructuredFormatter,
    log_tool_call,
    setup_logging,
)


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def test_single_json_console_handler(self):
        logger = setup_logging()

        assert logger.name == TOOL_LOGGER_NAME
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_module_loggers_keep_propagating(self, caplog):
        """Tool module warnings still reach the root handlers."""
        setup_logging()

        with caplog.at_level(logging.WARNING):
            logging.getLogger("vivaagent.tools.adapter").warning("Rejected arguments for x")

        assert [r.getMessage() for r in caplog.records] == ["Rejected arguments for x"]


class TestLogToolCall:
    """Tests for the log_tool_call function."""

    def test_event_rendered_as_json(self):
        logger = logging.getLogger("vivaagent.test_tool_events")
        logger.handlers = []
        logger.propagate = False
        records = []

        class _Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        logger.addHandler(_Collect())

        log_tool_call(
            "tool_failed",
            "query_vivatech_api",
            session_id="s-1",
            extra={"error_type": "TransportError"},
            logger=logger,
        )

        entry = json.loads(StructuredFormatter().format(records[0]))
        assert entry["message"] == "Tool call: query_vivatech_api (tool_failed)"
        assert entry["extra"] == {
            "event": "tool_failed",
            "tool": "query_vivatech_api",
            "session_id": "s-1",
            "extra": {"error_type": "TransportError"},
        }
