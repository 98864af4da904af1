"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- error/critical enrichment with exception type and message
- Context binding
- Level filtering and JSON output (real structlog, captured stdout)
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import structlog

from src.infrastructure.logging.console_adapter import ConsoleAdapter


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep global structlog configuration from leaking into other tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_structlog_logger():
    with patch(
        "src.infrastructure.logging.console_adapter.structlog"
    ) as mock_structlog:
        mock_logger = MagicMock()
        mock_structlog.get_logger.return_value = mock_logger
        yield mock_logger


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_debug_logs_message_with_context(self, mock_structlog_logger):
        adapter = ConsoleAdapter()
        adapter.debug("resource_event_dispatched", key="abc", handler_count=2)

        mock_structlog_logger.debug.assert_called_once_with(
            "resource_event_dispatched", key="abc", handler_count=2
        )

    def test_info_logs_message_with_context(self, mock_structlog_logger):
        adapter = ConsoleAdapter()
        adapter.info("resource_created", resource_id="r-1", version=0)

        mock_structlog_logger.info.assert_called_once_with(
            "resource_created", resource_id="r-1", version=0
        )

    def test_warning_logs_message_with_context(self, mock_structlog_logger):
        adapter = ConsoleAdapter()
        adapter.warning("resource_request_rejected", operation="update")

        mock_structlog_logger.warning.assert_called_once_with(
            "resource_request_rejected", operation="update"
        )

    def test_error_without_exception(self, mock_structlog_logger):
        adapter = ConsoleAdapter()
        adapter.error("resource_export_publish_failed", job_id="j-1")

        mock_structlog_logger.error.assert_called_once_with(
            "resource_export_publish_failed", job_id="j-1"
        )

    def test_error_adds_exception_fields(self, mock_structlog_logger):
        """Test error= is flattened into error_type and error_message."""
        adapter = ConsoleAdapter()
        adapter.error(
            "resource_event_publish_failed",
            error=ConnectionError("broker down"),
            event_type="RESOURCE_CREATED",
        )

        mock_structlog_logger.error.assert_called_once_with(
            "resource_event_publish_failed",
            event_type="RESOURCE_CREATED",
            error_type="ConnectionError",
            error_message="broker down",
        )

    def test_critical_adds_exception_fields(self, mock_structlog_logger):
        adapter = ConsoleAdapter()
        adapter.critical("database_unreachable", error=OSError("no route"))

        mock_structlog_logger.critical.assert_called_once_with(
            "database_unreachable", error_type="OSError", error_message="no route"
        )

    def test_logs_with_no_context(self, mock_structlog_logger):
        adapter = ConsoleAdapter()
        adapter.info("application_stopped")

        mock_structlog_logger.info.assert_called_once_with("application_stopped")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self, mock_structlog_logger):
        bound_logger = MagicMock()
        mock_structlog_logger.bind.return_value = bound_logger
        adapter = ConsoleAdapter()

        bound = adapter.bind(trace_id="t-1")
        bound.info("request_started")

        assert bound is not adapter
        mock_structlog_logger.bind.assert_called_once_with(trace_id="t-1")
        bound_logger.info.assert_called_once_with("request_started")
        mock_structlog_logger.info.assert_not_called()

    def test_with_context_is_alias_for_bind(self, mock_structlog_logger):
        adapter = ConsoleAdapter()

        adapter.with_context(component="resource_service")

        mock_structlog_logger.bind.assert_called_once_with(
            component="resource_service"
        )


@pytest.mark.unit
class TestConsoleAdapterOutput:
    """Test real rendering through structlog."""

    def test_json_output_contains_event_and_context(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="DEBUG")

        adapter.info("resource_deleted", resource_id="r-9")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "resource_deleted"
        assert record["resource_id"] == "r-9"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filtering(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="WARNING")

        adapter.info("dropped_event")
        adapter.warning("kept_event")

        output = capsys.readouterr().out
        assert "dropped_event" not in output
        assert "kept_event" in output

    def test_unknown_level_name_defaults_to_info(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="VERBOSE")

        adapter.debug("hidden_event")
        adapter.info("shown_event")

        output = capsys.readouterr().out
        assert "hidden_event" not in output
        assert "shown_event" in output
