"""
Tests for Structured Logging.

Log lines are rendered as JSON to a StringIO so each test can parse and
inspect exactly what would have been written to stderr.
"""

import io
import json

import pytest

from cloze_mcp.observability.logging import (
    configure_logging,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    reset_logging,
)


@pytest.fixture
def log_stream():
    """Route log output to a StringIO for the duration of a test."""
    stream = io.StringIO()
    configure_logging(level="DEBUG", stream=stream, force=True)
    yield stream
    reset_logging()
    configure_logging(force=True)


def _lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


# =============================================================================
# Correlation ID
# =============================================================================


class TestCorrelationId:
    """Tests for correlation ID context handling."""

    def test_unset_by_default(self) -> None:
        assert get_correlation_id() is None

    def test_context_manager_sets_and_clears(self) -> None:
        with correlation_id_context("call-1"):
            assert get_correlation_id() == "call-1"

        assert get_correlation_id() is None

    def test_nested_context_restores_previous(self) -> None:
        with correlation_id_context("outer"):
            with correlation_id_context("inner"):
                assert get_correlation_id() == "inner"

            assert get_correlation_id() == "outer"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with correlation_id_context("failing"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


# =============================================================================
# JSON Output
# =============================================================================


class TestJSONOutput:
    """Tests for rendered log lines."""

    def test_event_is_rendered_as_json(self, log_stream) -> None:
        logger = get_logger("cloze_mcp.tests")

        logger.info("tool_call_started", tool="cloze_get_profile")

        (line,) = _lines(log_stream)
        assert line["event"] == "tool_call_started"
        assert line["tool"] == "cloze_get_profile"
        assert line["level"] == "info"
        assert line["logger"] == "cloze_mcp.tests"
        assert "timestamp" in line

    def test_correlation_id_included_when_set(self, log_stream) -> None:
        logger = get_logger("cloze_mcp.tests")

        with correlation_id_context("abc123"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = _lines(log_stream)
        assert inside["correlation_id"] == "abc123"
        assert "correlation_id" not in outside

    def test_level_filtering(self) -> None:
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream, force=True)
        try:
            logger = get_logger("cloze_mcp.tests")
            logger.info("hidden")
            logger.warning("shown")
        finally:
            configure_logging(force=True)

        assert [line["event"] for line in _lines(stream)] == ["shown"]

    def test_module_level_logger_follows_reconfiguration(self, log_stream) -> None:
        """
        A logger obtained before configure_logging(force=True) writes to
        the new stream.
        """
        from cloze_mcp.tools import dispatcher

        dispatcher.logger.info("late_configured")

        assert _lines(log_stream)[-1]["event"] == "late_configured"
        assert _lines(log_stream)[-1]["logger"] == "cloze_mcp.tools.dispatcher"


class TestGetLogger:
    """Tests for the logger factory."""

    def test_named_logger_before_configuration(self) -> None:
        """
        get_logger() works for any name without configuring first, the
        way every module calls it at import time.
        """
        reset_logging()
        try:
            logger = get_logger("cloze_mcp.clients.cloze")
        finally:
            configure_logging(force=True)

        assert logger is not None

    def test_logger_name_does_not_leak_as_logger_name_key(self, log_stream) -> None:
        get_logger("cloze_mcp.server").info("server_started")

        (line,) = _lines(log_stream)
        assert line["logger"] == "cloze_mcp.server"
        assert "logger_name" not in line

    def test_bound_values_keep_the_name(self, log_stream) -> None:
        get_logger("cloze_mcp.server").bind(tool="cloze_get_views").info("bound")

        (line,) = _lines(log_stream)
        assert line["logger"] == "cloze_mcp.server"
        assert line["tool"] == "cloze_get_views"


class TestConfigureLogging:

    def test_second_call_is_noop_without_force(self) -> None:
        first = io.StringIO()
        second = io.StringIO()
        try:
            configure_logging(stream=first, force=True)
            configure_logging(stream=second)

            get_logger("cloze_mcp.tests").info("once")

            assert first.getvalue()
            assert second.getvalue() == ""
        finally:
            configure_logging(force=True)
