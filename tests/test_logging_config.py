"""Tests for logging_config.py module."""

import logging
from unittest.mock import patch

import colorlog
import pytest

from muh2log.logging_config import (
    MAX_ERRORS_PER_TYPE,
    ErrorAggregator,
    LoggerConfigurator,
    error_aggregator,
    log_structured_error,
)


class TestColoredFormatter:
    """Tests for the colorlog formatter built by LoggerConfigurator."""

    @pytest.fixture
    def formatter(self):
        return LoggerConfigurator().build_formatter()

    def _record(self, level):
        return logging.LogRecord(
            name="test", level=level, pathname="", lineno=0, msg="test", args=(), exc_info=None
        )

    def test_is_colorlog_formatter(self, formatter):
        assert isinstance(formatter, colorlog.ColoredFormatter)

    def test_debug_color(self, formatter):
        formatted = formatter.format(self._record(logging.DEBUG))
        assert "\033[36m" in formatted  # Cyan color code
        assert "DEBUG" in formatted

    def test_warning_color(self, formatter):
        formatted = formatter.format(self._record(logging.WARNING))
        assert "\033[33m" in formatted  # Yellow color code
        assert "WARNING" in formatted


class TestLoggerConfigurator:
    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "yes")
        assert LoggerConfigurator().resolve_level() == logging.DEBUG

    def test_level_default_info(self):
        assert LoggerConfigurator().resolve_level() == logging.INFO

    def test_level_from_config(self):
        assert LoggerConfigurator({"debug": True}).resolve_level() == logging.DEBUG

    def test_configure_sets_root_level_and_registers_summary(self):
        root = logging.getLogger()
        previous = root.level
        try:
            with patch("muh2log.logging_config.atexit.register") as register:
                level = LoggerConfigurator({"debug": True}).configure()
            assert level == logging.DEBUG
            assert root.level == logging.DEBUG
            register.assert_called_once()
        finally:
            root.setLevel(previous)


class TestErrorAggregation:
    def test_log_structured_error_formats_and_records(self, caplog):
        caplog.set_level(logging.WARNING)
        log_structured_error(
            "parsing",
            "bad mode",
            exception=ValueError("boom"),
            context={"line": 4},
            level=logging.WARNING,
        )
        message = caplog.records[-1].getMessage()
        assert message == "[PARSING] bad mode | Exception: ValueError: boom | Context: line=4"
        summary = error_aggregator.get_error_summary()
        assert summary["parsing"]["total_count"] == 1
        assert summary["parsing"]["last_occurrence"]["context"] == {"line": 4}

    def test_aggregator_is_bounded(self):
        aggregator = ErrorAggregator()
        for i in range(MAX_ERRORS_PER_TYPE + 5):
            aggregator.record_error("io", f"e{i}")
        assert aggregator.get_error_summary()["io"]["total_count"] == MAX_ERRORS_PER_TYPE

    def test_summary_report_when_empty(self, caplog):
        caplog.set_level(logging.INFO)
        ErrorAggregator().log_summary_report()
        assert "No errors recorded" in caplog.text

    def test_summary_report_lists_types(self, caplog):
        caplog.set_level(logging.INFO)
        aggregator = ErrorAggregator()
        aggregator.record_error("config", "bad file")
        aggregator.log_summary_report()
        assert "config: 1 total" in caplog.text
        assert "Last: bad file" in caplog.text

    def test_reset_clears_recorded_errors(self):
        aggregator = ErrorAggregator()
        aggregator.record_error("parsing", "bad mode")
        aggregator.reset()
        assert aggregator.get_error_summary() == {}
