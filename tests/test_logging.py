"""Tests for logging configuration."""

import json

from ticktime import DateTime, FixedClock, SystemTime, configure_logging, get_logger
from ticktime.logging import timed_block


class TestLogging:
    """Test structlog setup."""

    def test_json_output(self, capsys):
        """JSON output renders one object per event."""
        configure_logging(level="INFO", json_output=True)
        get_logger("test").info("hello", answer=42)

        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters(self, capsys):
        """Events below the configured level are dropped."""
        configure_logging(level="WARNING", json_output=True)
        get_logger("test").debug("quiet")
        assert capsys.readouterr().out == ""

    def test_timed_block(self, capsys):
        """timed_block logs elapsed milliseconds."""
        configure_logging(level="DEBUG", json_output=True)
        with timed_block(get_logger("test"), "work", level="info", rows=3):
            pass

        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "work"
        assert record["rows"] == 3
        assert record["elapsed_ms"] >= 0

    def test_now_logs_at_debug(self, capsys):
        """Clock reads are logged at debug level."""
        configure_logging(level="DEBUG", json_output=True)
        DateTime.now(FixedClock(SystemTime(2024, 1, 0, 1, 0, 0, 0, 0)))

        record = json.loads(capsys.readouterr().out.strip())
        assert record["event"] == "now"
        assert record["fields"] == [2024, 1, 0, 1, 0, 0, 0, 0]
