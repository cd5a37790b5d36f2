"""Tests for the logging_utils module."""
import pytest
from srt_query.logging_utils import log, warn, die, debug, format_duration


class TestLog:
    """Tests for log function."""

    def test_log_output(self, capsys):
        """Test that log outputs to stdout."""
        log("test message", quiet=False)
        captured = capsys.readouterr()
        assert "test message" in captured.out

    def test_log_quiet_mode(self, capsys):
        """Test that log respects quiet mode."""
        log("test message", quiet=True)
        captured = capsys.readouterr()
        assert captured.out == ""

    def test_log_default_not_quiet(self, capsys):
        """Test that log defaults to not quiet."""
        log("test message")
        captured = capsys.readouterr()
        assert "test message" in captured.out


class TestWarn:
    """Tests for warn function."""

    def test_warn_output(self, capsys):
        """Test that warn outputs to stderr with WARNING prefix."""
        warn("test warning", quiet=False)
        captured = capsys.readouterr()
        assert "WARNING: test warning" in captured.err
        assert captured.out == ""

    def test_warn_quiet_mode(self, capsys):
        """Test that warn respects quiet mode."""
        warn("test warning", quiet=True)
        captured = capsys.readouterr()
        assert captured.err == ""


class TestDie:
    """Tests for die function."""

    def test_die_output(self, capsys):
        """Test that die outputs to stderr with ERROR prefix."""
        code = die("test error", code=1)
        captured = capsys.readouterr()
        assert "ERROR: test error" in captured.err
        assert captured.out == ""
        assert code == 1

    def test_die_default_code(self, capsys):
        """Test that die defaults to exit code 1."""
        assert die("test error") == 1

    def test_die_custom_code(self, capsys):
        """Test that die accepts custom exit code."""
        assert die("test error", code=130) == 130


class TestDebug:
    """Tests for debug function."""

    def test_debug_enabled(self, capsys):
        """Test that debug writes to stderr when enabled."""
        debug("3 entries", enabled=True)
        captured = capsys.readouterr()
        assert "DEBUG: 3 entries" in captured.err
        assert captured.out == ""

    def test_debug_disabled(self, capsys):
        """Test that debug is silent when disabled."""
        debug("3 entries", enabled=False)
        captured = capsys.readouterr()
        assert captured.err == ""
        assert captured.out == ""


class TestFormatDuration:
    """Tests for format_duration function."""

    def test_format_duration_seconds(self):
        """Test formatting positions under a minute."""
        assert format_duration(45_000) == "0:45"
        assert format_duration(5_000) == "0:05"

    def test_format_duration_minutes(self):
        """Test formatting positions with minutes."""
        assert format_duration(330_000) == "5:30"
        assert format_duration(600_000) == "10:00"

    def test_format_duration_hours(self):
        """Test formatting positions with hours."""
        assert format_duration(3_600_000) == "1:00:00"
        assert format_duration(3_661_000) == "1:01:01"

    def test_format_duration_truncates_milliseconds(self):
        """Test that sub-second parts are dropped."""
        assert format_duration(90_999) == "1:30"

    def test_format_duration_negative(self):
        """Test formatting negative positions (treated as 0)."""
        assert format_duration(-10_000) == "0:00"
