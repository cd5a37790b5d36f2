"""Tests for the errors module."""
import pytest
from srt_query.errors import (
    EmptyText,
    InvalidIndex,
    InvalidRange,
    MalformedOffset,
    MalformedQuery,
    MalformedTimestamp,
    SrtQueryError,
    SubtitleParseError,
    TruncatedEntry,
)
from srt_query.models import Entry


class TestHierarchy:
    """Tests for the exception class hierarchy."""

    @pytest.mark.parametrize("cls", [InvalidIndex, InvalidRange, TruncatedEntry, EmptyText, MalformedOffset])
    def test_parse_errors(self, cls):
        """Test that every parse error shares the common bases."""
        err = cls("boom")
        assert isinstance(err, SubtitleParseError)
        assert isinstance(err, SrtQueryError)
        assert isinstance(err, ValueError)

    def test_malformed_timestamp(self):
        err = MalformedTimestamp("00:xx")
        assert isinstance(err, SubtitleParseError)
        assert err.value == "00:xx"

    def test_malformed_query_is_not_parse_error(self):
        err = MalformedQuery("5")
        assert isinstance(err, SrtQueryError)
        assert isinstance(err, ValueError)
        assert not isinstance(err, SubtitleParseError)


class TestSubtitleParseError:
    """Tests for SubtitleParseError attributes and message."""

    def test_defaults(self):
        err = SubtitleParseError("bad cue")
        assert err.line_no is None
        assert err.entries == ()
        assert str(err) == "bad cue"

    def test_with_line_number(self):
        err = InvalidIndex("invalid index: '12a'", line_no=5)
        assert str(err) == "line 5: invalid index: '12a'"

    def test_entries_stored_as_tuple(self):
        entries = [Entry(1, 0, 1000, "Hi")]
        err = EmptyText("no text", entries=entries)
        assert err.entries == (Entry(1, 0, 1000, "Hi"),)

    def test_timestamp_message(self):
        err = MalformedTimestamp("1:2", line_no=2)
        assert str(err) == "line 2: invalid timestamp: '1:2'"
