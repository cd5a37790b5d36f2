"""Exceptions raised while parsing subtitle files and queries."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .models import Entry


class SrtQueryError(Exception):
    """Base class for every error reported by SRT Query."""


class SubtitleParseError(SrtQueryError, ValueError):
    """A subtitle file could not be parsed.

    Attributes:
        line_no: 1-based line number where the problem was found, if known
        entries: Entries that were parsed successfully before the failure
    """

    def __init__(self, message: str, *, line_no: Optional[int] = None,
                 entries: Sequence[Entry] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.line_no = line_no
        self.entries: Tuple[Entry, ...] = tuple(entries)

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"


class MalformedTimestamp(SubtitleParseError):
    """A timestamp is not of the form hh:mm:ss[,mmm]."""

    def __init__(self, value: str, **kwargs) -> None:
        super().__init__(f"invalid timestamp: {value!r}", **kwargs)
        self.value = value


class InvalidIndex(SubtitleParseError):
    """The index line of a cue is not a plain decimal number."""


class InvalidRange(SubtitleParseError):
    """The timing line is not '<start> --> <end>'."""


class TruncatedEntry(SubtitleParseError):
    """Input ended right after an index line."""


class EmptyText(SubtitleParseError):
    """A cue has no text lines."""


class MalformedOffset(SubtitleParseError):
    """The OFFSET directive does not carry a signed integer."""


class MalformedQuery(SrtQueryError, ValueError):
    """A query time is not of the form mm:ss."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid query time: {value!r} (expected mm:ss)")
        self.value = value
