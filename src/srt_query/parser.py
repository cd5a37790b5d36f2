#!/usr/bin/env python3
"""SubRip (.srt) parsing for SRT Query.

This module handles:
- Timestamp parsing and formatting (hh:mm:ss,mmm <-> milliseconds)
- Reading single cues from a line cursor
- Parsing whole files, including the optional leading OFFSET directive
"""
from __future__ import annotations

import io
import itertools
import re
from typing import IO, Iterable, Iterator, List, Optional, Union

from .errors import (
    EmptyText,
    InvalidIndex,
    InvalidRange,
    MalformedOffset,
    MalformedTimestamp,
    SubtitleParseError,
    TruncatedEntry,
)
from .models import Entry, ParsedSubtitles


OFFSET_PREFIX = "OFFSET:"
RANGE_SEPARATOR = " --> "

_DIGITS_RE = re.compile(r"[0-9]+")
_SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")

Source = Union[IO[bytes], IO[str]]


# ============================================================
# Timestamps
# ============================================================

def _timestamp_field(part: str, value: str) -> int:
    if not _DIGITS_RE.fullmatch(part):
        raise MalformedTimestamp(value)
    return int(part)


def parse_timestamp(value: str) -> int:
    """Parse an SRT timestamp into milliseconds.

    The millisecond suffix is optional: "01:02:03,456" and "01:02:03" are
    both accepted.

    Args:
        value: Timestamp string (hh:mm:ss[,mmm])

    Returns:
        Time in milliseconds

    Raises:
        MalformedTimestamp: If the string is not a valid timestamp
    """
    clock = value
    millis = 0
    if "," in value:
        parts = value.split(",")
        if len(parts) != 2:
            raise MalformedTimestamp(value)
        clock = parts[0]
        millis = _timestamp_field(parts[1], value)

    fields = clock.split(":")
    if len(fields) != 3:
        raise MalformedTimestamp(value)
    hours, minutes, seconds = (_timestamp_field(f, value) for f in fields)

    return hours * 3_600_000 + minutes * 60_000 + seconds * 1000 + millis


def format_timestamp(ms: int) -> str:
    """Format milliseconds as an SRT timestamp (hh:mm:ss,mmm).

    Negative values are rendered with a leading minus sign.
    """
    sign = "-" if ms < 0 else ""
    ms = abs(ms)
    h = ms // 3_600_000
    ms %= 3_600_000
    m = ms // 60_000
    ms %= 60_000
    s = ms // 1000
    ms %= 1000
    return f"{sign}{h:02d}:{m:02d}:{s:02d},{ms:03d}"


# ============================================================
# Line Cursor
# ============================================================

def strip_line_ending(line: str) -> str:
    """Remove one trailing newline and one carriage return, if present."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _strip_bom(line: str) -> str:
    # left behind by text streams opened as plain utf-8
    if line.startswith("\ufeff"):
        return line[1:]
    return line


def _iter_lines(stream: Iterable[str], *, at_start: bool) -> Iterator[str]:
    """Yield lines without line endings, dropping a BOM on the stream's first line."""
    for line in stream:
        line = strip_line_ending(line)
        if at_start:
            line = _strip_bom(line)
            at_start = False
        yield line


class LineCursor:
    """Forward-only cursor over the lines of a subtitle file.

    Keeps track of the 1-based number of the most recently read line so
    errors can point at it.
    """

    def __init__(self, lines: Iterable[str], *, line_no: int = 0) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.line_no = line_no

    def next_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        line = next(self._lines, None)
        if line is None:
            return None
        self.line_no += 1
        return line


# ============================================================
# Entries
# ============================================================

def read_entry(cursor: LineCursor) -> Optional[Entry]:
    """Read one cue (index line, timing line, text block) from the cursor.

    Returns:
        The parsed Entry, or None if the input ended before an index line

    Raises:
        InvalidIndex: If the index line is not a plain number
        TruncatedEntry: If the input ends right after the index line
        InvalidRange: If the timing line is not "<start> --> <end>"
        MalformedTimestamp: If either timestamp is invalid
        EmptyText: If the cue has no text lines
    """
    line = cursor.next_line()
    if line is None:
        return None
    if not _DIGITS_RE.fullmatch(line):
        raise InvalidIndex(f"invalid index: {line!r}", line_no=cursor.line_no)
    index = int(line)

    line = cursor.next_line()
    if line is None:
        raise TruncatedEntry(f"no timing line after index {index}", line_no=cursor.line_no)
    parts = line.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        raise InvalidRange(f"invalid time range: {line!r}", line_no=cursor.line_no)
    try:
        start = parse_timestamp(parts[0])
        end = parse_timestamp(parts[1])
    except MalformedTimestamp as e:
        e.line_no = cursor.line_no
        raise

    lines: List[str] = []
    while True:
        line = cursor.next_line()
        if not line:
            break
        lines.append(line)

    if not lines:
        raise EmptyText(f"no text for entry {index}", line_no=cursor.line_no)
    return Entry(index=index, start=start, end=end, text="\n".join(lines))


# ============================================================
# Files
# ============================================================

def parse_offset_directive(line: str) -> Optional[int]:
    """Return the offset carried by an "OFFSET:<n>" line, or None.

    Raises:
        MalformedOffset: If the line has the prefix but no signed integer
    """
    if not line.startswith(OFFSET_PREFIX):
        return None
    value = line[len(OFFSET_PREFIX):]
    if not _SIGNED_INT_RE.fullmatch(value):
        raise MalformedOffset(f"invalid offset directive: {line!r}", line_no=1)
    return int(value)


def _seekable(source: IO[str]) -> bool:
    seekable = getattr(source, "seekable", None)
    return bool(seekable and seekable())


def _parse_lines(source: IO[str]) -> ParsedSubtitles:
    first = source.readline()
    offset = None
    if first:
        offset = parse_offset_directive(_strip_bom(strip_line_ending(first)))

    if offset is not None:
        rest: Iterable[str] = source
        line_no = 1
    elif _seekable(source):
        source.seek(0)
        rest = source
        line_no = 0
    else:
        rest = itertools.chain([first], source) if first else source
        line_no = 0

    cursor = LineCursor(_iter_lines(rest, at_start=line_no == 0), line_no=line_no)

    entries: List[Entry] = []
    try:
        while True:
            entry = read_entry(cursor)
            if entry is None:
                break
            entries.append(entry)
    except SubtitleParseError as e:
        e.entries = tuple(entries)
        raise

    return ParsedSubtitles(entries=tuple(entries), offset=offset)


def parse(source: Source, *, encoding: str = "utf-8-sig") -> ParsedSubtitles:
    """Parse a whole subtitle stream.

    The first line is checked for an OFFSET directive. If it is not one, the
    stream is rewound (or, when it cannot seek, the line is replayed) so the
    line is read again as the first index line.

    Binary streams are decoded as a whole before they are split into lines,
    so multi-byte encodings such as UTF-16 work. The binary stream is left
    open for the caller to close.

    Args:
        source: Binary or text stream positioned at the start of the file
        encoding: Encoding used to decode binary streams

    Returns:
        ParsedSubtitles with the entries in file order

    Raises:
        SubtitleParseError: On the first malformed cue. The exception's
            ``entries`` attribute holds the cues parsed before it.
    """
    if isinstance(source, io.TextIOBase):
        return _parse_lines(source)

    text = io.TextIOWrapper(source, encoding=encoding, errors="replace", newline="")
    try:
        return _parse_lines(text)
    finally:
        text.detach()


def parse_text(text: str) -> ParsedSubtitles:
    """Parse subtitle content that is already in memory."""
    return parse(io.StringIO(text))
