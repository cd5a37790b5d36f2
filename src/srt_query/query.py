#!/usr/bin/env python3
"""Time lookups against parsed subtitle entries."""
from __future__ import annotations

import re
from typing import Iterable, List

from .errors import MalformedQuery
from .models import Entry


# slack applied on both sides of every display interval
TOLERANCE_MS = 1000

_DIGITS_RE = re.compile(r"[0-9]+")


def parse_query(value: str) -> int:
    """Parse a playback position given as "mm:ss" into milliseconds.

    Minutes are not limited to 59, so "75:00" is an hour and a quarter.

    Raises:
        MalformedQuery: If the value is not two colon-separated numbers
    """
    parts = value.split(":")
    if len(parts) != 2 or not all(_DIGITS_RE.fullmatch(p) for p in parts):
        raise MalformedQuery(value)
    minutes, seconds = (int(p) for p in parts)
    return minutes * 60_000 + seconds * 1000


def find_active(
    entries: Iterable[Entry],
    query_ms: int,
    offset: int = 0,
    tolerance_ms: int = TOLERANCE_MS,
) -> List[Entry]:
    """Return every entry showing at query_ms, in their original order.

    An entry matches when its offset-shifted interval, widened by
    tolerance_ms on each side, contains the query time. Entries may overlap
    or be out of order; all of them are scanned.

    Args:
        entries: Parsed entries
        query_ms: Playback position in milliseconds
        offset: Global offset added to every start/end
        tolerance_ms: Slack on each side of the interval

    Returns:
        Matching entries (possibly empty)
    """
    return [
        e for e in entries
        if e.end + offset + tolerance_ms >= query_ms
        and e.start + offset - tolerance_ms <= query_ms
    ]
