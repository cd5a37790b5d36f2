#!/usr/bin/env python3
"""Data models for SRT Query.

This module contains all data classes used throughout the application:
- TOOL_VERSION: Version constant
- ResolvedConfig: Configuration settings dataclass
- Entry: Represents a subtitle cue with timing and text
- ParsedSubtitles: The entries of one file plus its offset directive
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


# ============================================================
# Versioning
# ============================================================

TOOL_VERSION = "0.2.0"


# ============================================================
# Configuration
# ============================================================

DEFAULT_PROMPT = "Input timestamp: "


@dataclass
class ResolvedConfig:
    """Resolved configuration for loading subtitles and answering queries.

    The offset here is the value before any OFFSET directive found in the
    subtitle file itself is applied.
    """
    # global offset in milliseconds
    offset: int = 0

    # interactive mode
    prompt: str = DEFAULT_PROMPT

    # file decoding
    encoding: str = "utf-8-sig"


# ============================================================
# Subtitle Data Structures
# ============================================================

@dataclass(frozen=True)
class Entry:
    """Represents a single subtitle cue.

    Attributes:
        index: Sequence number as declared in the file
        start: Start time in milliseconds
        end: End time in milliseconds
        text: Display text, lines joined with newlines
    """
    index: int
    start: int
    end: int
    text: str


@dataclass(frozen=True)
class ParsedSubtitles:
    """Result of parsing one subtitle file.

    Attributes:
        entries: Entries in the order they appear in the file
        offset: Value of the leading OFFSET directive, or None if absent
    """
    entries: Tuple[Entry, ...]
    offset: Optional[int] = None
