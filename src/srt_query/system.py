#!/usr/bin/env python3
"""System utilities for SRT Query.

This module provides:
- Preflight checks on the subtitle file path
- Loading a subtitle file from disk
- Terminal detection for standard input
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Tuple

from .models import ParsedSubtitles
from .parser import parse


# ============================================================
# Input Files
# ============================================================

def preflight_input(input_path: Path) -> Tuple[bool, str]:
    """Check that a subtitle file exists and is a regular file.

    Args:
        input_path: Subtitle file path

    Returns:
        Tuple of (success: bool, error_message: str)
        If success is True, error_message will be empty
    """
    if not input_path.exists():
        return False, f"Input file not found: {input_path}"
    if input_path.is_dir():
        return False, f"Input path is a directory (expected subtitle file): {input_path}"
    return True, ""


def load_subtitles(path: Path, *, encoding: str = "utf-8-sig") -> ParsedSubtitles:
    """Open and parse a subtitle file.

    The file handle is closed whether parsing succeeds or fails.

    Raises:
        OSError: If the file cannot be opened or read
        SubtitleParseError: If the file content is malformed
    """
    with open(path, "rb") as fh:
        return parse(fh, encoding=encoding)


# ============================================================
# Terminal Detection
# ============================================================

def stdin_is_interactive(stream: Any) -> bool:
    """Return True if the stream is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False
