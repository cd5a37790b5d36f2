#!/usr/bin/env python3
"""Logging utilities for SRT Query.

Standard output is reserved for subtitle text and the interactive prompt,
so everything except log() goes to stderr.
"""
from __future__ import annotations

import sys


# ============================================================
# Logging
# ============================================================

def log(msg: str, *, quiet: bool = False) -> None:
    """Print a log message to stdout unless quiet mode is enabled.

    Args:
        msg: Message to log
        quiet: If True, suppress output
    """
    if not quiet:
        print(msg, flush=True)


def warn(msg: str, *, quiet: bool = False) -> None:
    """Print a warning message to stderr unless quiet mode is enabled.

    Args:
        msg: Warning message to display
        quiet: If True, suppress output
    """
    if not quiet:
        print(f"WARNING: {msg}", file=sys.stderr, flush=True)


def die(msg: str, code: int = 1) -> int:
    """Print an error message to stderr and return an exit code.

    Args:
        msg: Error message to display
        code: Exit code to return (default: 1)

    Returns:
        The exit code provided
    """
    print(f"ERROR: {msg}", file=sys.stderr, flush=True)
    return code


def debug(msg: str, *, enabled: bool) -> None:
    """Print a diagnostic message to stderr when debugging is enabled."""
    if enabled:
        print(f"DEBUG: {msg}", file=sys.stderr, flush=True)


def format_duration(ms: int) -> str:
    """Format a playback position in milliseconds as H:MM:SS or M:SS.

    Args:
        ms: Position in milliseconds

    Returns:
        Formatted string (e.g., "1:23:45" or "5:30")
    """
    seconds = max(0, int(ms) // 1000)
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    if h > 0:
        return f"{h:d}:{m:02d}:{s:02d}"
    return f"{m:d}:{s:02d}"
