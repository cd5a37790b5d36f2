"""SRT Query - look up which subtitle is on screen at a given time.

This package provides a strict SubRip (.srt) parser, a tolerant time
lookup over the parsed cues, and the srtq command-line tool.
"""
from .cli import main
from .models import TOOL_VERSION

__version__ = TOOL_VERSION
__all__ = ["main", "__version__"]
