#!/usr/bin/env python3
"""Configuration management for SRT Query.

This module handles configuration loading and merging. Settings are
resolved in this order, later sources winning:
defaults -> JSON config file -> command-line flags -> OFFSET directive
found in the subtitle file.
"""
from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any, Dict, Optional

from .models import ParsedSubtitles, ResolvedConfig


# ============================================================
# Configuration Loading
# ============================================================

def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Load configuration from a JSON file.

    Args:
        path: Path to JSON config file, or None to skip loading

    Returns:
        Dictionary of configuration values, or empty dict if path is None

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config file isn't a valid JSON object
    """
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object at top-level.")
    if "offset" in data and (isinstance(data["offset"], bool) or not isinstance(data["offset"], int)):
        raise ValueError(f"Config 'offset' must be an integer number of milliseconds, got {data['offset']!r}")
    for key in ("prompt", "encoding"):
        if key in data and not isinstance(data[key], str):
            raise ValueError(f"Config '{key}' must be a string, got {data[key]!r}")
    return data


def apply_overrides(base: ResolvedConfig, overrides: Dict[str, Any]) -> ResolvedConfig:
    """Apply configuration overrides to a base configuration.

    Args:
        base: Base ResolvedConfig instance
        overrides: Dictionary of configuration values to override

    Returns:
        New ResolvedConfig instance with overrides applied
    """
    d = dataclasses.asdict(base)
    for k, v in overrides.items():
        if k in d:
            d[k] = v
    return ResolvedConfig(**d)


# ============================================================
# Resolution
# ============================================================

def resolve_config(
    cfg_file: Dict[str, Any],
    *,
    offset: Optional[int] = None,
    prompt: Optional[str] = None,
    encoding: Optional[str] = None,
) -> ResolvedConfig:
    """Build the configuration from defaults, a config file and CLI flags.

    Flags left as None do not override anything.
    """
    cfg = apply_overrides(ResolvedConfig(), cfg_file)
    cli = {"offset": offset, "prompt": prompt, "encoding": encoding}
    return apply_overrides(cfg, {k: v for k, v in cli.items() if v is not None})


def effective_offset(cfg: ResolvedConfig, parsed: ParsedSubtitles) -> int:
    """Return the offset to use for queries against a parsed file.

    An OFFSET directive in the file replaces the configured value.
    """
    if parsed.offset is not None:
        return parsed.offset
    return cfg.offset
