#!/usr/bin/env python3
"""Command-line interface for SRT Query.

This is the main entry point for the srtq command-line tool:

    srtq [--offset N] <subtitle-file> [mm:ss]

Queries come from one of three places: the optional positional argument,
a single line piped on standard input, or an interactive prompt loop when
standard input is a terminal.
"""
from __future__ import annotations

import argparse
import sys
import traceback
from pathlib import Path
from typing import IO, List, NoReturn, Optional, Sequence

from .config import effective_offset, load_config_file, resolve_config
from .errors import MalformedQuery, SrtQueryError
from .logging_utils import debug, die, format_duration, log, warn
from .models import TOOL_VERSION, Entry, ResolvedConfig
from .parser import format_timestamp, strip_line_ending
from .query import find_active, parse_query
from .system import load_subtitles, preflight_input, stdin_is_interactive


MODE_ARGUMENT = "argument"
MODE_PIPED = "piped"
MODE_INTERACTIVE = "interactive"


# ============================================================
# Query Sources
# ============================================================

def select_mode(query_arg: Optional[str], stdin: IO[str]) -> str:
    """Decide where queries come from.

    Args:
        query_arg: Positional mm:ss argument, if given
        stdin: Standard input stream

    Returns:
        One of MODE_ARGUMENT, MODE_PIPED, MODE_INTERACTIVE
    """
    if query_arg is not None:
        return MODE_ARGUMENT
    if stdin_is_interactive(stdin):
        return MODE_INTERACTIVE
    return MODE_PIPED


def read_query_line(stdin: IO[str]) -> Optional[str]:
    """Read one query line, returning None on end of input or an empty line."""
    line = stdin.readline()
    if not line:
        return None
    line = strip_line_ending(line)
    return line or None


def print_matches(
    entries: Sequence[Entry],
    query_ms: int,
    offset: int,
    out: IO[str],
    *,
    show_debug: bool = False,
) -> int:
    """Write the text of every entry showing at query_ms. Returns the match count."""
    matches = find_active(entries, query_ms, offset)
    for e in matches:
        out.write(e.text + "\n")
    out.flush()
    debug(f"{format_duration(query_ms)}: {len(matches)} match(es)", enabled=show_debug)
    return len(matches)


def run_argument_mode(entries: Sequence[Entry], query_arg: str, offset: int, out: IO[str], *, show_debug: bool = False) -> int:
    print_matches(entries, parse_query(query_arg), offset, out, show_debug=show_debug)
    return 0


def run_piped_mode(entries: Sequence[Entry], stdin: IO[str], offset: int, out: IO[str], *, show_debug: bool = False) -> int:
    line = read_query_line(stdin)
    if line is None:
        debug("no query on standard input", enabled=show_debug)
        return 0
    print_matches(entries, parse_query(line), offset, out, show_debug=show_debug)
    return 0


def run_interactive_mode(
    entries: Sequence[Entry],
    stdin: IO[str],
    offset: int,
    out: IO[str],
    *,
    prompt: str,
    show_debug: bool = False,
) -> int:
    """Prompt for queries until an empty line or end of input.

    A malformed query ends the loop with MalformedQuery rather than
    prompting again.
    """
    while True:
        out.write(prompt)
        out.flush()
        line = read_query_line(stdin)
        if line is None:
            return 0
        print_matches(entries, parse_query(line), offset, out, show_debug=show_debug)


# ============================================================
# Run one file
# ============================================================

def run(
    *,
    input_path: Path,
    query_arg: Optional[str],
    cfg: ResolvedConfig,
    quiet: bool = False,
    show_debug: bool = False,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> int:
    """Load a subtitle file and answer queries against it.

    Args:
        input_path: Subtitle file
        query_arg: Positional mm:ss query, if given
        cfg: Resolved configuration
        quiet: Suppress non-error messages
        show_debug: Print diagnostics to stderr
        stdin: Query input stream (defaults to sys.stdin)
        stdout: Output stream (defaults to sys.stdout)

    Returns:
        Exit code (0 for success)

    Raises:
        SrtQueryError: On malformed subtitles or queries
        OSError: If the file cannot be read
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    parsed = load_subtitles(input_path, encoding=cfg.encoding)
    offset = effective_offset(cfg, parsed)
    entries = parsed.entries

    if parsed.offset is not None and cfg.offset not in (0, parsed.offset):
        warn(f"OFFSET directive in {input_path.name} ({parsed.offset} ms) replaces configured offset ({cfg.offset} ms)", quiet=quiet)
    if not entries:
        log("No entries found, exiting.", quiet=quiet)
        return 0
    debug(
        f"{len(entries)} entries, {format_timestamp(entries[0].start)} --> "
        f"{format_timestamp(entries[-1].end)}, offset {offset} ms",
        enabled=show_debug,
    )

    mode = select_mode(query_arg, stdin)
    debug(f"query mode: {mode}", enabled=show_debug)
    if mode == MODE_ARGUMENT:
        return run_argument_mode(entries, query_arg, offset, stdout, show_debug=show_debug)
    if mode == MODE_PIPED:
        return run_piped_mode(entries, stdin, offset, stdout, show_debug=show_debug)
    return run_interactive_mode(entries, stdin, offset, stdout, prompt=cfg.prompt, show_debug=show_debug)


# ============================================================
# CLI
# ============================================================

class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        raise SystemExit(die(message))


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog="srtq",
        description="Show the subtitle that is on screen at a given time (mm:ss).",
    )
    ap.add_argument("file", nargs="?", help="Subtitle (.srt) file")
    ap.add_argument("query", nargs="?", help="Playback position as mm:ss. If omitted, read from stdin.")
    ap.add_argument(
        "--offset",
        type=int,
        default=None,
        help="Global offset in milliseconds, in case the subtitle file does not exactly match the video.",
    )
    ap.add_argument("--config", default=None, help="JSON config file. CLI args override config.")
    ap.add_argument("--encoding", default=None, help="Subtitle file encoding (default: utf-8-sig).")
    ap.add_argument("--prompt", default=None, help="Prompt shown in interactive mode.")
    ap.add_argument("--quiet", action="store_true")
    ap.add_argument("--debug", action="store_true")
    ap.add_argument("--version", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the srtq command-line tool.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.version:
        print(TOOL_VERSION)
        return 0

    if not args.file:
        ap.print_usage(sys.stderr)
        return die("No subtitle file provided.")

    try:
        cfg_file = load_config_file(args.config)
    except Exception as e:
        return die(str(e))

    cfg = resolve_config(cfg_file, offset=args.offset, prompt=args.prompt, encoding=args.encoding)

    input_path = Path(args.file)
    ok, reason = preflight_input(input_path)
    if not ok:
        return die(reason)

    try:
        return run(
            input_path=input_path,
            query_arg=args.query,
            cfg=cfg,
            quiet=args.quiet,
            show_debug=args.debug,
        )
    except KeyboardInterrupt:
        return die("Interrupted by user.", 130)
    except MalformedQuery as e:
        return die(str(e))
    except SrtQueryError as e:
        return die(f"{input_path}: {e}")
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        return die(f"{input_path}: {e}")


if __name__ == "__main__":
    raise SystemExit(main())
