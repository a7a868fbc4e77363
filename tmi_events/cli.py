"""Replay raw Twitch IRC lines through the decoder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from .config import get_settings
from .describe import describe_event, event_to_dict, json_default
from .diagnostics import DiagnosticCollector
from .errors import TagStringError, log_error
from .logging_config import LoggerConfigurator
from .logs.logger import logger
from .pipeline import decode_line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmi-events",
        description="Decode raw Twitch IRC lines into typed events",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File of raw IRC lines (default: stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per event instead of a summary line",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a diagnostics summary after the last line",
    )
    return parser


def replay(
    lines: Iterable[str],
    out: TextIO,
    *,
    as_json: bool = False,
    diagnostics: DiagnosticCollector | None = None,
) -> int:
    """Decode every non-empty line, writing one output line per event.

    Returns the number of decoded events. Lines with a broken tag string
    are logged and skipped.
    """
    settings = get_settings()
    count = 0
    for line_no, raw in enumerate(lines, start=1):
        raw = raw.rstrip("\r\n")
        if not raw.strip():
            continue
        try:
            event = decode_line(raw, diagnostics, settings)
        except TagStringError as e:
            log_error("Skipping line with malformed tags", e, context={"line_no": line_no})
            logger.log_event("app", "skip_line", level=logging.WARNING, line_no=line_no)
            continue
        count += 1
        if as_json:
            out.write(json.dumps(event_to_dict(event), default=json_default) + "\n")
        else:
            out.write(describe_event(event) + "\n")
    return count


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    LoggerConfigurator().configure()
    diagnostics = DiagnosticCollector()
    source = args.file or "stdin"
    logger.log_event("app", "start", source=source)
    try:
        if args.file:
            with open(args.file, encoding="utf-8") as f:
                count = replay(f, sys.stdout, as_json=args.json, diagnostics=diagnostics)
        else:
            count = replay(sys.stdin, sys.stdout, as_json=args.json, diagnostics=diagnostics)
    except OSError as e:
        log_error("Cannot read input", e, context={"source": source})
        return 1
    logger.log_event("app", "finish", count=count)
    if args.summary:
        for line in diagnostics.summary_lines() or ["no diagnostics"]:
            print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
