"""End-to-end decoding of Twitch IRC lines into typed events."""

from __future__ import annotations

import logging

from .assembler import assemble
from .config import DecoderSettings, get_settings
from .diagnostics import DiagnosticCollector, DiagnosticKind, report
from .errors import MalformedCommandArgsError, UnknownEventIdError
from .events import Event, EventKind
from .irc.commands import COMMAND_PARSERS
from .irc.parser import command_keyword, split_raw_line
from .irc.resolver import classify
from .irc.tags import parse_tags
from .logs.logger import logger


def _unrecognized(
    command: str | None, tag_string: str, args: str, reason: str
) -> Event:
    logger.log_event(
        "events",
        "unrecognized",
        level=logging.DEBUG,
        command=command or "?",
        reason=reason,
    )
    return assemble(
        {},
        None,
        EventKind.UNRECOGNIZED,
        {"command": command, "tag_string": tag_string, "args": args, "reason": reason},
    )


def decode_event(
    tag_string: str,
    args: str,
    diagnostics: DiagnosticCollector | None = None,
    settings: DecoderSettings | None = None,
) -> Event:
    """Decode one line, given its tag string and argument text.

    Protocol drift never raises: unsupported tags and odd values become
    diagnostics, and lines that cannot be classified come back as
    ``Unrecognized`` carrying the raw inputs.

    Raises:
        TagStringError: If the tag string is structurally broken.
    """
    settings = settings or get_settings()
    fields = parse_tags(tag_string, diagnostics, settings)
    command = command_keyword(args)
    parser = COMMAND_PARSERS.get(command or "")
    if parser is None:
        return _unrecognized(command, tag_string, args, "unsupported command")
    try:
        command_fields = parser(args)
    except MalformedCommandArgsError as e:
        report(
            diagnostics,
            DiagnosticKind.MALFORMED_COMMAND,
            command,
            args,
            settings=settings,
        )
        return _unrecognized(command, tag_string, args, str(e))
    try:
        resolution = classify(command, fields, command_fields, diagnostics, settings)
    except UnknownEventIdError as e:
        return _unrecognized(command, tag_string, args, str(e))
    if resolution.kind is EventKind.UNRECOGNIZED:
        return _unrecognized(
            command, tag_string, args, f"unclassified event {fields.get('event')!r}"
        )
    return assemble(fields, command_fields, resolution.kind, resolution.synthesized)


def decode_line(
    raw_line: str,
    diagnostics: DiagnosticCollector | None = None,
    settings: DecoderSettings | None = None,
) -> Event:
    """Split a full raw IRC line and decode it.

    Raises:
        TagStringError: If the tag string is structurally broken.
    """
    line = split_raw_line(raw_line)
    return decode_event(line.tag_string, line.args, diagnostics, settings)


__all__ = ["decode_event", "decode_line"]
