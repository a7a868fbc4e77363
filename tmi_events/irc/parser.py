"""Raw IRC line splitting (framing helper for the decoder)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawLine:
    raw: str
    tag_string: str
    args: str
    command: str | None


def command_keyword(args: str) -> str | None:
    """Return the command keyword of ``<prefix> <COMMAND> <args...>`` text.

    The prefix is recognised by a leading ``:`` or a ``!``/``.`` in the first
    token (``nick!user@host`` or ``tmi.twitch.tv``); otherwise the first token
    is the command.
    """
    parts = args.split(" ", 2)
    if not parts or not parts[0]:
        return None
    first = parts[0]
    if first.startswith(":") or "!" in first or "." in first:
        return parts[1].upper() if len(parts) > 1 and parts[1] else None
    return first.upper()


def split_raw_line(raw_line: str) -> RawLine:
    """Split a full line into its tag string and argument text.

    Examples:
      "@color=red :nick!u@h PRIVMSG #room :hi"
          -> tag_string "@color=red", args "nick!u@h PRIVMSG #room :hi"
    """
    line = raw_line.rstrip("\r\n")
    tag_string = ""
    rest = line
    if rest.startswith("@"):
        tag_string, _, rest = rest.partition(" ")
    rest = rest.lstrip(" ")
    if rest.startswith(":"):
        rest = rest[1:]
    return RawLine(raw=line, tag_string=tag_string, args=rest, command=command_keyword(rest))


__all__ = ["RawLine", "command_keyword", "split_raw_line"]
