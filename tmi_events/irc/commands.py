"""Command-specific parsing of IRC argument text.

Each parser takes the argument portion of a line (``<prefix> <COMMAND>
<args...>``, the prefix with or without its leading ``:``) and splits it on
the fixed delimiters of that command.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ..constants import CTCP_ACTION_PREFIX, CTCP_DELIMITER
from ..errors import MalformedCommandArgsError


@dataclass(frozen=True, slots=True)
class CommandFields:
    command: str
    channel: str | None = None
    user_login: str | None = None
    recipient_login: str | None = None
    message: str | None = None
    action: bool = False

    def as_fields(self) -> dict[str, Any]:
        """Fields to merge into the tag field map (unset values left out)."""
        merged: dict[str, Any] = {}
        for name in ("channel", "user_login", "recipient_login", "message"):
            value = getattr(self, name)
            if value is not None:
                merged[name] = value
        return merged


def _split(text: str, sep: str, command: str) -> tuple[str, str]:
    head, found, tail = text.partition(sep)
    if not found:
        raise MalformedCommandArgsError(command, text, sep)
    return head, tail


def _after_command(args: str, command: str) -> tuple[str, str]:
    """Return ``(prefix, rest)`` around the command keyword."""
    text = args[1:] if args.startswith(":") else args
    if text.startswith(f"{command} "):
        return "", text[len(command) + 1 :]
    return _split(text, f" {command} ", command)


def _sender(prefix: str, command: str) -> str:
    sender, _ = _split(prefix, "!", command)
    return sender


def strip_action(message: str) -> tuple[str, bool]:
    """Strip CTCP ``\\x01ACTION ...\\x01`` framing; return ``(text, is_action)``."""
    if not message.startswith(CTCP_ACTION_PREFIX):
        return message, False
    body = message[len(CTCP_ACTION_PREFIX) :]
    if body.endswith(CTCP_DELIMITER):
        body = body[:-1]
    return body, True


def parse_privmsg(args: str) -> CommandFields:
    """Parse a PRIVMSG.

    Examples:
      "shyryan!johndoe@johndoe.tmi.twitch.tv PRIVMSG #shyryan :Hello World"
          -> channel "#shyryan", user_login "shyryan", message "Hello World"
    """
    prefix, rest = _after_command(args, "PRIVMSG")
    channel, message = _split(rest, " :", "PRIVMSG")
    message, action = strip_action(message)
    return CommandFields(
        command="PRIVMSG",
        channel=channel,
        user_login=_sender(prefix, "PRIVMSG"),
        message=message,
        action=action,
    )


def parse_whisper(args: str) -> CommandFields:
    """Parse a WHISPER.

    Examples:
      "johndoe!johndoe@johndoe.tmi.twitch.tv WHISPER janedoe :Hello World"
          -> user_login "johndoe", recipient_login "janedoe", message "Hello World"
    """
    prefix, rest = _after_command(args, "WHISPER")
    recipient, message = _split(rest, " :", "WHISPER")
    return CommandFields(
        command="WHISPER",
        user_login=_sender(prefix, "WHISPER"),
        recipient_login=recipient,
        message=message,
    )


def parse_usernotice(args: str) -> CommandFields:
    """Parse a USERNOTICE; the user's own message after ``:`` is optional."""
    _, rest = _after_command(args, "USERNOTICE")
    channel, _, message = rest.partition(" :")
    return CommandFields(command="USERNOTICE", channel=channel, message=message or None)


def parse_notice(args: str) -> CommandFields:
    _, rest = _after_command(args, "NOTICE")
    channel, message = _split(rest, " :", "NOTICE")
    return CommandFields(command="NOTICE", channel=channel, message=message)


def parse_roomstate(args: str) -> CommandFields:
    _, channel = _after_command(args, "ROOMSTATE")
    return CommandFields(command="ROOMSTATE", channel=channel.strip())


def parse_clearchat(args: str) -> CommandFields:
    """Parse a CLEARCHAT; without a target user the whole room was cleared."""
    _, rest = _after_command(args, "CLEARCHAT")
    channel, _, user = rest.partition(" :")
    return CommandFields(command="CLEARCHAT", channel=channel, user_login=user or None)


def parse_clearmsg(args: str) -> CommandFields:
    _, rest = _after_command(args, "CLEARMSG")
    channel, message = _split(rest, " :", "CLEARMSG")
    return CommandFields(command="CLEARMSG", channel=channel, message=message)


COMMAND_PARSERS: Mapping[str, Callable[[str], CommandFields]] = MappingProxyType(
    {
        "PRIVMSG": parse_privmsg,
        "WHISPER": parse_whisper,
        "USERNOTICE": parse_usernotice,
        "NOTICE": parse_notice,
        "ROOMSTATE": parse_roomstate,
        "CLEARCHAT": parse_clearchat,
        "CLEARMSG": parse_clearmsg,
    }
)


__all__ = [
    "CommandFields",
    "COMMAND_PARSERS",
    "strip_action",
    "parse_privmsg",
    "parse_whisper",
    "parse_usernotice",
    "parse_notice",
    "parse_roomstate",
    "parse_clearchat",
    "parse_clearmsg",
]
