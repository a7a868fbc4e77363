"""One-line human summaries of decoded events."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .events import (
    Ban,
    ChatAction,
    Cheer,
    Clear,
    EmoteMode,
    Event,
    Message,
    MessageDelete,
    Raid,
    SettingUpdate,
    Unrecognized,
    Whisper,
)
from .irc.values import UnknownValue
from .utils import format_duration


def describe_event(event: Event) -> str:
    """Return a short log line for an event.

    Examples:
      Message -> "[#chan] <login> text"
      Ban (permanent) -> "BANNED [#chan] - <login>"
      Ban (timeout) -> "TIMEOUT [#chan] - <login> for 10m 0s"
    """
    match event:
        case Message(highlighted=True):
            return f"[{event.channel}] ✨ <{event.user_login}> {event.message}"
        case Message():
            return f"[{event.channel}] <{event.user_login}> {event.message}"
        case ChatAction():
            return f"[{event.channel}] * <{event.user_login}> {event.message}"
        case Cheer():
            return f"[{event.channel}] <{event.user_login}> cheered {event.bits}: {event.message}"
        case Whisper():
            return f"WHISPER - <{event.user_login}> {event.message}"
        case Ban() if event.is_permanent:
            return f"BANNED [{event.channel}] - <{event.user_login}>"
        case Ban():
            duration = event.ban_duration
            shown = format_duration(duration) if isinstance(duration, int) else duration
            return f"TIMEOUT [{event.channel}] - <{event.user_login}> for {shown}"
        case Clear():
            return f"CLEAR [{event.channel}]"
        case MessageDelete():
            return f"DELETED [{event.channel}] - <{event.login}> {event.message}"
        case EmoteMode():
            state = "on" if event.emote_only else "off"
            return f"[{event.channel}] emote-only {state}"
        case SettingUpdate():
            state = "on" if event.enabled else "off"
            return f"[{event.channel}] {event.setting} {state}"
        case Raid():
            return f"RAID [{event.channel}] - {event.display_name} with {event.viewer_count} viewers"
        case Unrecognized():
            return f"[{event.command or '?'}] {event.args!r}"
        case _:
            return _describe_generic(event)


def _describe_generic(event: Event) -> str:
    channel = getattr(event, "channel", None)
    system_message = getattr(event, "system_message", None)
    label = event.kind.value.upper()
    if system_message:
        return f"{label} [{channel}] {system_message}"
    return f"{label} [{channel}]" if channel else label


def json_default(value: Any) -> Any:
    """``default=`` hook for ``json.dumps`` over ``event_to_dict`` output."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UnknownValue):
        return {"unknown": value.value, "key": value.key}
    return str(value)


def event_to_dict(event: Event) -> dict[str, Any]:
    """Plain dict of an event, suitable for ``json.dumps(..., default=...)``."""
    if not is_dataclass(event):  # pragma: no cover
        raise TypeError(f"Not an event: {event!r}")
    data: dict[str, Any] = {"kind": event.kind.value}
    data.update({f.name: getattr(event, f.name) for f in fields(event)})
    return data


__all__ = ["describe_event", "event_to_dict", "json_default"]
