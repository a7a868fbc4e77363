"""Resolve wire event identifiers and command keywords to event kinds."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, NamedTuple

from ..config import DecoderSettings
from ..diagnostics import DiagnosticCollector, DiagnosticKind, report
from ..errors import UnknownEventIdError
from ..events.base import EventKind
from .commands import CommandFields
from .values import PERMANENT


class Resolution(NamedTuple):
    """A resolved kind plus fields the wire event implies but does not carry."""

    kind: EventKind
    synthesized: Mapping[str, Any] = MappingProxyType({})


def _fold(kind: EventKind, **fields: Any) -> Resolution:
    return Resolution(kind, MappingProxyType(fields))


# msg-id values that map 1:1 onto a kind.
EVENT_IDS: Mapping[str, EventKind] = MappingProxyType(
    {
        "announcement": EventKind.ANNOUNCEMENT,
        "anongiftpaidupgrade": EventKind.GIFT_PAID_UPGRADE,
        "bitsbadgetier": EventKind.BITS_BADGE_TIER,
        "communitypayforward": EventKind.PAY_IT_FORWARD,
        "giftpaidupgrade": EventKind.GIFT_PAID_UPGRADE,
        "primepaidupgrade": EventKind.PRIME_PAID_UPGRADE,
        "raid": EventKind.RAID,
        "resub": EventKind.RESUB,
        "standardpayforward": EventKind.PAY_IT_FORWARD,
        "sub": EventKind.SUB,
        "subgift": EventKind.SUB_GIFT,
        "submysterygift": EventKind.COMMUNITY_SUB_GIFT,
        "unraid": EventKind.UNRAID,
        "viewermilestone": EventKind.VIEWER_MILESTONE,
        # Seen once in the wild and never reproduced.
        "msg_emoteonly": EventKind.UNRECOGNIZED,
    }
)

# Wire events that are variants of another kind with extra fields.
FOLDED_EVENT_IDS: Mapping[str, Resolution] = MappingProxyType(
    {
        "emote_only_on": _fold(EventKind.EMOTE_MODE, emote_only=True),
        "emote_only_off": _fold(EventKind.EMOTE_MODE, emote_only=False),
        "highlighted-message": _fold(EventKind.MESSAGE, highlighted=True),
        "followers_on": _fold(EventKind.SETTING_UPDATE, setting="followers_only", enabled=True),
        "followers_on_zero": _fold(EventKind.SETTING_UPDATE, setting="followers_only", enabled=True),
        "followers_off": _fold(EventKind.SETTING_UPDATE, setting="followers_only", enabled=False),
        "subs_on": _fold(EventKind.SETTING_UPDATE, setting="subs_only", enabled=True),
        "subs_off": _fold(EventKind.SETTING_UPDATE, setting="subs_only", enabled=False),
        "r9k_on": _fold(EventKind.SETTING_UPDATE, setting="unique_only", enabled=True),
        "r9k_off": _fold(EventKind.SETTING_UPDATE, setting="unique_only", enabled=False),
        "slow_on": _fold(EventKind.SETTING_UPDATE, setting="slow", enabled=True),
        "slow_off": _fold(EventKind.SETTING_UPDATE, setting="slow", enabled=False),
    }
)

# Kind selected by the command keyword when no msg-id decides it.
COMMAND_KINDS: Mapping[str, EventKind] = MappingProxyType(
    {
        "PRIVMSG": EventKind.MESSAGE,
        "WHISPER": EventKind.WHISPER,
        "ROOMSTATE": EventKind.CHANNEL_UPDATE,
        "CLEARCHAT": EventKind.BAN,
        "CLEARMSG": EventKind.MESSAGE_DELETE,
    }
)

SUPPORTED_COMMANDS: frozenset[str] = frozenset(COMMAND_KINDS) | {"USERNOTICE", "NOTICE"}


def resolve_event_id(event_id: str) -> Resolution:
    """Resolve a ``msg-id`` value.

    Examples:
      "resub" -> Resolution(EventKind.RESUB, {})
      "emote_only_on" -> Resolution(EventKind.EMOTE_MODE, {"emote_only": True})

    Raises:
        UnknownEventIdError: If the identifier is not mapped.
    """
    folded = FOLDED_EVENT_IDS.get(event_id)
    if folded is not None:
        return folded
    try:
        return Resolution(EVENT_IDS[event_id])
    except KeyError:
        raise UnknownEventIdError(event_id) from None


def default_kind(command: str | None) -> EventKind | None:
    """Return the kind implied by the command keyword alone, if any."""
    if command is None:
        return None
    return COMMAND_KINDS.get(command.upper())


def classify(
    command: str,
    fields: Mapping[str, Any],
    command_fields: CommandFields,
    diagnostics: DiagnosticCollector | None = None,
    settings: DecoderSettings | None = None,
) -> Resolution:
    """Pick the kind for a parsed line.

    A ``msg-id`` decides first. An unknown ``msg-id`` falls back to the command
    default when the command has one. PRIVMSG bodies framed as CTCP ACTION
    become ``ChatAction``, PRIVMSG with bits becomes ``Cheer``. CLEARCHAT without
    a target user becomes ``Clear``, and without a duration a permanent ``Ban``.

    Raises:
        UnknownEventIdError: If neither the ``msg-id`` nor the command decides.
    """
    event_id = fields.get("event")
    fallback = default_kind(command)
    if isinstance(event_id, str) and event_id:
        try:
            resolution = resolve_event_id(event_id)
        except UnknownEventIdError:
            report(
                diagnostics,
                DiagnosticKind.UNKNOWN_EVENT_ID,
                command,
                event_id,
                field="event",
                settings=settings,
            )
            if fallback is None:
                raise UnknownEventIdError(event_id, command) from None
            resolution = Resolution(fallback)
    elif fallback is not None:
        resolution = Resolution(fallback)
    else:
        report(
            diagnostics,
            DiagnosticKind.UNKNOWN_EVENT_ID,
            command,
            None,
            field="event",
            settings=settings,
        )
        raise UnknownEventIdError(None, command)

    if command == "PRIVMSG" and resolution.kind is EventKind.MESSAGE:
        if command_fields.action:
            return Resolution(EventKind.CHAT_ACTION)
        if fields.get("bits") is not None:
            return Resolution(EventKind.CHEER)
    if command == "CLEARCHAT" and resolution.kind is EventKind.BAN:
        if command_fields.user_login is None:
            return Resolution(EventKind.CLEAR)
        if fields.get("ban_duration") is None:
            return _fold(EventKind.BAN, ban_duration=PERMANENT)
    return resolution


__all__ = [
    "Resolution",
    "classify",
    "EVENT_IDS",
    "FOLDED_EVENT_IDS",
    "COMMAND_KINDS",
    "SUPPORTED_COMMANDS",
    "resolve_event_id",
    "default_kind",
]
