"""Room state and moderation events (ROOMSTATE, NOTICE, CLEARCHAT, CLEARMSG)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..irc.values import Permanent
from .base import ChannelEvent, EventKind


@dataclass(frozen=True, slots=True, kw_only=True)
class ChannelUpdate(ChannelEvent):
    """Room settings; ``None`` means the line did not mention that setting."""

    kind: ClassVar[EventKind] = EventKind.CHANNEL_UPDATE

    emote_only: bool | None = None
    followers_only: bool | None = None
    subs_only: bool | None = None
    unique_only: bool | None = None
    slow_delay: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class EmoteMode(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.EMOTE_MODE

    emote_only: bool = False
    message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SettingUpdate(ChannelEvent):
    """A room mode toggled through a NOTICE, e.g. ``followers_on``."""

    kind: ClassVar[EventKind] = EventKind.SETTING_UPDATE

    setting: str | None = None
    enabled: bool | None = None
    message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Ban(ChannelEvent):
    """Twitch chat ban.

    A ban with a duration is a timeout. A permanent ban carries the
    ``PERMANENT`` sentinel, never ``None`` or ``0``.
    """

    kind: ClassVar[EventKind] = EventKind.BAN

    ban_duration: int | Permanent | None = None
    user_login: str | None = None
    target_user_id: str | None = None
    timestamp: datetime | None = None

    @property
    def is_permanent(self) -> bool:
        return self.ban_duration is Permanent.PERMANENT


@dataclass(frozen=True, slots=True, kw_only=True)
class Unban(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.UNBAN

    user_id: str | None = None
    user_login: str | None = None
    moderator_login: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Clear(ChannelEvent):
    """All messages in the room were cleared."""

    kind: ClassVar[EventKind] = EventKind.CLEAR

    timestamp: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ClearUserMessages(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.CLEAR_USER_MESSAGES

    target_user_id: str | None = None
    user_login: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class MessageDelete(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.MESSAGE_DELETE

    login: str | None = None
    message: str | None = None
    target_message_id: str | None = None
    timestamp: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ModeratorAdd(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.MODERATOR_ADD

    user_id: str | None = None
    user_login: str | None = None
    display_name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ModeratorRemove(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.MODERATOR_REMOVE

    user_id: str | None = None
    user_login: str | None = None
    display_name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ShieldModeBegin(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.SHIELD_MODE_BEGIN

    moderator_login: str | None = None
    timestamp: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ShieldModeEnd(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.SHIELD_MODE_END

    moderator_login: str | None = None
    timestamp: datetime | None = None


__all__ = [
    "ChannelUpdate",
    "EmoteMode",
    "SettingUpdate",
    "Ban",
    "Unban",
    "Clear",
    "ClearUserMessages",
    "MessageDelete",
    "ModeratorAdd",
    "ModeratorRemove",
    "ShieldModeBegin",
    "ShieldModeEnd",
]
