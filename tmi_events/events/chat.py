"""Chat message events decoded from PRIVMSG and WHISPER lines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..irc.values import Badge, Emote, UserType
from .base import ChannelEvent, Event, EventKind


@dataclass(frozen=True, slots=True, kw_only=True)
class UserEvent(ChannelEvent):
    """Fields Twitch attaches to every user-originated chat line."""

    id: str | None = None
    badge_info: tuple[Badge, ...] = ()
    badges: tuple[Badge, ...] = ()
    color: str | None = None
    display_name: str | None = None
    emotes: tuple[Emote, ...] = ()
    login: str | None = None
    message: str | None = None
    is_mod: bool = False
    is_sub: bool = False
    is_turbo: bool = False
    is_vip: bool = False
    timestamp: datetime | None = None
    user_id: str | None = None
    user_type: UserType = UserType.NORMAL


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatMessageEvent(UserEvent):
    user_login: str | None = None
    first_message: bool = False
    returning_chatter: bool = False
    reward_id: str | None = None
    client_nonce: str | None = None
    flags: str | None = None
    # Replies
    parent_id: str | None = None
    parent_message: str | None = None
    parent_user_id: str | None = None
    parent_user_login: str | None = None
    parent_user_display_name: str | None = None
    thread_parent_id: str | None = None
    thread_parent_user_id: str | None = None
    thread_parent_user_login: str | None = None
    thread_parent_user_display_name: str | None = None
    # Paid pinned messages
    amount: int | None = None
    currency: str | None = None
    exponent: int | None = None
    level: str | None = None
    paid_system_message: bool = False

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class Message(ChatMessageEvent):
    kind: ClassVar[EventKind] = EventKind.MESSAGE

    highlighted: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class ChatAction(ChatMessageEvent):
    """A ``/me`` message; ``message`` holds the text without CTCP framing."""

    kind: ClassVar[EventKind] = EventKind.CHAT_ACTION


@dataclass(frozen=True, slots=True, kw_only=True)
class Cheer(ChatMessageEvent):
    kind: ClassVar[EventKind] = EventKind.CHEER

    bits: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Whisper(Event):
    kind: ClassVar[EventKind] = EventKind.WHISPER

    message_id: str | None = None
    thread_id: str | None = None
    badges: tuple[Badge, ...] = ()
    color: str | None = None
    display_name: str | None = None
    emotes: tuple[Emote, ...] = ()
    is_turbo: bool = False
    user_id: str | None = None
    user_login: str | None = None
    user_type: UserType = UserType.NORMAL
    recipient_login: str | None = None
    message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Mention(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.MENTION

    user_login: str | None = None
    sender_login: str | None = None
    message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Cheermote(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.CHEERMOTE

    prefix: str | None = None
    bits: int | None = None
    tier: int | None = None


__all__ = [
    "UserEvent",
    "ChatMessageEvent",
    "Message",
    "ChatAction",
    "Cheer",
    "Whisper",
    "Mention",
    "Cheermote",
]
