"""Event kinds and the common base of every event variant."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class EventKind(Enum):
    # Chat (PRIVMSG / WHISPER)
    MESSAGE = "message"
    CHAT_ACTION = "chat_action"
    CHEER = "cheer"
    WHISPER = "whisper"
    MENTION = "mention"
    CHEERMOTE = "cheermote"
    # Room state and moderation (ROOMSTATE / NOTICE / CLEARCHAT / CLEARMSG)
    CHANNEL_UPDATE = "channel_update"
    EMOTE_MODE = "emote_mode"
    SETTING_UPDATE = "setting_update"
    BAN = "ban"
    UNBAN = "unban"
    CLEAR = "clear"
    CLEAR_USER_MESSAGES = "clear_user_messages"
    MESSAGE_DELETE = "message_delete"
    MODERATOR_ADD = "moderator_add"
    MODERATOR_REMOVE = "moderator_remove"
    SHIELD_MODE_BEGIN = "shield_mode_begin"
    SHIELD_MODE_END = "shield_mode_end"
    # USERNOTICE
    ANNOUNCEMENT = "announcement"
    BITS_BADGE_TIER = "bits_badge_tier"
    SUB = "sub"
    RESUB = "resub"
    SUB_GIFT = "sub_gift"
    COMMUNITY_SUB_GIFT = "community_sub_gift"
    GIFT_PAID_UPGRADE = "gift_paid_upgrade"
    PRIME_PAID_UPGRADE = "prime_paid_upgrade"
    PAY_IT_FORWARD = "pay_it_forward"
    RAID = "raid"
    UNRAID = "unraid"
    VIEWER_MILESTONE = "viewer_milestone"
    # Subscriptions outside chat
    SUB_MESSAGE = "sub_message"
    SUB_END = "sub_end"
    # Channel points
    REWARD_ADD = "reward_add"
    REWARD_REMOVE = "reward_remove"
    REWARD_REDEMPTION = "reward_redemption"
    REWARD_REDEMPTION_UPDATE = "reward_redemption_update"
    # Polls and predictions
    POLL_BEGIN = "poll_begin"
    POLL_PROGRESS = "poll_progress"
    POLL_END = "poll_end"
    PREDICTION_BEGIN = "prediction_begin"
    PREDICTION_PROGRESS = "prediction_progress"
    PREDICTION_END = "prediction_end"
    # Charity
    CHARITY_DONATION = "charity_donation"
    CHARITY_CAMPAIGN_DONATE = "charity_campaign_donate"
    CHARITY_CAMPAIGN_PROGRESS = "charity_campaign_progress"
    CHARITY_CAMPAIGN_START = "charity_campaign_start"
    CHARITY_CAMPAIGN_STOP = "charity_campaign_stop"
    # Goals and hype trains
    GOAL_BEGIN = "goal_begin"
    GOAL_PROGRESS = "goal_progress"
    GOAL_END = "goal_end"
    HYPE_TRAIN_BEGIN = "hype_train_begin"
    HYPE_TRAIN_PROGRESS = "hype_train_progress"
    HYPE_TRAIN_END = "hype_train_end"
    # Guest star
    GUEST_STAR_SESSION_BEGIN = "guest_star_session_begin"
    GUEST_STAR_SESSION_END = "guest_star_session_end"
    GUEST_STAR_GUEST = "guest_star_guest"
    GUEST_STAR_SETTINGS_UPDATE = "guest_star_settings_update"
    # Stream, ads, extensions, drops
    AD_BREAK = "ad_break"
    STREAM_ONLINE = "stream_online"
    STREAM_OFFLINE = "stream_offline"
    DROP_ENTITLEMENT_GRANT = "drop_entitlement_grant"
    EXTENSION_BIT_TRANSACTION = "extension_bit_transaction"
    # Users
    USER_AUTH_GRANT = "user_auth_grant"
    USER_AUTH_REVOKE = "user_auth_revoke"
    USER_UPDATE = "user_update"
    # Fallback
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True, kw_only=True)
class Event:
    """Base of every decoded event.

    Each subclass binds exactly one ``EventKind`` and declares its fields
    with defaults, so any subset of fields can be supplied. A field whose
    tag failed coercion holds an ``UnknownValue`` instead of its declared type.
    """

    kind: ClassVar[EventKind]
    # Fields assembly must be able to fill; empty for every decoded kind.
    required_fields: ClassVar[frozenset[str]] = frozenset()


@dataclass(frozen=True, slots=True, kw_only=True)
class ChannelEvent(Event):
    channel: str | None = None
    channel_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Unrecognized(Event):
    """A line the decoder could not classify, carrying its raw inputs."""

    kind: ClassVar[EventKind] = EventKind.UNRECOGNIZED
    required_fields: ClassVar[frozenset[str]] = frozenset({"args"})

    command: str | None = None
    tag_string: str | None = None
    args: str | None = None
    reason: str | None = None


__all__ = ["EventKind", "Event", "ChannelEvent", "Unrecognized"]
