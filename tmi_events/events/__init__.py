"""The closed union of decoded events.

``EVENT_TYPES`` maps every ``EventKind`` to exactly one frozen dataclass;
``EVENT_FIELDS`` holds the field names each of those classes declares.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from types import MappingProxyType

from .base import ChannelEvent, Event, EventKind, Unrecognized
from .chat import (
    ChatAction,
    ChatMessageEvent,
    Cheer,
    Cheermote,
    Mention,
    Message,
    UserEvent,
    Whisper,
)
from .eventsub import (
    AdBreak,
    CharityCampaignDonate,
    CharityCampaignProgress,
    CharityCampaignStart,
    CharityCampaignStop,
    CharityDonation,
    DropEntitlementGrant,
    ExtensionBitTransaction,
    GoalBegin,
    GoalEnd,
    GoalProgress,
    GuestStarGuest,
    GuestStarSessionBegin,
    GuestStarSessionEnd,
    GuestStarSettingsUpdate,
    HypeTrainBegin,
    HypeTrainEnd,
    HypeTrainProgress,
    PollBegin,
    PollEnd,
    PollProgress,
    PredictionBegin,
    PredictionEnd,
    PredictionProgress,
    RewardAdd,
    RewardRedemption,
    RewardRedemptionUpdate,
    RewardRemove,
    StreamOffline,
    StreamOnline,
    SubEnd,
    SubMessage,
    UserAuthGrant,
    UserAuthRevoke,
    UserUpdate,
)
from .moderation import (
    Ban,
    ChannelUpdate,
    Clear,
    ClearUserMessages,
    EmoteMode,
    MessageDelete,
    ModeratorAdd,
    ModeratorRemove,
    SettingUpdate,
    ShieldModeBegin,
    ShieldModeEnd,
    Unban,
)
from .usernotice import (
    Announcement,
    BitsBadgeTier,
    CommunitySubGift,
    GiftPaidUpgrade,
    PayItForward,
    PrimePaidUpgrade,
    Raid,
    Resub,
    Sub,
    SubGift,
    Unraid,
    UserNoticeEvent,
    ViewerMilestone,
)

_EVENT_CLASSES: tuple[type[Event], ...] = (
    Message,
    ChatAction,
    Cheer,
    Whisper,
    Mention,
    Cheermote,
    ChannelUpdate,
    EmoteMode,
    SettingUpdate,
    Ban,
    Unban,
    Clear,
    ClearUserMessages,
    MessageDelete,
    ModeratorAdd,
    ModeratorRemove,
    ShieldModeBegin,
    ShieldModeEnd,
    Announcement,
    BitsBadgeTier,
    Sub,
    Resub,
    SubGift,
    CommunitySubGift,
    GiftPaidUpgrade,
    PrimePaidUpgrade,
    PayItForward,
    Raid,
    Unraid,
    ViewerMilestone,
    SubMessage,
    SubEnd,
    RewardAdd,
    RewardRemove,
    RewardRedemption,
    RewardRedemptionUpdate,
    PollBegin,
    PollProgress,
    PollEnd,
    PredictionBegin,
    PredictionProgress,
    PredictionEnd,
    CharityDonation,
    CharityCampaignDonate,
    CharityCampaignProgress,
    CharityCampaignStart,
    CharityCampaignStop,
    GoalBegin,
    GoalProgress,
    GoalEnd,
    HypeTrainBegin,
    HypeTrainProgress,
    HypeTrainEnd,
    GuestStarSessionBegin,
    GuestStarSessionEnd,
    GuestStarGuest,
    GuestStarSettingsUpdate,
    AdBreak,
    StreamOnline,
    StreamOffline,
    DropEntitlementGrant,
    ExtensionBitTransaction,
    UserAuthGrant,
    UserAuthRevoke,
    UserUpdate,
    Unrecognized,
)

EVENT_TYPES: Mapping[EventKind, type[Event]] = MappingProxyType(
    {cls.kind: cls for cls in _EVENT_CLASSES}
)

EVENT_FIELDS: Mapping[EventKind, frozenset[str]] = MappingProxyType(
    {kind: frozenset(f.name for f in fields(cls)) for kind, cls in EVENT_TYPES.items()}
)


def event_type(kind: EventKind) -> type[Event]:
    return EVENT_TYPES[kind]


__all__ = [
    "EVENT_TYPES",
    "EVENT_FIELDS",
    "event_type",
    "Event",
    "EventKind",
    "ChannelEvent",
    "UserEvent",
    "ChatMessageEvent",
    "UserNoticeEvent",
    *(cls.__name__ for cls in _EVENT_CLASSES),
]
