"""Event kinds Twitch only delivers over EventSub.

The IRC decoder never produces these, but they belong to the same closed
union so a consumer can handle chat and EventSub events with one dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..irc.values import GoalType, SubPlan
from .base import ChannelEvent, Event, EventKind


@dataclass(frozen=True, slots=True, kw_only=True)
class SubMessage(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.SUB_MESSAGE

    user_id: str | None = None
    user_login: str | None = None
    message: str | None = None
    plan: SubPlan | None = None
    cumulative_months: int | None = None
    streak_months: int | None = None
    multimonth_duration: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SubEnd(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.SUB_END

    user_id: str | None = None
    user_login: str | None = None
    plan: SubPlan | None = None
    gifted: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class RewardEvent(ChannelEvent):
    reward_id: str | None = None
    title: str | None = None
    cost: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RewardAdd(RewardEvent):
    kind: ClassVar[EventKind] = EventKind.REWARD_ADD


@dataclass(frozen=True, slots=True, kw_only=True)
class RewardRemove(RewardEvent):
    kind: ClassVar[EventKind] = EventKind.REWARD_REMOVE


@dataclass(frozen=True, slots=True, kw_only=True)
class RewardRedemption(RewardEvent):
    kind: ClassVar[EventKind] = EventKind.REWARD_REDEMPTION

    redemption_id: str | None = None
    user_id: str | None = None
    user_login: str | None = None
    message: str | None = None
    status: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class RewardRedemptionUpdate(RewardEvent):
    kind: ClassVar[EventKind] = EventKind.REWARD_REDEMPTION_UPDATE

    redemption_id: str | None = None
    user_id: str | None = None
    user_login: str | None = None
    message: str | None = None
    status: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PollEvent(ChannelEvent):
    poll_id: str | None = None
    title: str | None = None
    choices: tuple[str, ...] = ()
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PollBegin(PollEvent):
    kind: ClassVar[EventKind] = EventKind.POLL_BEGIN

    ends_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PollProgress(PollEvent):
    kind: ClassVar[EventKind] = EventKind.POLL_PROGRESS

    ends_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PollEnd(PollEvent):
    kind: ClassVar[EventKind] = EventKind.POLL_END

    status: str | None = None
    ended_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PredictionEvent(ChannelEvent):
    prediction_id: str | None = None
    title: str | None = None
    outcomes: tuple[str, ...] = ()
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PredictionBegin(PredictionEvent):
    kind: ClassVar[EventKind] = EventKind.PREDICTION_BEGIN

    locks_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PredictionProgress(PredictionEvent):
    kind: ClassVar[EventKind] = EventKind.PREDICTION_PROGRESS

    locks_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PredictionEnd(PredictionEvent):
    kind: ClassVar[EventKind] = EventKind.PREDICTION_END

    status: str | None = None
    winning_outcome_id: str | None = None
    ended_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CharityEvent(ChannelEvent):
    campaign_id: str | None = None
    charity_name: str | None = None
    currency: str | None = None
    exponent: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CharityDonation(CharityEvent):
    kind: ClassVar[EventKind] = EventKind.CHARITY_DONATION

    user_id: str | None = None
    user_login: str | None = None
    display_name: str | None = None
    amount: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CharityCampaignDonate(CharityEvent):
    kind: ClassVar[EventKind] = EventKind.CHARITY_CAMPAIGN_DONATE

    user_id: str | None = None
    user_login: str | None = None
    amount: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CharityCampaignProgress(CharityEvent):
    kind: ClassVar[EventKind] = EventKind.CHARITY_CAMPAIGN_PROGRESS

    current_amount: int | None = None
    target_amount: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CharityCampaignStart(CharityEvent):
    kind: ClassVar[EventKind] = EventKind.CHARITY_CAMPAIGN_START

    current_amount: int | None = None
    target_amount: int | None = None
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CharityCampaignStop(CharityEvent):
    kind: ClassVar[EventKind] = EventKind.CHARITY_CAMPAIGN_STOP

    current_amount: int | None = None
    target_amount: int | None = None
    stopped_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GoalEvent(ChannelEvent):
    goal_id: str | None = None
    goal_type: GoalType | None = None
    goal_description: str | None = None
    goal_current: int | None = None
    goal_target: int | None = None
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GoalBegin(GoalEvent):
    kind: ClassVar[EventKind] = EventKind.GOAL_BEGIN


@dataclass(frozen=True, slots=True, kw_only=True)
class GoalProgress(GoalEvent):
    kind: ClassVar[EventKind] = EventKind.GOAL_PROGRESS


@dataclass(frozen=True, slots=True, kw_only=True)
class GoalEnd(GoalEvent):
    kind: ClassVar[EventKind] = EventKind.GOAL_END

    achieved: bool = False
    ended_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HypeTrainEvent(ChannelEvent):
    train_id: str | None = None
    level: int | None = None
    total: int | None = None
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HypeTrainBegin(HypeTrainEvent):
    kind: ClassVar[EventKind] = EventKind.HYPE_TRAIN_BEGIN

    progress: int | None = None
    goal: int | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HypeTrainProgress(HypeTrainEvent):
    kind: ClassVar[EventKind] = EventKind.HYPE_TRAIN_PROGRESS

    progress: int | None = None
    goal: int | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class HypeTrainEnd(HypeTrainEvent):
    kind: ClassVar[EventKind] = EventKind.HYPE_TRAIN_END

    ended_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GuestStarSessionBegin(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.GUEST_STAR_SESSION_BEGIN

    session_id: str | None = None
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GuestStarSessionEnd(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.GUEST_STAR_SESSION_END

    session_id: str | None = None
    ended_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GuestStarGuest(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.GUEST_STAR_GUEST

    session_id: str | None = None
    slot_id: str | None = None
    user_id: str | None = None
    user_login: str | None = None
    state: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GuestStarSettingsUpdate(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.GUEST_STAR_SETTINGS_UPDATE

    slot_count: int | None = None
    layout: str | None = None
    browser_source_audio_enabled: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class AdBreak(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.AD_BREAK

    broadcaster_id: str | None = None
    broadcaster_name: str | None = None
    duration_seconds: int | None = None
    is_automatic: bool = False
    requester_id: str | None = None
    requester_login: str | None = None
    requester_name: str | None = None
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StreamOnline(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.STREAM_ONLINE

    stream_id: str | None = None
    stream_type: str | None = None
    started_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StreamOffline(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.STREAM_OFFLINE


@dataclass(frozen=True, slots=True, kw_only=True)
class DropEntitlementGrant(Event):
    kind: ClassVar[EventKind] = EventKind.DROP_ENTITLEMENT_GRANT

    user_id: str | None = None
    user_login: str | None = None
    benefit_id: str | None = None
    campaign_id: str | None = None
    game_id: str | None = None
    timestamp: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExtensionBitTransaction(ChannelEvent):
    kind: ClassVar[EventKind] = EventKind.EXTENSION_BIT_TRANSACTION

    user_id: str | None = None
    user_login: str | None = None
    bits: int | None = None
    product_name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UserAuthGrant(Event):
    kind: ClassVar[EventKind] = EventKind.USER_AUTH_GRANT

    client_id: str | None = None
    user_id: str | None = None
    user_login: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UserAuthRevoke(Event):
    kind: ClassVar[EventKind] = EventKind.USER_AUTH_REVOKE

    client_id: str | None = None
    user_id: str | None = None
    user_login: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class UserUpdate(Event):
    kind: ClassVar[EventKind] = EventKind.USER_UPDATE

    user_id: str | None = None
    user_login: str | None = None
    display_name: str | None = None
    description: str | None = None


__all__ = [
    "SubMessage",
    "SubEnd",
    "RewardAdd",
    "RewardRemove",
    "RewardRedemption",
    "RewardRedemptionUpdate",
    "PollBegin",
    "PollProgress",
    "PollEnd",
    "PredictionBegin",
    "PredictionProgress",
    "PredictionEnd",
    "CharityDonation",
    "CharityCampaignDonate",
    "CharityCampaignProgress",
    "CharityCampaignStart",
    "CharityCampaignStop",
    "GoalBegin",
    "GoalProgress",
    "GoalEnd",
    "HypeTrainBegin",
    "HypeTrainProgress",
    "HypeTrainEnd",
    "GuestStarSessionBegin",
    "GuestStarSessionEnd",
    "GuestStarGuest",
    "GuestStarSettingsUpdate",
    "AdBreak",
    "StreamOnline",
    "StreamOffline",
    "DropEntitlementGrant",
    "ExtensionBitTransaction",
    "UserAuthGrant",
    "UserAuthRevoke",
    "UserUpdate",
]
