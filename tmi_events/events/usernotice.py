"""Events Twitch announces through USERNOTICE lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..irc.values import GiftTheme, GoalType, Milestone, SubPlan
from .base import EventKind
from .chat import UserEvent


@dataclass(frozen=True, slots=True, kw_only=True)
class UserNoticeEvent(UserEvent):
    system_message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SubscriptionEvent(UserNoticeEvent):
    plan: SubPlan | None = None
    plan_name: str | None = None
    months: int | None = None
    cumulative_months: int | None = None
    streak_months: int | None = None
    share_streak: bool = False
    multimonth_duration: int | None = None
    multimonth_tenure: int | None = None
    gifted: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class Sub(SubscriptionEvent):
    kind: ClassVar[EventKind] = EventKind.SUB


@dataclass(frozen=True, slots=True, kw_only=True)
class Resub(SubscriptionEvent):
    kind: ClassVar[EventKind] = EventKind.RESUB


@dataclass(frozen=True, slots=True, kw_only=True)
class GiftEvent(UserNoticeEvent):
    plan: SubPlan | None = None
    plan_name: str | None = None
    origin_id: str | None = None
    community_gift_id: str | None = None
    cumulative_total: int | None = None
    gift_theme: GiftTheme | None = None
    goal_type: GoalType | None = None
    goal_description: str | None = None
    goal_current: int | None = None
    goal_target: int | None = None
    goal_contributions: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SubGift(GiftEvent):
    kind: ClassVar[EventKind] = EventKind.SUB_GIFT

    months: int | None = None
    gift_months: int | None = None
    recipient_display_name: str | None = None
    recipient_id: str | None = None
    recipient_login: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CommunitySubGift(GiftEvent):
    """A mystery gift of ``total`` subs to the community."""

    kind: ClassVar[EventKind] = EventKind.COMMUNITY_SUB_GIFT

    total: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class GiftPaidUpgrade(UserNoticeEvent):
    kind: ClassVar[EventKind] = EventKind.GIFT_PAID_UPGRADE

    promo_gift_total: int | None = None
    promo_name: str | None = None
    sender_login: str | None = None
    sender_display_name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PrimePaidUpgrade(UserNoticeEvent):
    kind: ClassVar[EventKind] = EventKind.PRIME_PAID_UPGRADE

    plan: SubPlan | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PayItForward(UserNoticeEvent):
    kind: ClassVar[EventKind] = EventKind.PAY_IT_FORWARD

    prior_gifter_anon: bool = False
    prior_gifter_display_name: str | None = None
    prior_gifter_id: str | None = None
    prior_gifter_login: str | None = None
    recipient_display_name: str | None = None
    recipient_id: str | None = None
    recipient_login: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Raid(UserNoticeEvent):
    """An incoming raid; ``display_name``/``login`` name the raiding channel."""

    kind: ClassVar[EventKind] = EventKind.RAID

    viewer_count: int | None = None
    profile_image_url: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Unraid(UserNoticeEvent):
    kind: ClassVar[EventKind] = EventKind.UNRAID


@dataclass(frozen=True, slots=True, kw_only=True)
class ViewerMilestone(UserNoticeEvent):
    kind: ClassVar[EventKind] = EventKind.VIEWER_MILESTONE

    milestone: Milestone | None = None
    total: int | None = None
    channel_points: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Announcement(UserNoticeEvent):
    kind: ClassVar[EventKind] = EventKind.ANNOUNCEMENT

    announcement_color: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class BitsBadgeTier(UserNoticeEvent):
    kind: ClassVar[EventKind] = EventKind.BITS_BADGE_TIER

    bits_badge_tier: int | None = None


__all__ = [
    "UserNoticeEvent",
    "SubscriptionEvent",
    "Sub",
    "Resub",
    "GiftEvent",
    "SubGift",
    "CommunitySubGift",
    "GiftPaidUpgrade",
    "PrimePaidUpgrade",
    "PayItForward",
    "Raid",
    "Unraid",
    "ViewerMilestone",
    "Announcement",
    "BitsBadgeTier",
]
