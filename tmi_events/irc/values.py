"""Typed tag values: badges, emote ranges, enums and the unknown wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NamedTuple, TypeAlias


class Badge(NamedTuple):
    name: str
    version: int


class EmoteRange(NamedTuple):
    """Inclusive character offsets of an emote inside a message body."""

    start: int
    stop: int


class Emote(NamedTuple):
    emote_id: str
    ranges: tuple[EmoteRange, ...]


class SubPlan(Enum):
    TIER_1 = "1000"
    TIER_2 = "2000"
    TIER_3 = "3000"
    PRIME = "Prime"


class UserType(Enum):
    NORMAL = ""
    MOD = "mod"
    ADMIN = "admin"
    GLOBAL_MOD = "global_mod"
    STAFF = "staff"


class GiftTheme(Enum):
    LOVE = "love"
    PARTY = "party"
    LUL = "lul"
    BIBLETHUMP = "biblethump"


class Milestone(Enum):
    WATCH_STREAK = "watch-streak"


class GoalType(Enum):
    SUBS = "SUBS"
    FOLLOWERS = "FOLLOWERS"


@dataclass(frozen=True, slots=True)
class UnknownValue:
    """A tag value that could not be coerced to its declared type.

    Attributes:
        key: Raw tag key the value came from.
        value: The raw (still escaped) value.
        field: Canonical field name the value was meant for.
    """

    key: str
    value: str | None
    field: str

    def __str__(self) -> str:
        return self.value or ""


class Permanent(Enum):
    """Sentinel for a ban without a duration (distinct from ``None`` and ``0``)."""

    PERMANENT = "permanent"

    def __repr__(self) -> str:
        return "PERMANENT"


PERMANENT = Permanent.PERMANENT

TagValue: TypeAlias = (
    str
    | int
    | bool
    | datetime
    | Enum
    | tuple[Badge, ...]
    | tuple[Emote, ...]
    | UnknownValue
    | None
)

__all__ = [
    "Badge",
    "EmoteRange",
    "Emote",
    "SubPlan",
    "UserType",
    "GiftTheme",
    "Milestone",
    "GoalType",
    "UnknownValue",
    "Permanent",
    "PERMANENT",
    "TagValue",
]
