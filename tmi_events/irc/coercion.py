"""Per-field coercion of raw tag strings into typed values."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from enum import Enum
from types import MappingProxyType

from ..config import DecoderSettings, get_settings
from ..diagnostics import DiagnosticCollector, DiagnosticKind, report
from ..errors import MalformedNumberError
from .escape import decode_tag_value
from .values import (
    Badge,
    Emote,
    EmoteRange,
    GiftTheme,
    GoalType,
    Milestone,
    SubPlan,
    TagValue,
    UnknownValue,
    UserType,
)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# True only for the exact value "1".
BOOL_FIELDS = frozenset(
    {
        "emote_only",
        "first_message",
        "followers_only",
        "is_mod",
        "is_sub",
        "is_turbo",
        "is_vip",
        "paid_system_message",
        "returning_chatter",
        "share_streak",
        "subs_only",
        "unique_only",
    }
)

# Gift-related flags Twitch sends as "true"/"false".
TRUE_FLAG_FIELDS = frozenset({"gifted", "prior_gifter_anon"})

INT_FIELDS = frozenset(
    {
        "amount",
        "ban_duration",
        "bits",
        "bits_badge_tier",
        "channel_points",
        "cumulative_months",
        "cumulative_total",
        "exponent",
        "gift_months",
        "goal_contributions",
        "goal_current",
        "goal_target",
        "months",
        "multimonth_duration",
        "multimonth_tenure",
        "promo_gift_total",
        "slow_delay",
        "streak_months",
        "total",
        "viewer_count",
    }
)

BADGE_FIELDS = frozenset({"badges", "badge_info"})

# field -> (enum type, value used when the tag is absent or empty)
ENUM_FIELDS: Mapping[str, tuple[type[Enum], Enum | None]] = MappingProxyType(
    {
        "plan": (SubPlan, None),
        "user_type": (UserType, UserType.NORMAL),
        "gift_theme": (GiftTheme, None),
        "milestone": (Milestone, None),
        "goal_type": (GoalType, None),
    }
)


def parse_int(key: str, raw: str) -> int:
    """Parse a base-10 signed integer or raise ``MalformedNumberError``."""
    if not _INTEGER.fullmatch(raw):
        raise MalformedNumberError(key, raw)
    return int(raw)


def parse_timestamp(key: str, raw: str) -> datetime:
    """Convert integer epoch milliseconds into an aware UTC datetime."""
    millis = parse_int(key, raw)
    try:
        return _EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        raise MalformedNumberError(key, raw) from None


def parse_badges(key: str, raw: str) -> tuple[Badge, ...]:
    """Parse ``name/version,name/version`` keeping the wire order."""
    badges: list[Badge] = []
    for item in raw.split(","):
        if not item:
            continue
        name, sep, version = item.partition("/")
        if not sep:
            raise MalformedNumberError(key, raw)
        badges.append(Badge(name, parse_int(key, version)))
    return tuple(badges)


def parse_emotes(key: str, raw: str) -> tuple[Emote, ...]:
    """Parse ``id:start-stop,start-stop/id:start-stop`` keeping grouping and order."""
    emotes: list[Emote] = []
    for group in raw.split("/"):
        if not group:
            continue
        emote_id, sep, ranges_text = group.partition(":")
        if not sep:
            raise MalformedNumberError(key, raw)
        ranges: list[EmoteRange] = []
        for span in ranges_text.split(","):
            start, dash, stop = span.partition("-")
            if not dash:
                raise MalformedNumberError(key, raw)
            ranges.append(EmoteRange(parse_int(key, start), parse_int(key, stop)))
        emotes.append(Emote(emote_id, tuple(ranges)))
    return tuple(emotes)


def coerce_enum(
    field: str,
    key: str,
    raw: str | None,
    diagnostics: DiagnosticCollector | None = None,
    settings: DecoderSettings | None = None,
) -> Enum | UnknownValue | None:
    enum_type, absent = ENUM_FIELDS[field]
    if not raw:
        return absent
    try:
        return enum_type(raw)
    except ValueError:
        report(
            diagnostics,
            DiagnosticKind.UNKNOWN_ENUM,
            key,
            raw,
            field=field,
            settings=settings,
        )
        return UnknownValue(key=key, value=raw, field=field)


_STRUCTURED: Mapping[str, Callable[[str, str], TagValue]] = MappingProxyType(
    {
        "timestamp": parse_timestamp,
        "badges": parse_badges,
        "badge_info": parse_badges,
        "emotes": parse_emotes,
    }
)


def coerce(
    field: str,
    raw: str | None,
    *,
    key: str | None = None,
    diagnostics: DiagnosticCollector | None = None,
    settings: DecoderSettings | None = None,
) -> TagValue:
    """Coerce a raw tag value into the type declared for ``field``.

    ``raw`` is ``None`` when the tag was present without a value.

    Raises:
        MalformedNumberError: If an integer, timestamp, badge or emote value
            does not have the expected numeric shape.
    """
    key = key or field
    if field in BOOL_FIELDS:
        return raw == "1"
    if field in TRUE_FLAG_FIELDS:
        return raw == "true"
    if field in ENUM_FIELDS:
        return coerce_enum(field, key, raw, diagnostics, settings)
    if field in BADGE_FIELDS or field == "emotes":
        return _STRUCTURED[field](key, raw) if raw else ()
    if raw is None:
        return None
    if field in INT_FIELDS:
        return parse_int(key, raw)
    if field == "timestamp":
        return parse_timestamp(key, raw)
    crlf = (settings or get_settings()).decode_crlf_escapes
    return decode_tag_value(raw, crlf=crlf)


__all__ = [
    "BOOL_FIELDS",
    "TRUE_FLAG_FIELDS",
    "INT_FIELDS",
    "BADGE_FIELDS",
    "ENUM_FIELDS",
    "coerce",
    "coerce_enum",
    "parse_int",
    "parse_timestamp",
    "parse_badges",
    "parse_emotes",
]
