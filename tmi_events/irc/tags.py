"""Parse Twitch IRC tag strings into a canonical field map."""

from __future__ import annotations

from ..config import DecoderSettings, get_settings
from ..diagnostics import DiagnosticCollector, DiagnosticKind, report
from ..errors import MalformedNumberError, TagStringError, UnknownKeyError
from .coercion import coerce
from .tag_fields import canonical_name
from .values import TagValue, UnknownValue

FieldMap = dict[str, TagValue]


def split_tag_pairs(tag_string: str) -> list[tuple[str, str | None]]:
    """Split ``@key=val;key=val`` into ``(key, value)`` pairs.

    Empty values map to ``None``. A pair without ``=`` is a key with no
    value. Empty segments (e.g. a trailing ``;``) are skipped.

    Raises:
        TagStringError: If a segment has an empty key.
    """
    body = tag_string[1:] if tag_string.startswith("@") else tag_string
    pairs: list[tuple[str, str | None]] = []
    if not body:
        return pairs
    for segment in body.split(";"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        if not key:
            raise TagStringError(
                f"Tag segment without a key: {segment!r}",
                data={"segment": segment},
            )
        pairs.append((key, value or None))
    return pairs


def parse_tags(
    tag_string: str,
    diagnostics: DiagnosticCollector | None = None,
    settings: DecoderSettings | None = None,
) -> FieldMap:
    """Parse a tag string into a map of canonical field names to typed values.

    Unsupported keys are reported and left out of the map. Values that fail
    coercion are kept as ``UnknownValue`` and reported. When two raw keys
    resolve to the same field the later one wins.

    Examples:
      "@badge-info=subscriber/47;color=#5DA5D9" ->
          {"badge_info": (Badge("subscriber", 47),), "color": "#5DA5D9"}

    Raises:
        TagStringError: If the tag string is structurally broken.
    """
    settings = settings or get_settings()
    fields: FieldMap = {}
    for key, raw in split_tag_pairs(tag_string):
        try:
            field = canonical_name(key)
        except UnknownKeyError:
            report(
                diagnostics,
                DiagnosticKind.UNSUPPORTED_TAG,
                key,
                raw,
                settings=settings,
            )
            continue
        try:
            fields[field] = coerce(
                field, raw, key=key, diagnostics=diagnostics, settings=settings
            )
        except MalformedNumberError:
            report(
                diagnostics,
                DiagnosticKind.MALFORMED_NUMBER,
                key,
                raw,
                field=field,
                settings=settings,
            )
            fields[field] = UnknownValue(key=key, value=raw, field=field)
    return fields


__all__ = ["FieldMap", "parse_tags", "split_tag_pairs"]
