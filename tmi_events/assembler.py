"""Assemble a typed event from a tag field map and command fields."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import MissingRequiredFieldError
from .events import EVENT_FIELDS, EVENT_TYPES, Event, EventKind
from .irc.commands import CommandFields


def merge_fields(
    field_map: Mapping[str, Any],
    command_fields: CommandFields | None = None,
    synthesized: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge tag fields, command fields and synthesized fields, later wins."""
    merged = dict(field_map)
    if command_fields is not None:
        merged.update(command_fields.as_fields())
    if synthesized:
        merged.update(synthesized)
    return merged


def assemble(
    field_map: Mapping[str, Any],
    command_fields: CommandFields | None,
    kind: EventKind,
    synthesized: Mapping[str, Any] | None = None,
) -> Event:
    """Build the event of ``kind``.

    Keys the kind does not declare are dropped; declared fields that are
    missing take the class default.

    Raises:
        MissingRequiredFieldError: If a field the kind requires is missing.
    """
    cls = EVENT_TYPES[kind]
    merged = merge_fields(field_map, command_fields, synthesized)
    for name in cls.required_fields:
        if merged.get(name) is None:
            raise MissingRequiredFieldError(kind.value, name)
    declared = EVENT_FIELDS[kind]
    return cls(**{name: value for name, value in merged.items() if name in declared})


__all__ = ["assemble", "merge_fields"]
