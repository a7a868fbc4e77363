"""Centralized internal error hierarchy.

Every failure the decoding pipeline can signal is a ``ParsingError``. Only
``TagStringError`` is meant to reach callers of ``decode_event``; the others
are caught inside the pipeline and degrade into diagnostics or an
``Unrecognized`` event.

Classes:
  InternalError              – Base for all internal errors.
  ParsingError               – Wire data could not be decoded.
  UnknownKeyError            – Raw tag key missing from the field table.
  MalformedNumberError       – Integer tag content is not base-10.
  MalformedCommandArgsError  – Command argument text lacks a delimiter.
  UnknownEventIdError        – No EventKind resolves for a wire id.
  MissingRequiredFieldError  – Assembly cannot fill a mandatory field.
  TagStringError             – Tag string is not ``key=value;...`` text.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ParsingError(InternalError):
    """Exception raised when wire data cannot be decoded."""


class UnknownKeyError(ParsingError):
    """Raised when a raw tag key is not part of the registered field table."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unsupported tag key: {key!r}", data={"key": key})
        self.key = key


class MalformedNumberError(ParsingError):
    """Raised when an integer tag value is not a base-10 signed integer."""

    def __init__(self, key: str, value: str | None) -> None:
        super().__init__(
            f"Malformed number for {key!r}: {value!r}",
            data={"key": key, "value": value},
        )
        self.key = key
        self.value = value


class MalformedCommandArgsError(ParsingError):
    """Raised when command argument text is missing an expected delimiter."""

    def __init__(self, command: str, args: str, expected: str) -> None:
        super().__init__(
            f"Malformed {command} arguments: missing {expected!r}",
            data={"command": command, "args": args, "expected": expected},
        )
        self.command = command
        self.args_text = args


class UnknownEventIdError(ParsingError):
    """Raised when a wire event identifier maps to no EventKind."""

    def __init__(self, event_id: str | None, command: str | None = None) -> None:
        super().__init__(
            f"Unknown event id {event_id!r}"
            + (f" for {command}" if command else ""),
            data={"event_id": event_id, "command": command},
        )
        self.event_id = event_id
        self.command = command


class MissingRequiredFieldError(ParsingError):
    """Raised when assembly cannot populate a schema-required field."""

    def __init__(self, kind: str, field_name: str) -> None:
        super().__init__(
            f"{kind} requires field {field_name!r}",
            data={"kind": kind, "field": field_name},
        )
        self.field_name = field_name


class TagStringError(ParsingError):
    """Raised when a tag string is not well-formed ``key=value;...`` text."""


__all__ = [
    "InternalError",
    "ParsingError",
    "UnknownKeyError",
    "MalformedNumberError",
    "MalformedCommandArgsError",
    "UnknownEventIdError",
    "MissingRequiredFieldError",
    "TagStringError",
]
