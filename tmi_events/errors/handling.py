from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    InternalError,
    MalformedCommandArgsError,
    MalformedNumberError,
    MissingRequiredFieldError,
    ParsingError,
    TagStringError,
    UnknownEventIdError,
    UnknownKeyError,
)


def classify_error(error: Exception) -> str:
    """Return the structured-logging category for an exception."""
    if isinstance(error, TagStringError):
        return "tag_string"
    if isinstance(error, UnknownKeyError):
        return "unsupported_tag"
    if isinstance(error, MalformedNumberError):
        return "malformed_number"
    if isinstance(error, MalformedCommandArgsError):
        return "malformed_command"
    if isinstance(error, UnknownEventIdError):
        return "unknown_event"
    if isinstance(error, MissingRequiredFieldError):
        return "missing_field"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    The error is categorised by type, merged with its own structured
    ``data`` (for ``InternalError`` subclasses) and routed through the
    structured logger so repeated failures are aggregated.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict[str, object] = {}
    if isinstance(error, InternalError):
        merged.update(error.data)
    if context:
        merged.update(context)
    log_structured_error(
        error_type=classify_error(error),
        message=f"{message}: {error}",
        exception=error,
        context=merged or None,
    )


__all__ = ["classify_error", "log_error"]
