"""Error hierarchy and error logging helpers."""

from .handling import classify_error, log_error  # noqa: F401
from .internal import (  # noqa: F401
    InternalError,
    MalformedCommandArgsError,
    MalformedNumberError,
    MissingRequiredFieldError,
    ParsingError,
    TagStringError,
    UnknownEventIdError,
    UnknownKeyError,
)

__all__ = [
    "InternalError",
    "ParsingError",
    "UnknownKeyError",
    "MalformedNumberError",
    "MalformedCommandArgsError",
    "UnknownEventIdError",
    "MissingRequiredFieldError",
    "TagStringError",
    "classify_error",
    "log_error",
]
