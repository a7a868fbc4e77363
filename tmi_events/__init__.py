"""Decode Twitch chat (TMI) IRC lines into typed events."""

from .config import DecoderSettings, get_settings  # noqa: F401
from .describe import describe_event  # noqa: F401
from .diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind  # noqa: F401
from .errors import ParsingError, TagStringError  # noqa: F401
from .events import EVENT_TYPES, Event, EventKind  # noqa: F401
from .irc.values import PERMANENT  # noqa: F401
from .pipeline import decode_event, decode_line  # noqa: F401

__version__ = "0.3.0"

__all__ = [
    "DecoderSettings",
    "get_settings",
    "describe_event",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "ParsingError",
    "TagStringError",
    "EVENT_TYPES",
    "Event",
    "EventKind",
    "PERMANENT",
    "decode_event",
    "decode_line",
]
