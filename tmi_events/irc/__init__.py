"""IRC decoding subsystem.

Tag unescaping, the tag field table, value coercion, tag string parsing,
event kind resolution and command argument parsing for Twitch IRC.
"""

from .commands import COMMAND_PARSERS, CommandFields  # noqa: F401
from .escape import decode_tag_value  # noqa: F401
from .parser import RawLine, command_keyword, split_raw_line  # noqa: F401
from .resolver import Resolution, default_kind, resolve_event_id  # noqa: F401
from .tag_fields import SUPPORTED_TAGS, TAG_FIELDS, canonical_name  # noqa: F401
from .tags import FieldMap, parse_tags  # noqa: F401

__all__ = [
    "COMMAND_PARSERS",
    "CommandFields",
    "decode_tag_value",
    "RawLine",
    "command_keyword",
    "split_raw_line",
    "Resolution",
    "default_kind",
    "resolve_event_id",
    "SUPPORTED_TAGS",
    "TAG_FIELDS",
    "canonical_name",
    "FieldMap",
    "parse_tags",
]
