"""
Configuration constants for the tmi-events decoder.

Each constant can be overridden by setting an environment variable with the
same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean flag from an environment variable.

    Accepts ``1/true/yes/on`` and ``0/false/no/off`` (case-insensitive);
    anything else falls back to the default with a warning.
    """
    value = os.getenv(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    print(f"Warning: Invalid boolean value for {name}='{value}', using default {default}")
    return default


# Tag escape handling
TMI_EVENTS_DECODE_CRLF = _get_env_bool(
    "TMI_EVENTS_DECODE_CRLF", False
)  # Also decode \r and \n tag escapes (off: pass them through verbatim)

# Diagnostics side channel
TMI_EVENTS_LOG_DIAGNOSTICS = _get_env_bool(
    "TMI_EVENTS_LOG_DIAGNOSTICS", True
)  # Emit a WARNING log line for each diagnostic
TMI_EVENTS_MAX_DIAGNOSTICS = _get_env_int(
    "TMI_EVENTS_MAX_DIAGNOSTICS", 1000
)  # Records retained per DiagnosticCollector (oldest dropped first)

# Wire protocol
DEFAULT_SERVER_PREFIX = "tmi.twitch.tv"
CTCP_DELIMITER = "\x01"
CTCP_ACTION_PREFIX = f"{CTCP_DELIMITER}ACTION "
