"""Decoder configuration."""

from __future__ import annotations

from .model import DecoderSettings

_DEFAULT_SETTINGS: DecoderSettings | None = None


def get_settings() -> DecoderSettings:
    """Return the process-wide default settings, built once from the environment."""
    global _DEFAULT_SETTINGS  # noqa: PLW0603
    if _DEFAULT_SETTINGS is None:
        _DEFAULT_SETTINGS = DecoderSettings.from_env()
    return _DEFAULT_SETTINGS


__all__ = ["DecoderSettings", "get_settings"]
