from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .. import constants


class DecoderSettings(BaseModel):
    """Runtime settings for the decoding pipeline.

    Settings are frozen: one instance may be shared by any number of
    concurrent decode calls.

    Attributes:
        decode_crlf_escapes: Also decode ``\\r`` and ``\\n`` tag escapes.
        log_diagnostics: Emit a log line for each diagnostic.
        max_diagnostics: Records a collector keeps before dropping the oldest.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    decode_crlf_escapes: bool = False
    log_diagnostics: bool = True
    max_diagnostics: int = Field(default=1000, ge=1)

    @classmethod
    def from_env(cls) -> DecoderSettings:
        """Build settings from the environment-backed constants."""
        return cls(
            decode_crlf_escapes=constants.TMI_EVENTS_DECODE_CRLF,
            log_diagnostics=constants.TMI_EVENTS_LOG_DIAGNOSTICS,
            max_diagnostics=max(1, constants.TMI_EVENTS_MAX_DIAGNOSTICS),
        )


__all__ = ["DecoderSettings"]
