"""Diagnostic side channel for protocol drift.

Unsupported tags, unknown enum strings, malformed numbers, unknown event ids
and malformed command arguments never abort decoding. Each one becomes a
``Diagnostic`` handed to the caller's ``DiagnosticCollector`` (if any) and,
when enabled, a WARNING log line.
"""

from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import dataclass
from enum import Enum

from .config import DecoderSettings, get_settings
from .logs.logger import logger


class DiagnosticKind(Enum):
    UNSUPPORTED_TAG = "unsupported_tag"
    UNKNOWN_ENUM = "unknown_enum"
    MALFORMED_NUMBER = "malformed_number"
    UNKNOWN_EVENT_ID = "unknown_event_id"
    MALFORMED_COMMAND = "malformed_args"


# (domain, action) pairs used for the log templates
_LOG_DOMAINS = {
    DiagnosticKind.UNSUPPORTED_TAG: "tags",
    DiagnosticKind.UNKNOWN_ENUM: "tags",
    DiagnosticKind.MALFORMED_NUMBER: "tags",
    DiagnosticKind.UNKNOWN_EVENT_ID: "events",
    DiagnosticKind.MALFORMED_COMMAND: "commands",
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single non-fatal decoding anomaly.

    Attributes:
        kind: What went wrong.
        key: Raw tag key, or the command keyword for command/event problems.
        value: The offending raw value.
        field: Canonical field name, when one applies.
    """

    kind: DiagnosticKind
    key: str | None
    value: str | None
    field: str | None = None

    def describe(self) -> str:
        label = self.kind.value.replace("_", " ")
        where = f"{self.key}" if self.key else "?"
        return f"{label}: {where}={self.value!r}"


class DiagnosticCollector:
    """Caller-owned collector of diagnostics.

    A collector is not shared between threads by the pipeline; each caller
    passes its own. Storage is bounded: once ``max_records`` is reached the
    oldest record is dropped, but ``counts()`` keeps counting everything.
    """

    def __init__(self, max_records: int | None = None) -> None:
        limit = max_records if max_records is not None else get_settings().max_diagnostics
        self._records: deque[Diagnostic] = deque(maxlen=max(1, limit))
        self._counts: Counter[DiagnosticKind] = Counter()

    def add(self, diagnostic: Diagnostic) -> None:
        self._records.append(diagnostic)
        self._counts[diagnostic.kind] += 1

    @property
    def records(self) -> list[Diagnostic]:
        return list(self._records)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._records if d.kind is kind]

    def counts(self) -> dict[DiagnosticKind, int]:
        return dict(self._counts)

    def total(self) -> int:
        return sum(self._counts.values())

    def clear(self) -> None:
        self._records.clear()
        self._counts.clear()

    def summary_lines(self) -> list[str]:
        """Per-kind totals followed by the distinct keys seen, most common first."""
        lines: list[str] = []
        for kind, count in sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0].value)):
            keys = Counter(d.key for d in self._records if d.kind is kind and d.key)
            top = ", ".join(k for k, _ in keys.most_common(5))
            lines.append(f"{kind.value}: {count}" + (f" ({top})" if top else ""))
        return lines

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))


def report(
    diagnostics: DiagnosticCollector | None,
    kind: DiagnosticKind,
    key: str | None,
    value: str | None,
    *,
    field: str | None = None,
    settings: DecoderSettings | None = None,
) -> Diagnostic:
    """Record a diagnostic in the collector (if any) and log it."""
    diagnostic = Diagnostic(kind=kind, key=key, value=value, field=field)
    if diagnostics is not None:
        diagnostics.add(diagnostic)
    settings = settings or get_settings()
    if settings.log_diagnostics:
        logger.log_event(
            _LOG_DOMAINS[kind],
            kind.value,
            level=logging.WARNING,
            key=key,
            value=value,
            field=field,
        )
    return diagnostic


__all__ = ["Diagnostic", "DiagnosticCollector", "DiagnosticKind", "report"]
