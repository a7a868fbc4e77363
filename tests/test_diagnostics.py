from __future__ import annotations

import logging

from tmi_events.config import DecoderSettings
from tmi_events.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind, report


def _diag(key: str, kind: DiagnosticKind = DiagnosticKind.UNSUPPORTED_TAG) -> Diagnostic:
    return Diagnostic(kind=kind, key=key, value="1")


def test_collector_is_bounded_but_counts_everything() -> None:
    collector = DiagnosticCollector(max_records=2)
    for key in ("a", "b", "c"):
        collector.add(_diag(key))
    assert len(collector) == 2
    assert [d.key for d in collector] == ["b", "c"]
    assert collector.total() == 3
    assert collector.counts() == {DiagnosticKind.UNSUPPORTED_TAG: 3}


def test_of_kind_and_clear() -> None:
    collector = DiagnosticCollector(max_records=10)
    collector.add(_diag("a"))
    collector.add(_diag("bits", DiagnosticKind.MALFORMED_NUMBER))
    assert [d.key for d in collector.of_kind(DiagnosticKind.MALFORMED_NUMBER)] == ["bits"]
    collector.clear()
    assert len(collector) == 0
    assert collector.total() == 0


def test_summary_lines() -> None:
    collector = DiagnosticCollector(max_records=10)
    collector.add(_diag("a"))
    collector.add(_diag("b"))
    collector.add(_diag("bits", DiagnosticKind.MALFORMED_NUMBER))
    assert collector.summary_lines() == [
        "unsupported_tag: 2 (a, b)",
        "malformed_number: 1 (bits)",
    ]


def test_default_limit_comes_from_settings() -> None:
    collector = DiagnosticCollector()
    for i in range(5):
        collector.add(_diag(str(i)))
    assert len(collector) == 5


def test_describe() -> None:
    assert _diag("foo").describe() == "unsupported tag: foo='1'"


def test_report_without_collector_returns_diagnostic() -> None:
    diag = report(None, DiagnosticKind.UNKNOWN_ENUM, "msg-param-sub-plan", "4000", field="plan")
    assert diag.field == "plan"


def test_report_logs_a_warning(caplog) -> None:  # type: ignore[no-untyped-def]
    caplog.set_level(logging.WARNING, logger="tmi_events")
    report(None, DiagnosticKind.MALFORMED_NUMBER, "bits", "lots", field="bits")
    [record] = [r for r in caplog.records if r.name == "tmi_events"]
    assert record.levelno == logging.WARNING
    assert "bits" in record.getMessage()


def test_report_can_be_silenced(caplog) -> None:  # type: ignore[no-untyped-def]
    caplog.set_level(logging.DEBUG, logger="tmi_events")
    collector = DiagnosticCollector(max_records=10)
    settings = DecoderSettings(log_diagnostics=False)
    report(collector, DiagnosticKind.UNSUPPORTED_TAG, "x", "1", settings=settings)
    assert len(collector) == 1
    assert not [r for r in caplog.records if r.name == "tmi_events"]
