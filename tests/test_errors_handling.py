from __future__ import annotations

import logging

import pytest

from tmi_events.errors import (
    InternalError,
    MalformedCommandArgsError,
    MalformedNumberError,
    MissingRequiredFieldError,
    ParsingError,
    TagStringError,
    UnknownEventIdError,
    UnknownKeyError,
    classify_error,
    log_error,
)
from tmi_events.logging_config import ErrorAggregator, error_aggregator


@pytest.fixture(autouse=True)
def _fresh_aggregator():  # type: ignore[no-untyped-def]
    error_aggregator.clear()
    yield
    error_aggregator.clear()


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (TagStringError("bad"), "tag_string"),
        (UnknownKeyError("x"), "unsupported_tag"),
        (MalformedNumberError("bits", "x"), "malformed_number"),
        (MalformedCommandArgsError("PRIVMSG", "a", " :"), "malformed_command"),
        (UnknownEventIdError("x"), "unknown_event"),
        (MissingRequiredFieldError("unrecognized", "args"), "missing_field"),
        (ParsingError("x"), "parsing"),
        (InternalError("x"), "internal"),
        (ValueError("x"), "unknown"),
    ],
)
def test_classify_error(error: Exception, category: str) -> None:
    assert classify_error(error) == category


def test_error_data_is_copied() -> None:
    data = {"segment": "=x"}
    error = TagStringError("bad", data=data)
    data["segment"] = "changed"
    assert error.data == {"segment": "=x"}
    assert InternalError("plain").data == {}


def test_log_error_is_structured_and_aggregated(caplog) -> None:  # type: ignore[no-untyped-def]
    caplog.set_level(logging.ERROR, logger="tmi_events.errors")
    error = TagStringError("Tag segment without a key", data={"segment": "=x"})
    log_error("Skipping line", error, context={"line_no": 4})
    [record] = [r for r in caplog.records if r.name == "tmi_events.errors"]
    message = record.getMessage()
    assert message.startswith("[TAG_STRING] Skipping line: Tag segment without a key")
    assert "segment==x" in message
    assert "line_no=4" in message
    summary = error_aggregator.get_error_summary()
    assert summary["tag_string"]["total_count"] == 1
    assert summary["tag_string"]["last_occurrence"]["context"] == {"segment": "=x", "line_no": 4}


def test_aggregator_keeps_most_recent_entries() -> None:
    aggregator = ErrorAggregator(max_per_type=2)
    for i in range(3):
        aggregator.record_error("parsing", f"error {i}")
    summary = aggregator.get_error_summary()["parsing"]
    assert summary["total_count"] == 2
    assert summary["last_occurrence"]["message"] == "error 2"


def test_summary_report(caplog) -> None:  # type: ignore[no-untyped-def]
    caplog.set_level(logging.INFO, logger="tmi_events.errors")
    aggregator = ErrorAggregator()
    aggregator.log_summary_report()
    assert "No errors recorded" in caplog.text
    aggregator.record_error("malformed_number", "bits=lots")
    aggregator.log_summary_report()
    assert "malformed_number: 1 total" in caplog.text
    assert "Last: bits=lots" in caplog.text
