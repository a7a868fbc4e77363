from __future__ import annotations

import pytest

from tmi_events.irc.escape import decode_tag_value


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hello\\schat", "hello chat"),
        ("a\\:b", "a;b"),
        ("a\\\\b", "a\\b"),
        ("", ""),
        ("plain", "plain"),
    ],
)
def test_decodes_known_escapes(raw: str, expected: str) -> None:
    assert decode_tag_value(raw) == expected


def test_absent_value_passes_through() -> None:
    assert decode_tag_value(None) is None


def test_unknown_escape_and_trailing_backslash_are_kept() -> None:
    assert decode_tag_value("a\\xb") == "a\\xb"
    assert decode_tag_value("end\\") == "end\\"


def test_escaped_backslash_does_not_start_a_new_escape() -> None:
    # "\\\\s" is an escaped backslash followed by a literal "s".
    assert decode_tag_value("\\\\s") == "\\s"


def test_crlf_escapes_only_when_enabled() -> None:
    assert decode_tag_value("line\\nbreak\\r") == "line\\nbreak\\r"
    assert decode_tag_value("line\\nbreak\\r", crlf=True) == "line\nbreak\r"


def test_decode_is_deterministic() -> None:
    raw = "x\\sy\\:z"
    assert decode_tag_value(raw) == decode_tag_value(raw) == "x y;z"
