from __future__ import annotations

import pytest

from tmi_events.irc.parser import command_keyword, split_raw_line

from tests.fixtures import sample_lines as lines


def test_split_line_with_tags() -> None:
    raw = split_raw_line(lines.PRIVMSG)
    assert raw.tag_string.startswith("@badge-info=subscriber/47;")
    assert raw.args.startswith("shyryan!shyryan@shyryan.tmi.twitch.tv PRIVMSG")
    assert raw.command == "PRIVMSG"


def test_split_line_without_tags() -> None:
    raw = split_raw_line(":tmi.twitch.tv ROOMSTATE #bar\r\n")
    assert raw.tag_string == ""
    assert raw.args == "tmi.twitch.tv ROOMSTATE #bar"
    assert raw.command == "ROOMSTATE"
    assert raw.raw == ":tmi.twitch.tv ROOMSTATE #bar"


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ("nick!u@h privmsg #room :hi", "PRIVMSG"),
        (":tmi.twitch.tv CLEARCHAT #dallas", "CLEARCHAT"),
        ("tmi.twitch.tv USERNOTICE #dallas", "USERNOTICE"),
        ("PING :tmi.twitch.tv", "PING"),
        ("ROOMSTATE #bar", "ROOMSTATE"),
        ("tmi.twitch.tv", None),
        ("", None),
    ],
)
def test_command_keyword(args: str, expected: str | None) -> None:
    assert command_keyword(args) == expected
