from __future__ import annotations

import json

from tmi_events import decode_line, describe_event
from tmi_events.describe import event_to_dict, json_default
from tmi_events.events import AdBreak, Unrecognized
from tmi_events.irc.values import UnknownValue

from tests.fixtures import sample_lines as lines


def test_message_lines() -> None:
    assert describe_event(decode_line(lines.PRIVMSG)) == "[#shyryan] <shyryan> Hello World"
    assert describe_event(decode_line(lines.HIGHLIGHTED)).startswith("[#shyryan] ✨ <johndoe>")
    assert describe_event(decode_line(lines.ACTION)) == "[#shyryan] * <johndoe> waves"
    assert describe_event(decode_line(lines.WHISPER)) == "WHISPER - <johndoe> Hello World"


def test_ban_lines() -> None:
    assert describe_event(decode_line(lines.PERMA_BAN)) == "BANNED [#ryanwinchester_] - <abesaibot>"
    assert describe_event(decode_line(lines.TIMEOUT)) == "TIMEOUT [#dallas] - <ronni> for 5m 50s"
    assert describe_event(decode_line(lines.CLEAR)) == "CLEAR [#dallas]"


def test_room_mode_lines() -> None:
    assert describe_event(decode_line(lines.EMOTE_ONLY_ON)) == "[#ryanwinchester_] emote-only on"
    assert (
        describe_event(decode_line(lines.FOLLOWERS_OFF))
        == "[#ryanwinchester_] followers_only off"
    )


def test_usernotice_falls_back_to_system_message() -> None:
    assert (
        describe_event(decode_line(lines.RESUB))
        == "RESUB [#dallas] ronni has subscribed for 12 months!"
    )
    assert describe_event(decode_line(lines.RAID)).startswith("RAID [#othertestchannel]")


def test_generic_and_unrecognized() -> None:
    assert describe_event(AdBreak()) == "AD_BREAK"
    assert describe_event(Unrecognized(command="PING", args="PING :x")) == "[PING] 'PING :x'"


def test_event_to_dict_is_json_serializable() -> None:
    data = event_to_dict(decode_line(lines.PRIVMSG))
    assert data["kind"] == "message"
    decoded = json.loads(json.dumps(data, default=json_default))
    assert decoded["timestamp"] == "2023-11-14T22:13:20.123000+00:00"
    assert decoded["user_type"] == ""
    assert decoded["badge_info"] == [["subscriber", 47]]


def test_json_default_for_unknown_values() -> None:
    value = UnknownValue(key="bits", value="lots", field="bits")
    assert json_default(value) == {"unknown": "lots", "key": "bits"}
