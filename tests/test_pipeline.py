from __future__ import annotations

from datetime import UTC, datetime

import pytest

from tmi_events import DecoderSettings, decode_event, decode_line
from tmi_events.diagnostics import DiagnosticKind
from tmi_events.errors import TagStringError
from tmi_events.events import (
    Ban,
    ChannelUpdate,
    ChatAction,
    Cheer,
    Clear,
    EmoteMode,
    Event,
    Message,
    MessageDelete,
    Raid,
    Resub,
    SettingUpdate,
    SubGift,
    Unrecognized,
    ViewerMilestone,
    Whisper,
)
from tmi_events.irc.values import (
    PERMANENT,
    Badge,
    Emote,
    EmoteRange,
    Milestone,
    SubPlan,
    UserType,
)

from tests.fixtures import sample_lines as lines


def test_privmsg(diagnostics) -> None:  # type: ignore[no-untyped-def]
    event = decode_line(lines.PRIVMSG, diagnostics)
    assert isinstance(event, Message)
    assert event.channel == "#shyryan"
    assert event.channel_id == "123456"
    assert event.user_login == "shyryan"
    assert event.display_name == "ShyRyan"
    assert event.message == "Hello World"
    assert event.color == "#5DA5D9"
    assert event.badge_info == (Badge("subscriber", 47),)
    assert event.badges[0] == Badge("broadcaster", 1)
    assert event.is_sub is True
    assert event.is_mod is False
    assert event.user_type is UserType.NORMAL
    assert event.timestamp == datetime(2023, 11, 14, 22, 13, 20, 123000, tzinfo=UTC)
    assert event.highlighted is False
    assert len(diagnostics) == 0


def test_decode_event_from_split_inputs() -> None:
    event = decode_event(
        "@badge-info=subscriber/47;badges=broadcaster/1,subscriber/0;"
        "color=#5DA5D9;display-name=ShyRyan",
        "shyryan!johndoe@johndoe.tmi.twitch.tv PRIVMSG #shyryan :Hello World",
    )
    assert isinstance(event, Message)
    assert event.channel == "#shyryan"
    assert event.user_login == "shyryan"
    assert event.message == "Hello World"
    assert event.badges == (Badge("broadcaster", 1), Badge("subscriber", 0))


def test_action() -> None:
    event = decode_line(lines.ACTION)
    assert isinstance(event, ChatAction)
    assert event.message == "waves"


def test_highlighted_message() -> None:
    event = decode_line(lines.HIGHLIGHTED)
    assert isinstance(event, Message)
    assert event.highlighted is True
    assert event.color is None


def test_cheer() -> None:
    event = decode_line(lines.CHEER)
    assert isinstance(event, Cheer)
    assert event.bits == 100
    assert event.badges == (Badge("bits", 100),)


def test_reply() -> None:
    event = decode_line(lines.REPLY)
    assert isinstance(event, Message)
    assert event.is_reply
    assert event.parent_message == "hello there;)"
    assert event.parent_user_login == "johndoe"
    assert event.emotes == (Emote("25", (EmoteRange(0, 4),)),)
    assert event.user_type is UserType.MOD


def test_whisper() -> None:
    event = decode_line(lines.WHISPER)
    assert isinstance(event, Whisper)
    assert event.user_login == "johndoe"
    assert event.recipient_login == "janedoe"
    assert event.message == "Hello World"
    assert event.thread_id == "42_43"


def test_resub() -> None:
    event = decode_line(lines.RESUB)
    assert isinstance(event, Resub)
    assert event.channel == "#dallas"
    assert event.login == "ronni"
    assert event.plan is SubPlan.PRIME
    assert event.cumulative_months == 12
    assert event.streak_months == 6
    assert event.share_streak is True
    assert event.gifted is False
    assert event.system_message == "ronni has subscribed for 12 months!"
    assert event.message == "Great stream -- keep it up!"
    assert event.user_type is UserType.STAFF


def test_subgift_without_user_message() -> None:
    event = decode_line(lines.SUBGIFT)
    assert isinstance(event, SubGift)
    assert event.recipient_login == "mr_woodchuck"
    assert event.recipient_display_name == "Mr_Woodchuck"
    assert event.plan is SubPlan.TIER_1
    assert event.plan_name == "House of Nyoro~n"
    assert event.message is None


def test_raid_keeps_crlf_escapes_by_default() -> None:
    event = decode_line(lines.RAID)
    assert isinstance(event, Raid)
    assert event.viewer_count == 15
    assert event.display_name == "TestChannel"
    assert event.login == "testchannel"
    assert event.system_message == "15 raiders from TestChannel have joined\\n!"


def test_raid_with_crlf_escapes_enabled() -> None:
    settings = DecoderSettings(decode_crlf_escapes=True, log_diagnostics=False)
    event = decode_line(lines.RAID, settings=settings)
    assert event.system_message == "15 raiders from TestChannel have joined\n!"


def test_viewer_milestone() -> None:
    event = decode_line(lines.MILESTONE)
    assert isinstance(event, ViewerMilestone)
    assert event.milestone is Milestone.WATCH_STREAK
    assert event.total == 3
    assert event.channel_points == 450
    assert event.message == "streak!"


def test_roomstate() -> None:
    event = decode_line(lines.ROOMSTATE)
    assert event == ChannelUpdate(
        channel="#bar",
        channel_id="12345678",
        emote_only=False,
        followers_only=False,
        subs_only=False,
        unique_only=False,
        slow_delay=0,
    )


@pytest.mark.parametrize(
    ("line", "emote_only"),
    [(lines.EMOTE_ONLY_ON, True), (lines.EMOTE_ONLY_OFF, False)],
)
def test_emote_mode_notices(line: str, emote_only: bool) -> None:
    event = decode_line(line)
    assert isinstance(event, EmoteMode)
    assert event.emote_only is emote_only
    assert event.channel == "#ryanwinchester_"


def test_setting_notice() -> None:
    event = decode_line(lines.FOLLOWERS_OFF)
    assert isinstance(event, SettingUpdate)
    assert (event.setting, event.enabled) == ("followers_only", False)


def test_permanent_ban() -> None:
    event = decode_line(lines.PERMA_BAN)
    assert isinstance(event, Ban)
    assert event.ban_duration is PERMANENT
    assert event.is_permanent
    assert event.user_login == "abesaibot"
    assert event.target_user_id == "87654321"


def test_timeout() -> None:
    event = decode_line(lines.TIMEOUT)
    assert isinstance(event, Ban)
    assert event.ban_duration == 350
    assert not event.is_permanent
    assert event.user_login == "ronni"


def test_clear() -> None:
    event = decode_line(lines.CLEAR)
    assert event == Clear(
        channel="#dallas",
        channel_id="12345678",
        timestamp=datetime(2022, 1, 20, 21, 54, 55, 392000, tzinfo=UTC),
    )


def test_message_delete() -> None:
    event = decode_line(lines.CLEARMSG)
    assert isinstance(event, MessageDelete)
    assert event.login == "ronni"
    assert event.message == "HeyGuys"
    assert event.target_message_id == "abc-123-def"
    assert event.channel_id is None


def test_unknown_usernotice_is_unrecognized(diagnostics) -> None:  # type: ignore[no-untyped-def]
    event = decode_line(lines.UNKNOWN_USERNOTICE, diagnostics)
    assert isinstance(event, Unrecognized)
    assert event.command == "USERNOTICE"
    assert event.tag_string.startswith("@badges=;")
    assert event.args == "tmi.twitch.tv USERNOTICE #shyryan"
    [diag] = diagnostics.of_kind(DiagnosticKind.UNKNOWN_EVENT_ID)
    assert diag.value == "brandnewthing"


def test_odd_emote_only_notice_is_unrecognized(diagnostics) -> None:  # type: ignore[no-untyped-def]
    event = decode_line(lines.EMOTEONLY_ODDITY, diagnostics)
    assert isinstance(event, Unrecognized)
    assert len(diagnostics) == 0


def test_unsupported_command_is_unrecognized() -> None:
    event = decode_line(lines.GLOBALUSERSTATE)
    assert isinstance(event, Unrecognized)
    assert event.command == "GLOBALUSERSTATE"
    assert event.reason == "unsupported command"


def test_malformed_arguments_are_unrecognized(diagnostics) -> None:  # type: ignore[no-untyped-def]
    event = decode_line("@color=#FFFFFF :nick!nick@nick.tmi.twitch.tv PRIVMSG #room", diagnostics)
    assert isinstance(event, Unrecognized)
    assert event.args == "nick!nick@nick.tmi.twitch.tv PRIVMSG #room"
    assert [d.kind for d in diagnostics] == [DiagnosticKind.MALFORMED_COMMAND]


def test_new_tags_do_not_break_decoding(diagnostics) -> None:  # type: ignore[no-untyped-def]
    event = decode_line("@totally-new-tag=1;" + lines.PRIVMSG[1:], diagnostics)
    assert isinstance(event, Message)
    assert event.message == "Hello World"
    assert [d.key for d in diagnostics] == ["totally-new-tag"]


def test_broken_tag_string_raises() -> None:
    with pytest.raises(TagStringError):
        decode_line("@=x :tmi.twitch.tv ROOMSTATE #bar")


@pytest.mark.parametrize("line", lines.ALL_LINES)
def test_every_captured_line_decodes(line: str) -> None:
    event = decode_line(line)
    assert isinstance(event, Event)
    assert decode_line(line) == event
