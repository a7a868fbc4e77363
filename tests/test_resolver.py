from __future__ import annotations

import pytest

from tmi_events.diagnostics import DiagnosticKind
from tmi_events.errors import UnknownEventIdError
from tmi_events.events import EventKind
from tmi_events.irc.commands import COMMAND_PARSERS, CommandFields
from tmi_events.irc.resolver import (
    EVENT_IDS,
    SUPPORTED_COMMANDS,
    classify,
    default_kind,
    resolve_event_id,
)
from tmi_events.irc.values import PERMANENT


def test_direct_event_ids() -> None:
    resolution = resolve_event_id("resub")
    assert resolution.kind is EventKind.RESUB
    assert dict(resolution.synthesized) == {}
    assert resolve_event_id("submysterygift").kind is EventKind.COMMUNITY_SUB_GIFT
    assert resolve_event_id("anongiftpaidupgrade").kind is EventKind.GIFT_PAID_UPGRADE


@pytest.mark.parametrize(
    ("event_id", "kind", "synthesized"),
    [
        ("emote_only_on", EventKind.EMOTE_MODE, {"emote_only": True}),
        ("emote_only_off", EventKind.EMOTE_MODE, {"emote_only": False}),
        ("highlighted-message", EventKind.MESSAGE, {"highlighted": True}),
        (
            "followers_off",
            EventKind.SETTING_UPDATE,
            {"setting": "followers_only", "enabled": False},
        ),
        ("r9k_on", EventKind.SETTING_UPDATE, {"setting": "unique_only", "enabled": True}),
    ],
)
def test_folded_event_ids(event_id: str, kind: EventKind, synthesized: dict) -> None:
    resolution = resolve_event_id(event_id)
    assert resolution.kind is kind
    assert dict(resolution.synthesized) == synthesized


def test_unknown_event_id() -> None:
    with pytest.raises(UnknownEventIdError) as exc:
        resolve_event_id("brandnewthing")
    assert exc.value.event_id == "brandnewthing"


def test_odd_emote_only_id_is_unrecognized() -> None:
    assert EVENT_IDS["msg_emoteonly"] is EventKind.UNRECOGNIZED


def test_command_defaults() -> None:
    assert default_kind("privmsg") is EventKind.MESSAGE
    assert default_kind("CLEARMSG") is EventKind.MESSAGE_DELETE
    assert default_kind("USERNOTICE") is None
    assert default_kind(None) is None
    assert SUPPORTED_COMMANDS == set(COMMAND_PARSERS)


def test_privmsg_action_and_cheer() -> None:
    action = CommandFields(command="PRIVMSG", message="waves", action=True)
    assert classify("PRIVMSG", {}, action).kind is EventKind.CHAT_ACTION
    plain = CommandFields(command="PRIVMSG", message="cheer100")
    assert classify("PRIVMSG", {"bits": 100}, plain).kind is EventKind.CHEER
    assert classify("PRIVMSG", {}, plain).kind is EventKind.MESSAGE


def test_unknown_id_falls_back_to_command_default(diagnostics) -> None:  # type: ignore[no-untyped-def]
    fields = CommandFields(command="PRIVMSG", message="hi")
    resolution = classify("PRIVMSG", {"event": "gigantified-emote-message"}, fields, diagnostics)
    assert resolution.kind is EventKind.MESSAGE
    [diag] = diagnostics.records
    assert diag.kind is DiagnosticKind.UNKNOWN_EVENT_ID
    assert (diag.key, diag.value) == ("PRIVMSG", "gigantified-emote-message")


def test_unknown_id_without_default_raises(diagnostics) -> None:  # type: ignore[no-untyped-def]
    fields = CommandFields(command="USERNOTICE", channel="#c")
    with pytest.raises(UnknownEventIdError) as exc:
        classify("USERNOTICE", {"event": "brandnewthing"}, fields, diagnostics)
    assert exc.value.command == "USERNOTICE"
    assert len(diagnostics.of_kind(DiagnosticKind.UNKNOWN_EVENT_ID)) == 1


def test_missing_id_without_default_raises() -> None:
    with pytest.raises(UnknownEventIdError):
        classify("NOTICE", {}, CommandFields(command="NOTICE", channel="#c", message="x"))


def test_clearchat_variants() -> None:
    room = CommandFields(command="CLEARCHAT", channel="#dallas")
    assert classify("CLEARCHAT", {}, room).kind is EventKind.CLEAR

    user = CommandFields(command="CLEARCHAT", channel="#dallas", user_login="ronni")
    ban = classify("CLEARCHAT", {}, user)
    assert ban.kind is EventKind.BAN
    assert ban.synthesized["ban_duration"] is PERMANENT

    timeout = classify("CLEARCHAT", {"ban_duration": 350}, user)
    assert timeout.kind is EventKind.BAN
    assert "ban_duration" not in timeout.synthesized
