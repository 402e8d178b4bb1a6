from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_discord.domain.levels import SeverityLevel
from lib_log_discord.domain.message import LogMessage
from lib_log_discord.hub import LogHub, transport_accepts


class _Sink:
    def __init__(self, level: object = "silly") -> None:
        self.level = level
        self.messages: list[LogMessage] = []

    def __call__(self, message: LogMessage) -> None:
        self.messages.append(message)


def test_hub_routes_by_transport_threshold() -> None:
    hub = LogHub()
    loud, quiet = _Sink("silly"), _Sink("error")
    hub.transports.update(loud=loud, quiet=quiet)

    hub.info("hello")
    hub.error("bad")

    assert [m.data for m in loud.messages] == [("hello",), ("bad",)]
    assert [m.data for m in quiet.messages] == [("bad",)]


@pytest.mark.parametrize("method", ["error", "warn", "info", "verbose", "debug", "silly"])
def test_level_helpers_stamp_their_level(method: str) -> None:
    moment = datetime(2024, 1, 1, tzinfo=timezone.utc)
    hub = LogHub(clock=lambda: moment)
    sink = _Sink()
    hub.transports["sink"] = sink

    getattr(hub, method)("payload")

    assert sink.messages[0].level == method
    assert sink.messages[0].date == moment


def test_disabled_and_empty_slots_are_skipped() -> None:
    hub = LogHub()
    disabled = _Sink(False)
    hub.transports.update(disabled=disabled, empty=None)

    hub.error("x")

    assert disabled.messages == []


def test_rebroadcast_bypasses_severity_but_not_disabled_transports() -> None:
    hub = LogHub()
    strict, off = _Sink("error"), _Sink(False)
    message = LogMessage.create("warn", "synthetic")

    hub.log_message_with_transports(message, [strict, off])

    assert strict.messages == [message]
    assert off.messages == []


def test_unknown_message_levels_pass_enabled_transports() -> None:
    assert transport_accepts(_Sink("error"), "log") is True
    assert transport_accepts(_Sink(None), "log") is False


def test_plain_callables_accept_everything() -> None:
    received: list[LogMessage] = []
    hub = LogHub()
    hub.transports["plain"] = received.append

    hub.log(SeverityLevel.SILLY, "tiny")

    assert received[0].data == ("tiny",)
