from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from lib_log_discord.adapters.rendering import render_last_item
from lib_log_discord.application.use_cases.build_payload import (
    DESCRIPTION_LIMIT,
    create_build_payload,
    render_timestamp,
    truncate_description,
)
from lib_log_discord.domain.message import LogMessage
from lib_log_discord.domain.payload import SenderIdentity


def test_end_to_end_example_payload() -> None:
    build = create_build_payload(identity=SenderIdentity(username="App"), render=render_last_item)
    message = LogMessage(data=("boom",), level="error", date="2024-01-01T00:00:00.000Z")

    assert build(message).to_dict() == {
        "username": "App",
        "avatar_url": None,
        "embeds": [
            {
                "description": "'boom'",
                "thumbnail": {"url": None},
                "color": 0xF44336,
                "fields": [
                    {"name": "Level", "value": "error", "inline": True},
                    {"name": "DateTime", "value": "2024-01-01T00:00:00.000Z", "inline": True},
                ],
            }
        ],
    }


def test_builder_is_pure_for_identical_records() -> None:
    build = create_build_payload(
        identity=SenderIdentity(username="App", avatar_url="https://a", thumbnail_url="https://t"),
        render=render_last_item,
    )
    message = LogMessage(data=({"id": 7}, ["nested"]), level="info", date="2024-01-01T00:00:00.000Z")

    assert build(message) == build(message)
    assert message.data == ({"id": 7}, ["nested"])


@pytest.mark.parametrize("level", ["error", "warn", "info", "verbose", "debug", "silly", "log", "custom"])
def test_fields_are_always_level_then_datetime(level: str) -> None:
    build = create_build_payload(identity=SenderIdentity(), render=render_last_item)
    fields = build(LogMessage(data=("x",), level=level, date="d")).embeds[0].fields

    assert [(field.name, field.inline) for field in fields] == [("Level", True), ("DateTime", True)]
    assert fields[0].value == level


def test_only_the_last_data_item_is_rendered() -> None:
    build = create_build_payload(identity=SenderIdentity(), render=render_last_item)
    payload = build(LogMessage(data=("ignored", 42), level="info", date="d"))

    assert payload.embeds[0].description == "42"


def test_custom_renderer_replaces_default_and_receives_whole_record() -> None:
    seen: list[LogMessage] = []

    def render(message: LogMessage) -> str:
        seen.append(message)
        return " | ".join(str(item) for item in message.data)

    build = create_build_payload(identity=SenderIdentity(), render=render)
    message = LogMessage(data=("a", "b"), level="info", date="d")

    assert build(message).embeds[0].description == "a | b"
    assert seen == [message]


def test_custom_renderer_errors_propagate() -> None:
    def render(message: LogMessage) -> str:
        raise RuntimeError("renderer broke")

    build = create_build_payload(identity=SenderIdentity(), render=render)
    with pytest.raises(RuntimeError, match="renderer broke"):
        build(LogMessage(data=("x",), level="info", date="d"))


def test_unknown_level_uses_neutral_color() -> None:
    build = create_build_payload(identity=SenderIdentity(), render=render_last_item)
    assert build(LogMessage(data=("x",), level="trace", date="d")).embeds[0].color == 0x333333


def test_render_timestamp_converts_aware_datetimes_to_utc_z() -> None:
    plus_two = timezone(timedelta(hours=2))
    assert render_timestamp(datetime(2024, 1, 1, 2, 0, 0, 123456, tzinfo=plus_two)) == "2024-01-01T00:00:00.123Z"


def test_render_timestamp_keeps_naive_datetimes_without_suffix() -> None:
    assert render_timestamp(datetime(2024, 1, 1, 12, 30)) == "2024-01-01T12:30:00.000"


def test_render_timestamp_uses_isoformat_when_available_and_str_otherwise() -> None:
    assert render_timestamp(date(2024, 5, 6)) == "2024-05-06"
    assert render_timestamp(1700000000) == "1700000000"


def test_long_descriptions_are_truncated_to_discord_limit() -> None:
    text = truncate_description("x" * (DESCRIPTION_LIMIT + 10))
    assert len(text) == DESCRIPTION_LIMIT
    assert text.endswith("…")
    assert truncate_description("short") == "short"
