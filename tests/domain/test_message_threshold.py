from __future__ import annotations

import threading
from datetime import datetime, timezone

import pytest

from lib_log_discord.domain.levels import SeverityLevel
from lib_log_discord.domain.message import LogMessage
from lib_log_discord.domain.threshold import LevelCell, normalize_threshold


def test_log_message_freezes_data_into_a_tuple() -> None:
    items = ["first", "second"]
    message = LogMessage(data=items, level="info", date="2024-01-01T00:00:00.000Z")

    items.append("third")

    assert message.data == ("first", "second")
    assert message.last_item == "second"


def test_last_item_is_none_without_data() -> None:
    assert LogMessage(data=(), level="info", date="x").last_item is None


def test_create_stamps_clock_time_and_accepts_enum_levels() -> None:
    moment = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    message = LogMessage.create(SeverityLevel.WARN, "disk", 93, clock=lambda: moment)

    assert message.level == "warn"
    assert message.date == moment
    assert message.data == ("disk", 93)


def test_log_message_is_immutable() -> None:
    message = LogMessage(data=("x",), level="info", date="x")
    with pytest.raises(AttributeError):
        message.level = "error"  # type: ignore[misc]


@pytest.mark.parametrize("value", [None, False])
def test_false_and_none_disable_the_threshold(value: object) -> None:
    assert normalize_threshold(value) is None


def test_normalize_threshold_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        normalize_threshold("shout")


def test_level_cell_reflects_latest_write() -> None:
    cell = LevelCell("debug")
    assert cell.get() is SeverityLevel.DEBUG

    cell.set("warn")
    assert cell.get() is SeverityLevel.WARN

    cell.set(False)
    assert cell.get() is None


def test_level_cell_tolerates_concurrent_writers() -> None:
    cell = LevelCell()
    levels = list(SeverityLevel)

    def writer(level: SeverityLevel) -> None:
        for _ in range(200):
            cell.set(level)
            assert cell.get() in levels

    threads = [threading.Thread(target=writer, args=(level,)) for level in levels]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert cell.get() in levels
