from __future__ import annotations

from lib_log_discord.adapters.console.rich_console import RichWarningConsole
from lib_log_discord.domain.errors import DeliveryError


def test_warning_line_names_error_type_and_message(record_console) -> None:
    RichWarningConsole(console=record_console).warn(DeliveryError("https://x/y", status_code=500, reason="Server Error"))

    output = record_console.export_text()
    assert "lib_log_discord: DeliveryError: cannot send HTTP request to https://x/y: 500 Server Error" in output


def test_warning_line_mentions_cause(record_console) -> None:
    error = DeliveryError("https://x/y", reason="timed out")
    error.__cause__ = TimeoutError("timed out")

    RichWarningConsole(console=record_console).warn(error)

    assert "caused by TimeoutError: timed out" in record_console.export_text()


def test_markup_in_messages_is_printed_literally(record_console) -> None:
    RichWarningConsole(console=record_console).warn(RuntimeError("[bold]not markup[/bold]"))

    assert "[bold]not markup[/bold]" in record_console.export_text()
