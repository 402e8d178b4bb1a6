"""CLI behaviour coverage for the ``info`` and ``send`` commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from lib_log_discord import __init__conf__
from lib_log_discord import cli as cli_mod
from lib_log_discord import config as log_config
from lib_log_discord.transport import DiscordTransport

WEBHOOK = "https://discord.com/api/webhooks/0/a"


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        log_config.ENV_WEBHOOK,
        log_config.ENV_USERNAME,
        log_config.ENV_AVATAR,
        log_config.ENV_THUMB,
        log_config.ENV_LEVEL,
        log_config.DOTENV_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def patched_transport(monkeypatch: pytest.MonkeyPatch, fake_webhook):
    """Route CLI deliveries through the fake webhook."""

    def factory(config):
        return DiscordTransport(config, client=fake_webhook.client())

    monkeypatch.setattr(cli_mod, "DiscordTransport", factory)
    return fake_webhook


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [], prog_name=__init__conf__.shell_command)

    assert result.exit_code == 0
    assert result.output == cli_mod.summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])

    assert result.exit_code == 0
    assert result.output.startswith(f"Info for {__init__conf__.name}:")
    assert __init__conf__.version in result.output


def test_cli_version_option_prints_version() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"], prog_name=__init__conf__.shell_command)

    assert result.exit_code == 0
    assert result.output.strip() == f"{__init__conf__.shell_command}, version {__init__conf__.version}"


def test_send_delivers_embed_with_chosen_level(patched_transport) -> None:
    result = CliRunner().invoke(
        cli_mod.cli,
        ["send", "disk almost full", "--level", "warn", "--webhook", WEBHOOK, "--username", "ops"],
    )

    assert result.exit_code == 0, result.output
    assert "delivered (204)" in result.output
    request = patched_transport.requests[0]
    assert str(request.url) == WEBHOOK
    body = json.loads(request.content)
    assert body["username"] == "ops"
    embed = body["embeds"][0]
    assert embed["description"] == "'disk almost full'"
    assert embed["color"] == 0xFFC107
    assert embed["fields"][0] == {"name": "Level", "value": "warn", "inline": True}


def test_send_reads_webhook_from_environment(patched_transport, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(log_config.ENV_WEBHOOK, WEBHOOK)
    monkeypatch.setenv(log_config.ENV_USERNAME, "from-env")

    result = CliRunner().invoke(cli_mod.cli, ["send", "hello"])

    assert result.exit_code == 0, result.output
    assert json.loads(patched_transport.requests[0].content)["username"] == "from-env"


def test_send_reports_rejected_delivery_as_failure(patched_transport) -> None:
    patched_transport.status_code = 500

    result = CliRunner().invoke(cli_mod.cli, ["send", "hello", "--webhook", WEBHOOK])

    assert result.exit_code == 1
    assert f"cannot send HTTP request to {WEBHOOK}" in result.output


def test_send_without_webhook_is_a_usage_error() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["send", "hello"])

    assert result.exit_code == 2
    assert "webhook is required" in result.output


def test_send_rejects_unknown_level() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["send", "hello", "--level", "fatal", "--webhook", WEBHOOK])

    assert result.exit_code == 2


def test_main_returns_zero_for_info(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert capsys.readouterr().out == cli_mod.summary_info()


def test_main_returns_usage_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["send", "hello"]) == 2
    assert "webhook is required" in capsys.readouterr().err
