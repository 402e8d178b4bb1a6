"""Click command line for inspecting metadata and sending test embeds.

Purpose
-------
Give operators a quick way to verify a webhook configuration from a shell:
``lib_log_discord send "hello" --level warn``.

Contents
--------
* :func:`summary_info` - metadata banner as a string.
* :data:`cli` - Click group with ``info`` and ``send`` commands.
* :func:`main` - test-friendly runner returning an exit code.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

import click

from . import __init__conf__
from . import config as log_config
from .domain import DeliveryError, DiscordTransportError, LogMessage, SeverityLevel
from .transport import DiscordTransport

_LEVEL_CHOICES = [level.severity for level in sorted(SeverityLevel, key=lambda item: item.value, reverse=True)]


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__init__conf__.version, "--version", "-V", prog_name=__init__conf__.shell_command)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading configuration (env: {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None) -> None:
    """Send log embeds to a Discord webhook."""

    if log_config.dotenv_requested(use_dotenv):
        log_config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("send")
@click.argument("message")
@click.option("--level", type=click.Choice(_LEVEL_CHOICES), default="info", show_default=True)
@click.option("--webhook", default=None, help=f"Webhook URL (env: {log_config.ENV_WEBHOOK}).")
@click.option("--username", default=None, help="Display name of the sender.")
@click.option("--avatar", default=None, help="Avatar image URL.")
@click.option("--thumb", default=None, help="Embed thumbnail URL.")
def send_command(
    message: str,
    level: str,
    webhook: str | None,
    username: str | None,
    avatar: str | None,
    thumb: str | None,
) -> None:
    """Deliver MESSAGE as a single embed and wait for the answer."""

    failures: list[BaseException] = []
    try:
        config = log_config.config_from_env(
            webhook=webhook,
            username=username,
            avatar=avatar,
            thumb=thumb,
            report_error=failures.append,
        )
    except DiscordTransportError as exc:
        raise click.UsageError(f"{exc} Pass --webhook or set {log_config.ENV_WEBHOOK}.") from exc

    sink = DiscordTransport(config)
    payload = sink.build_payload(LogMessage.create(level, message))
    receipt = asyncio.run(sink.send(payload))
    if receipt is None:
        error = failures[0] if failures else DeliveryError(config.webhook)
        raise click.ClickException(str(error))
    click.echo(f"delivered ({receipt.status_code})")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return the process exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    lib_log_discord, version ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main", "summary_info"]
