"""Use case mapping a :class:`LogMessage` onto a Discord webhook payload.

Purpose
-------
Turn one record into the wire structure the webhook expects: sender identity,
a rendered description, the level colour, and two inline metadata fields.

Contents
--------
* :func:`create_build_payload` - factory freezing identity and renderer.
* :func:`render_timestamp` - ISO-8601 rendering for the ``DateTime`` field.
* :func:`truncate_description` - enforces Discord's embed description limit.

System Role
-----------
Pure function of the configured identity and the record; no I/O, no shared
mutable state. Invoked synchronously by the transport handle so the payload
is a snapshot taken at log time.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from lib_log_discord.domain.levels import color_for
from lib_log_discord.domain.message import LogMessage
from lib_log_discord.domain.payload import Embed, EmbedField, SenderIdentity, WebhookPayload

Renderer = Callable[[LogMessage], str]
PayloadBuilder = Callable[[LogMessage], WebhookPayload]

#: Maximum embed description length accepted by Discord.
DESCRIPTION_LIMIT = 4096

_ELLIPSIS = "…"


def create_build_payload(*, identity: SenderIdentity, render: Renderer) -> PayloadBuilder:
    """Return a builder bound to ``identity`` and ``render``.

    Parameters
    ----------
    identity:
        Username, avatar and thumbnail copied onto every payload.
    render:
        Callable producing the embed description for a record; either the
        caller's hook or the default last-item renderer.

    Examples
    --------
    >>> build = create_build_payload(identity=SenderIdentity(username="App"), render=lambda m: "text")
    >>> payload = build(LogMessage(data=("x",), level="info", date="2024-01-01T00:00:00.000Z"))
    >>> [field.name for field in payload.embeds[0].fields]
    ['Level', 'DateTime']
    """

    def build_payload(message: LogMessage) -> WebhookPayload:
        embed = Embed(
            description=truncate_description(str(render(message))),
            color=color_for(message.level),
            fields=(
                EmbedField(name="Level", value=str(message.level), inline=True),
                EmbedField(name="DateTime", value=render_timestamp(message.date), inline=True),
            ),
            thumbnail_url=identity.thumbnail_url,
        )
        return WebhookPayload(
            username=identity.username,
            avatar_url=identity.avatar_url,
            embeds=(embed,),
        )

    return build_payload


def render_timestamp(value: Any) -> str:
    """Render ``value`` as ISO-8601 when it supports it.

    Aware datetimes are normalised to UTC with millisecond precision and a
    ``Z`` suffix; strings pass through untouched.

    Examples
    --------
    >>> render_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc))
    '2024-01-01T00:00:00.000Z'
    >>> render_timestamp("2024-01-01T00:00:00.000Z")
    '2024-01-01T00:00:00.000Z'
    """

    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
            utc = value.astimezone(timezone.utc).replace(tzinfo=None)
            return f"{utc.isoformat(timespec='milliseconds')}Z"
        return value.isoformat(timespec="milliseconds")
    isoformat = getattr(value, "isoformat", None)
    if callable(isoformat):
        return str(isoformat())
    return str(value)


def truncate_description(text: str) -> str:
    if len(text) <= DESCRIPTION_LIMIT:
        return text
    return text[: DESCRIPTION_LIMIT - len(_ELLIPSIS)] + _ELLIPSIS


__all__ = [
    "DESCRIPTION_LIMIT",
    "PayloadBuilder",
    "Renderer",
    "create_build_payload",
    "render_timestamp",
    "truncate_description",
]
