"""Wire-ready payload value objects for Discord webhooks.

Purpose
-------
Describe one outgoing webhook message (sender identity plus a single embed)
as the JSON-ready mapping posted to Discord.

Contents
--------
* :class:`SenderIdentity` - username/avatar/thumbnail configured on the sink.
* :class:`EmbedField`, :class:`Embed`, :class:`WebhookPayload` - payload tree.
* :class:`DeliveryReceipt` - acknowledgement returned after a successful POST.

System Role
-----------
Built fresh per record by the payload builder, handed to the delivery engine,
and discarded once the network call finishes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class SenderIdentity:
    """Display identity attached to every message."""

    username: str | None = None
    avatar_url: str | None = None
    thumbnail_url: str | None = None


@dataclass(slots=True, frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dataclass(slots=True, frozen=True)
class Embed:
    """Single embed carrying the rendered record."""

    description: str
    color: int
    fields: tuple[EmbedField, ...]
    thumbnail_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "thumbnail": {"url": self.thumbnail_url},
            "color": self.color,
            "fields": [field.to_dict() for field in self.fields],
        }


@dataclass(slots=True, frozen=True)
class WebhookPayload:
    """Body posted to the webhook endpoint."""

    username: str | None
    avatar_url: str | None
    embeds: tuple[Embed, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible body in Discord's snake_case layout.

        Examples
        --------
        >>> embed = Embed("'hi'", 0x2196F3, (EmbedField("Level", "info"),))
        >>> body = WebhookPayload("App", None, (embed,)).to_dict()
        >>> list(body), body["embeds"][0]["thumbnail"]
        (['username', 'avatar_url', 'embeds'], {'url': None})
        """

        return {
            "username": self.username,
            "avatar_url": self.avatar_url,
            "embeds": [embed.to_dict() for embed in self.embeds],
        }


@dataclass(slots=True, frozen=True)
class DeliveryReceipt:
    """Acknowledgement returned by the destination for a successful POST."""

    status_code: int
    body: str = ""


__all__ = ["DeliveryReceipt", "Embed", "EmbedField", "SenderIdentity", "WebhookPayload"]
