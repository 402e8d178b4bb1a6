"""Port for the HTTP client posting payloads to a webhook."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from lib_log_discord.domain.payload import DeliveryReceipt


@runtime_checkable
class WebhookClientPort(Protocol):
    """POST a JSON body once, without retrying."""

    async def post_json(self, url: str, body: Mapping[str, Any]) -> DeliveryReceipt:
        """Return the receipt for a 2xx response; raise ``DeliveryError`` otherwise."""


__all__ = ["WebhookClientPort"]
