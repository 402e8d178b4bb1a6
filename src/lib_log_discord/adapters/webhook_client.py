"""httpx-backed adapter implementing :class:`WebhookClientPort`.

Purpose
-------
POST one JSON body to a webhook and translate the outcome into a
:class:`DeliveryReceipt` or a :class:`DeliveryError`.

System Role
-----------
Concrete network boundary of the sink. A fresh ``httpx.AsyncClient`` is opened
per delivery so the adapter is not tied to a particular event loop; tests
inject an ``httpx.MockTransport``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from lib_log_discord.application.ports.webhook import WebhookClientPort
from lib_log_discord.domain.errors import DeliveryError
from lib_log_discord.domain.payload import DeliveryReceipt

LOGGER = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


class HttpxWebhookClient(WebhookClientPort):
    """Single-shot JSON POST client without retries.

    Parameters
    ----------
    timeout:
        Passed to ``httpx.AsyncClient``; ``None`` keeps httpx's default.
    transport:
        Optional ``httpx.AsyncBaseTransport`` (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        timeout: float | httpx.Timeout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def post_json(self, url: str, body: Mapping[str, Any]) -> DeliveryReceipt:
        """Send ``body`` to ``url``; raise :class:`DeliveryError` on any failure."""

        client_options: dict[str, Any] = {"transport": self._transport}
        if self._timeout is not None:
            client_options["timeout"] = self._timeout
        try:
            async with httpx.AsyncClient(**client_options) as client:
                response = await client.post(url, json=dict(body), headers=_HEADERS)
        except httpx.HTTPError as exc:
            raise DeliveryError(url, reason=str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            LOGGER.debug("Webhook answered %s %s", response.status_code, response.reason_phrase)
            raise DeliveryError(url, status_code=response.status_code, reason=response.reason_phrase)
        return DeliveryReceipt(status_code=response.status_code, body=response.text)


__all__ = ["HttpxWebhookClient"]
