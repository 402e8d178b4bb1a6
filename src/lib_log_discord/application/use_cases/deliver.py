"""Use case delivering one payload to the webhook.

Purpose
-------
Issue a single POST through the configured :class:`WebhookClientPort` and turn
every failure into a :class:`DeliveryError` routed to the reporting cascade.

System Role
-----------
The only place network I/O happens. The returned coroutine never raises: the
host logging call must not be affected by a broken destination.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from lib_log_discord.application.ports.webhook import WebhookClientPort
from lib_log_discord.domain.errors import DeliveryError
from lib_log_discord.domain.payload import DeliveryReceipt, WebhookPayload

logger = logging.getLogger(__name__)

SendCallable = Callable[[WebhookPayload], Awaitable[DeliveryReceipt | None]]


def create_send(
    *,
    webhook: str,
    client: WebhookClientPort,
    report_error: Callable[[BaseException], Any],
) -> SendCallable:
    """Build the ``send`` coroutine function bound to ``webhook`` and ``client``.

    Parameters
    ----------
    webhook:
        Destination URL.
    client:
        Adapter performing the HTTP request.
    report_error:
        Failure-reporting entry point receiving every :class:`DeliveryError`.

    Returns
    -------
    Callable[[WebhookPayload], Awaitable[DeliveryReceipt | None]]
        Coroutine function resolving to the receipt on success and ``None``
        after a failure was reported.
    """

    async def send(payload: WebhookPayload) -> DeliveryReceipt | None:
        body = payload.to_dict()
        try:
            receipt = await client.post_json(webhook, body)
        except DeliveryError as error:
            if error.payload is None:
                error.payload = body
            _route(report_error, error)
            return None
        except Exception as exc:
            error = DeliveryError(webhook, reason=str(exc) or type(exc).__name__, payload=body)
            error.__cause__ = exc
            _route(report_error, error)
            return None
        logger.debug("Delivered payload to webhook", extra={"status_code": receipt.status_code})
        return receipt

    return send


def _route(report_error: Callable[[BaseException], Any], error: DeliveryError) -> None:
    logger.debug("Webhook delivery failed: %s", error)
    report_error(error)


__all__ = ["SendCallable", "create_send"]
