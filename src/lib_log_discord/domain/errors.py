"""Exception taxonomy for configuration and delivery failures."""

from __future__ import annotations

from typing import Any


class DiscordTransportError(Exception):
    """Base class for every error raised or reported by the sink."""


class ConfigurationError(DiscordTransportError, ValueError):
    """A required configuration field is missing.

    Examples
    --------
    >>> str(ConfigurationError("webhook"))
    'webhook is required.'
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required.")


class DeliveryError(DiscordTransportError):
    """The webhook rejected a payload or could not be reached.

    Never raised to the host: the delivery engine routes it to the failure
    reporting cascade instead.

    Attributes
    ----------
    webhook:
        Endpoint the request was sent to.
    status_code / reason:
        HTTP status and reason phrase for non-success responses; ``None`` for
        transport-level failures whose cause is chained via ``__cause__``.
    payload:
        JSON body that failed to deliver, attached by the delivery engine.
    """

    def __init__(
        self,
        webhook: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        self.webhook = webhook
        self.status_code = status_code
        self.reason = reason
        self.payload = payload
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = f"cannot send HTTP request to {self.webhook}"
        detail = " ".join(part for part in (str(self.status_code or ""), self.reason or "") if part)
        return f"{message}: {detail}" if detail else message


__all__ = ["ConfigurationError", "DeliveryError", "DiscordTransportError"]
