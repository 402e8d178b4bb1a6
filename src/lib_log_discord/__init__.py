"""Discord webhook sink for structured log records.

The public surface is the :class:`DiscordTransport` façade plus the value
objects and host integrations it works with::

    from lib_log_discord import DiscordTransport, LogHub

    hub = LogHub()
    sink = DiscordTransport(webhook="https://discord.com/api/webhooks/...", username="App", host=hub)
    hub.error("database unreachable")
"""

from __future__ import annotations

from .adapters import DiscordLogHandler, inspect_value
from .application.use_cases.report_error import ReportTier
from .domain import (
    EMBED_COLORS,
    ConfigurationError,
    DeliveryError,
    DeliveryReceipt,
    DiscordTransportError,
    LogMessage,
    SeverityLevel,
    WebhookPayload,
)
from .hub import LogHub
from .transport import TRANSPORT_KEY, DiscordConfig, DiscordTransport, TransportHandle

__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "DeliveryReceipt",
    "DiscordConfig",
    "DiscordLogHandler",
    "DiscordTransport",
    "DiscordTransportError",
    "EMBED_COLORS",
    "LogHub",
    "LogMessage",
    "ReportTier",
    "SeverityLevel",
    "TRANSPORT_KEY",
    "TransportHandle",
    "WebhookPayload",
    "inspect_value",
]
