"""Adapters connecting the Discord sink to the network, consoles and hosts."""

from __future__ import annotations

from .clock import SystemClock
from .console import RichWarningConsole
from .logging_handler import DiscordLogHandler, severity_from_python_level
from .rendering import inspect_value, render_last_item
from .scheduler import DeliveryScheduler
from .webhook_client import HttpxWebhookClient

__all__ = [
    "DeliveryScheduler",
    "DiscordLogHandler",
    "HttpxWebhookClient",
    "RichWarningConsole",
    "SystemClock",
    "inspect_value",
    "render_last_item",
    "severity_from_python_level",
]
