"""Protocols the application layer depends on."""

from __future__ import annotations

from .console import WarningConsolePort
from .host import LoggingHostPort, TransportPort
from .time import ClockPort
from .webhook import WebhookClientPort

__all__ = [
    "ClockPort",
    "LoggingHostPort",
    "TransportPort",
    "WarningConsolePort",
    "WebhookClientPort",
]
