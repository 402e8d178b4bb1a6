"""Ports describing the host logging system the sink plugs into.

Purpose
-------
Capture the three capabilities the sink consumes from its host: a named
transport registry, per-transport thresholds, and a rebroadcast method that
delivers one record to an explicit list of transports.

System Role
-----------
Lets the failure-reporting use case talk to any host (``LogHub``, a test
double, or an adapter around another framework) without importing it.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping, Sequence
from typing import Any, Protocol, runtime_checkable

from lib_log_discord.domain.message import LogMessage


@runtime_checkable
class TransportPort(Protocol):
    """Callable sink registered with a host, carrying its current threshold."""

    level: Any

    def __call__(self, message: LogMessage) -> Any: ...


@runtime_checkable
class LoggingHostPort(Protocol):
    """Host logging system exposing a transport registry and rebroadcast."""

    transports: MutableMapping[str, Any]

    def log_message_with_transports(
        self,
        message: LogMessage,
        transports: Sequence[Callable[[LogMessage], Any]],
    ) -> None:
        """Deliver ``message`` to ``transports`` regardless of severity gating."""


__all__ = ["LoggingHostPort", "TransportPort"]
