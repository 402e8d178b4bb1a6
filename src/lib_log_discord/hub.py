"""Minimal in-process host logging system.

Purpose
-------
Provide a small host implementing :class:`LoggingHostPort` so the Discord sink
can be used (and exercised) without a third-party logging framework: a named
transport registry, threshold gating per transport, and an explicit
rebroadcast entry point.

Contents
--------
* :class:`LogHub` - registry plus ``log``/``error``/``warn``/... helpers.
* :func:`transport_accepts` - gating rule shared by the hub.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Any

from .domain.levels import SeverityLevel
from .domain.message import LogMessage
from .domain.threshold import normalize_threshold


def transport_accepts(transport: Any, level: Any) -> bool:
    """Return ``True`` when ``transport``'s current threshold admits ``level``.

    Transports without a ``level`` attribute accept everything; a threshold of
    ``None``/``False`` disables the transport; labels outside the severity
    order pass any enabled threshold.

    Examples
    --------
    >>> class Sink:
    ...     level = "warn"
    ...     def __call__(self, message): ...
    >>> transport_accepts(Sink(), "error"), transport_accepts(Sink(), "info")
    (True, False)
    """

    threshold = _threshold_of(transport)
    if threshold is None:
        return False
    candidate = SeverityLevel.lookup(level)
    if candidate is None:
        return True
    return threshold.allows(candidate)


def _threshold_of(transport: Any) -> SeverityLevel | None:
    if not hasattr(transport, "level"):
        return SeverityLevel.SILLY
    return normalize_threshold(transport.level)


class LogHub:
    """Dispatch records to every registered transport whose threshold admits them.

    Examples
    --------
    >>> hub = LogHub()
    >>> received = []
    >>> hub.transports["memory"] = received.append
    >>> hub.error("boom")
    >>> received[0].level, received[0].data
    ('error', ('boom',))
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None) -> None:
        self.transports: dict[str, Any] = {}
        self._clock = clock

    def log_message(self, message: LogMessage) -> None:
        for transport in list(self.transports.values()):
            if transport is None or not callable(transport):
                continue
            if transport_accepts(transport, message.level):
                transport(message)

    def log_message_with_transports(
        self,
        message: LogMessage,
        transports: Sequence[Callable[[LogMessage], Any]],
    ) -> None:
        """Deliver ``message`` to ``transports`` without severity gating.

        Disabled transports (threshold ``None``/``False``) are still skipped.
        """

        for transport in transports:
            if transport is None or _threshold_of(transport) is None:
                continue
            transport(message)

    def log(self, level: SeverityLevel | str, *data: Any) -> None:
        self.log_message(LogMessage.create(level, *data, clock=self._clock))

    def error(self, *data: Any) -> None:
        self.log(SeverityLevel.ERROR, *data)

    def warn(self, *data: Any) -> None:
        self.log(SeverityLevel.WARN, *data)

    def info(self, *data: Any) -> None:
        self.log(SeverityLevel.INFO, *data)

    def verbose(self, *data: Any) -> None:
        self.log(SeverityLevel.VERBOSE, *data)

    def debug(self, *data: Any) -> None:
        self.log(SeverityLevel.DEBUG, *data)

    def silly(self, *data: Any) -> None:
        self.log(SeverityLevel.SILLY, *data)


__all__ = ["LogHub", "transport_accepts"]
