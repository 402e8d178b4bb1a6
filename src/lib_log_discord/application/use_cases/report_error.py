"""Failure-reporting cascade with self-exclusion.

Purpose
-------
Surface delivery failures without ever routing them back into the sink that
produced them.

Contents
--------
* :class:`ReportTier` - which tier handled a given error.
* :func:`create_report_error` - factory returning the cascade callable.
* :func:`collect_peers` - peer transports of a host, excluding one handle.

System Role
-----------
Exactly one tier fires per error: the caller's hook, a rebroadcast to every
other transport registered on the host, or a local console warning.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from lib_log_discord.application.ports.console import WarningConsolePort
from lib_log_discord.application.ports.host import LoggingHostPort
from lib_log_discord.application.ports.time import ClockPort
from lib_log_discord.domain.levels import SeverityLevel
from lib_log_discord.domain.message import LogMessage


class ReportTier(Enum):
    CUSTOM = "custom"
    PEERS = "peers"
    CONSOLE = "console"


ReportErrorCallable = Callable[[BaseException], ReportTier]


def create_report_error(
    *,
    custom: Callable[[BaseException], Any] | None,
    host: Callable[[], LoggingHostPort | None],
    own_handle: Callable[[], Any],
    console: WarningConsolePort,
    clock: ClockPort,
) -> ReportErrorCallable:
    """Return the cascade bound to the sink's collaborators.

    Parameters
    ----------
    custom:
        Caller-supplied hook; when present it replaces every other tier.
    host:
        Accessor for the currently attached host (``None`` when detached).
        Read lazily because the sink may be attached after construction.
    own_handle:
        Accessor for the sink's own registered handle, excluded by identity.
    console:
        Last-resort warning writer.
    clock:
        Timestamp source for the synthetic warning record.

    Examples
    --------
    >>> seen = []
    >>> report = create_report_error(
    ...     custom=seen.append,
    ...     host=lambda: None,
    ...     own_handle=lambda: None,
    ...     console=None,
    ...     clock=None,
    ... )
    >>> report(RuntimeError("down"))
    <ReportTier.CUSTOM: 'custom'>
    >>> seen
    [RuntimeError('down')]
    """

    def report_error(error: BaseException) -> ReportTier:
        if custom is not None:
            custom(error)
            return ReportTier.CUSTOM

        attached = host()
        rebroadcast = getattr(attached, "log_message_with_transports", None)
        if attached is not None and callable(rebroadcast):
            peers = collect_peers(attached.transports.values(), exclude=own_handle())
            if peers:
                message = LogMessage(data=(error,), level=SeverityLevel.WARN.severity, date=clock.now())
                rebroadcast(message, peers)
                return ReportTier.PEERS

        console.warn(error)
        return ReportTier.CONSOLE

    return report_error


def collect_peers(transports: Iterable[Any], *, exclude: Any) -> list[Callable[[LogMessage], Any]]:
    """Return enabled, callable transports other than ``exclude``, each at most once.

    Comparison is by identity, so handles sharing a name or registered under
    several keys are still told apart correctly. Transports whose ``level`` is
    ``None``/``False`` are disabled and skipped.

    Examples
    --------
    >>> a, b = (lambda m: None), (lambda m: None)
    >>> collect_peers([a, b, a, None], exclude=b) == [a]
    True
    """

    peers: list[Callable[[LogMessage], Any]] = []
    seen: set[int] = set()
    for transport in transports:
        if transport is None or transport is exclude or not callable(transport):
            continue
        if id(transport) in seen or _disabled(transport):
            continue
        seen.add(id(transport))
        peers.append(transport)
    return peers


def _disabled(transport: Any) -> bool:
    level = getattr(transport, "level", SeverityLevel.SILLY)
    return level is None or level is False


__all__ = ["ReportErrorCallable", "ReportTier", "collect_peers", "create_report_error"]
