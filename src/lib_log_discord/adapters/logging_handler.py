"""Bridge letting the stdlib :mod:`logging` module act as the host.

Purpose
-------
Translate :class:`logging.LogRecord` objects into :class:`LogMessage` records
and hand them to a transport handle, honouring the handle's live threshold.

Contents
--------
* :func:`severity_from_python_level` - stdlib level number to severity.
* :class:`DiscordLogHandler` - ``logging.Handler`` forwarding to a transport.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone

from lib_log_discord.application.ports.host import TransportPort
from lib_log_discord.domain.levels import SeverityLevel
from lib_log_discord.domain.message import LogMessage

#: Loggers whose records describe the delivery itself; forwarding them would
#: turn every webhook POST into another record.
INTERNAL_LOGGERS = ("lib_log_discord", "httpx", "httpcore")


def severity_from_python_level(levelno: int) -> SeverityLevel:
    """Map a stdlib level number onto :class:`SeverityLevel`.

    Examples
    --------
    >>> severity_from_python_level(logging.CRITICAL)
    <SeverityLevel.ERROR: 50>
    >>> severity_from_python_level(logging.WARNING)
    <SeverityLevel.WARN: 40>
    >>> severity_from_python_level(5)
    <SeverityLevel.SILLY: 0>
    """

    if levelno >= logging.ERROR:
        return SeverityLevel.ERROR
    if levelno >= logging.WARNING:
        return SeverityLevel.WARN
    if levelno >= logging.INFO:
        return SeverityLevel.INFO
    if levelno >= logging.DEBUG:
        return SeverityLevel.DEBUG
    return SeverityLevel.SILLY


def is_internal_record(record: logging.LogRecord) -> bool:
    """Return ``True`` for records emitted by this package or its HTTP stack.

    Examples
    --------
    >>> is_internal_record(logging.makeLogRecord({"name": "httpx"}))
    True
    >>> is_internal_record(logging.makeLogRecord({"name": "httpxtra"}))
    False
    """

    name = record.name or ""
    return any(name == prefix or name.startswith(f"{prefix}.") for prefix in INTERNAL_LOGGERS)


class DiscordLogHandler(logging.Handler):
    """Forward stdlib log records to a Discord transport handle.

    The handle's ``level`` is consulted on every record, so changing the
    transport threshold at runtime also affects this handler. The handler's
    own stdlib level still applies first.

    Records from :data:`INTERNAL_LOGGERS` and records logged on a thread that
    is already inside :meth:`emit` are dropped, so delivery diagnostics never
    loop back into the webhook.
    """

    def __init__(self, transport: TransportPort, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._transport = transport
        self._emitting = threading.local()

    def emit(self, record: logging.LogRecord) -> None:
        if is_internal_record(record) or getattr(self._emitting, "active", False):
            return
        severity = severity_from_python_level(record.levelno)
        threshold = self._transport.level
        if threshold is None or threshold is False:
            return
        if not SeverityLevel.coerce(threshold).allows(severity):
            return
        self._emitting.active = True
        try:
            self._transport(self.to_message(record, severity))
        except Exception:  # noqa: BLE001
            self.handleError(record)
        finally:
            self._emitting.active = False

    def to_message(self, record: logging.LogRecord, severity: SeverityLevel | None = None) -> LogMessage:
        """Build the :class:`LogMessage` for ``record``.

        The formatted message comes first; the logged exception, when present,
        is appended as the last item so it is the part rendered into the embed.
        """

        severity = severity or severity_from_python_level(record.levelno)
        data: list[object] = [self.format(record) if self.formatter else record.getMessage()]
        if record.exc_info and record.exc_info[1] is not None:
            data.append(record.exc_info[1])
        date = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return LogMessage(data=tuple(data), level=severity.severity, date=date)


__all__ = ["DiscordLogHandler", "INTERNAL_LOGGERS", "is_internal_record", "severity_from_python_level"]
