"""Discord sink façade wiring domain, use cases, and adapters together.

Purpose
-------
Expose the object host applications interact with: validate the delivery
configuration, register a transport handle with a host logging system, and
turn every record handed to that handle into a fire-and-forget webhook
delivery.

Contents
--------
* :data:`TRANSPORT_KEY` - registry slot used on the host.
* :class:`DiscordConfig` - immutable, validated delivery parameters.
* :class:`TransportHandle` - callable registered with the host.
* :class:`DiscordTransport` - composition root for one sink.

System Role
-----------
Single composition point: the use cases stay free of I/O and host details,
while adapters are chosen (or injected) here.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable

from .adapters.clock import SystemClock
from .adapters.console.rich_console import RichWarningConsole
from .adapters.rendering import render_last_item
from .adapters.scheduler import DeliveryScheduler
from .adapters.webhook_client import HttpxWebhookClient
from .application.ports import ClockPort, LoggingHostPort, WarningConsolePort, WebhookClientPort
from .application.use_cases.build_payload import create_build_payload
from .application.use_cases.deliver import create_send
from .application.use_cases.report_error import ReportTier, create_report_error
from .domain import ConfigurationError, DeliveryError, DeliveryReceipt, LevelCell, LogMessage, SenderIdentity, SeverityLevel, WebhookPayload

logger = logging.getLogger(__name__)

TRANSPORT_KEY = "discord"


@dataclass(frozen=True, slots=True)
class DiscordConfig:
    """Validated delivery parameters.

    Parameters
    ----------
    webhook:
        Discord webhook URL; required and non-blank.
    username / avatar / thumb:
        Optional sender name, avatar URL and embed thumbnail URL.
    level:
        Initial threshold; ``None`` means ``silly``, ``False`` starts disabled.
    host:
        Host logging system to self-register with.
    render:
        Replaces the default last-item renderer when given.
    report_error:
        Replaces the failure-reporting cascade when given.

    Examples
    --------
    >>> DiscordConfig(webhook="https://discord.com/api/webhooks/0/a").level
    <SeverityLevel.SILLY: 0>
    >>> DiscordConfig(webhook="  ")
    Traceback (most recent call last):
    ...
    lib_log_discord.domain.errors.ConfigurationError: webhook is required.
    """

    webhook: str
    username: str | None = None
    avatar: str | None = None
    thumb: str | None = None
    level: SeverityLevel | str | bool | None = None
    host: LoggingHostPort | None = None
    render: Callable[[LogMessage], str] | None = None
    report_error: Callable[[BaseException], Any] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.webhook, str) or not self.webhook.strip():
            raise ConfigurationError("webhook")
        if self.level is None:
            level: SeverityLevel | bool = SeverityLevel.SILLY
        elif self.level is False:
            level = False
        else:
            level = SeverityLevel.coerce(self.level)
        object.__setattr__(self, "level", level)

    @property
    def identity(self) -> SenderIdentity:
        return SenderIdentity(username=self.username, avatar_url=self.avatar, thumbnail_url=self.thumb)


class TransportHandle:
    """Callable the host invokes per record; ``level`` is read live from the cell."""

    __slots__ = ("_deliver", "_cell")

    def __init__(self, deliver: Callable[[LogMessage], Any], cell: LevelCell) -> None:
        self._deliver = deliver
        self._cell = cell

    def __call__(self, message: LogMessage) -> Any:
        return self._deliver(message)

    @property
    def level(self) -> SeverityLevel | None:
        return self._cell.get()

    @level.setter
    def level(self, value: Any) -> None:
        self._cell.set(value)

    def __repr__(self) -> str:
        return f"TransportHandle(level={self.level!r})"


class DiscordTransport:
    """Forward log records to a Discord webhook as rich embeds.

    Parameters
    ----------
    config:
        Prepared :class:`DiscordConfig`; alternatively pass its fields as
        keyword ``options``. Options override fields of a given config.
    client:
        HTTP adapter; defaults to :class:`HttpxWebhookClient`.
    console:
        Last-resort warning writer; defaults to :class:`RichWarningConsole`.
    scheduler:
        Background delivery scheduler; defaults to a private
        :class:`DeliveryScheduler`.
    clock:
        Timestamp source for synthetic warning records.

    Examples
    --------
    >>> sink = DiscordTransport(webhook="https://x/y", username="App")
    >>> payload = sink.build_payload(LogMessage(data=("boom",), level="error", date="2024-01-01T00:00:00.000Z"))
    >>> payload.to_dict()["embeds"][0]["description"]
    "'boom'"
    """

    def __init__(
        self,
        config: DiscordConfig | None = None,
        /,
        *,
        client: WebhookClientPort | None = None,
        console: WarningConsolePort | None = None,
        scheduler: DeliveryScheduler | None = None,
        clock: ClockPort | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            if "webhook" not in options:
                raise ConfigurationError("webhook")
            config = DiscordConfig(**options)
        elif options:
            config = dataclasses.replace(config, **options)
        self.config = config
        self._cell = LevelCell(config.level)
        self._handle = TransportHandle(self.transport, self._cell)
        self._host: LoggingHostPort | None = None
        self._scheduler = scheduler if scheduler is not None else DeliveryScheduler()

        self._build_payload = create_build_payload(
            identity=config.identity,
            render=config.render if config.render is not None else render_last_item,
        )
        self._report_error = create_report_error(
            custom=config.report_error,
            host=lambda: self._host,
            own_handle=lambda: self._handle,
            console=console if console is not None else RichWarningConsole(),
            clock=clock if clock is not None else SystemClock(),
        )
        self._send = create_send(
            webhook=config.webhook,
            client=client if client is not None else HttpxWebhookClient(),
            report_error=self.report_error,
        )

        if config.host is not None:
            self.attach_to(config.host)

    @property
    def webhook(self) -> str:
        return self.config.webhook

    @property
    def handle(self) -> TransportHandle:
        """The callable registered with hosts; identity is stable for the sink's lifetime."""

        return self._handle

    @property
    def host(self) -> LoggingHostPort | None:
        return self._host

    @property
    def level(self) -> SeverityLevel | None:
        return self._cell.get()

    @level.setter
    def level(self, value: Any) -> None:
        self._cell.set(value)

    def get_factory(self) -> TransportHandle:
        """Return the handle to register manually with a host."""

        return self._handle

    def attach_to(self, host: LoggingHostPort) -> TransportHandle:
        """Register the handle at ``host.transports[TRANSPORT_KEY]``.

        Repeating the call with the same host rewrites the same slot, leaving a
        single registration.
        """

        host.transports[TRANSPORT_KEY] = self._handle
        self._host = host
        logger.debug("Registered Discord transport under %r", TRANSPORT_KEY)
        return self._handle

    def detach(self) -> None:
        """Remove the registration if the host slot still holds this handle."""

        host = self._host
        if host is None:
            return
        if host.transports.get(TRANSPORT_KEY) is self._handle:
            del host.transports[TRANSPORT_KEY]
        self._host = None

    def build_payload(self, message: LogMessage) -> WebhookPayload:
        return self._build_payload(message)

    def transport(self, message: LogMessage) -> Any:
        """Build the payload now and deliver it in the background.

        Returns the scheduled task or future; hosts are free to ignore it. A
        delivery cancelled before completing (for example by ``asyncio.run``
        shutting its loop down) is reported as a :class:`DeliveryError`.
        """

        payload = self._build_payload(message)
        return self._scheduler.submit(
            lambda: self._send(payload),
            on_cancel=lambda: self._report_cancelled(payload),
        )

    def _report_cancelled(self, payload: WebhookPayload) -> None:
        self.report_error(DeliveryError(self.config.webhook, reason="cancelled", payload=payload.to_dict()))

    async def send(self, payload: WebhookPayload) -> DeliveryReceipt | None:
        """POST ``payload`` once; failures are reported and resolve to ``None``."""

        return await self._send(payload)

    def report_error(self, error: BaseException) -> ReportTier:
        """Run the failure-reporting cascade for ``error``."""

        return self._report_error(error)

    def close(self, *, timeout: float | None = 5.0) -> None:
        """Wait for background deliveries and stop the delivery loop thread."""

        self._scheduler.stop(timeout=timeout)

    async def aclose(self, *, timeout: float | None = 5.0) -> None:
        """Await deliveries scheduled on the running loop, then :meth:`close`."""

        await self._scheduler.drain()
        self._scheduler.stop(timeout=timeout)

    def __repr__(self) -> str:
        return f"DiscordTransport(webhook={self.config.webhook!r}, level={self.level!r})"


__all__ = ["DiscordConfig", "DiscordTransport", "TRANSPORT_KEY", "TransportHandle"]
