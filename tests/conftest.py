from __future__ import annotations

from collections.abc import Callable
from io import StringIO

import httpx
import pytest
from rich.console import Console

from lib_log_discord.adapters.scheduler import DeliveryScheduler
from lib_log_discord.adapters.webhook_client import HttpxWebhookClient
from lib_log_discord.domain.message import LogMessage

WEBHOOK = "https://discord.com/api/webhooks/0/a"


class RecordingConsole:
    """Collects errors passed to the console tier."""

    def __init__(self) -> None:
        self.errors: list[BaseException] = []

    def warn(self, error: BaseException) -> None:
        self.errors.append(error)


class FakeWebhook:
    """``httpx.MockTransport`` handler recording requests and answering with a fixed status."""

    def __init__(self, status_code: int = 204, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)

    def client(self) -> HttpxWebhookClient:
        return HttpxWebhookClient(transport=httpx.MockTransport(self))


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def fake_webhook() -> FakeWebhook:
    return FakeWebhook()


@pytest.fixture
def scheduler() -> DeliveryScheduler:
    instance = DeliveryScheduler()
    yield instance
    instance.stop(timeout=2.0)


@pytest.fixture
def make_message() -> Callable[..., LogMessage]:
    def factory(*data: object, level: str = "error", date: str = "2024-01-01T00:00:00.000Z") -> LogMessage:
        return LogMessage(data=data or ("boom",), level=level, date=date)

    return factory
