"""Shared fixtures: fake timer, recording notifier, mock-transport dispatcher."""
from __future__ import annotations

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from fsclient.dispatch import Dispatcher
from fsclient.session import SessionMonitor

BASE_URL = "http://gateway.test"


class FakeScheduler:
    """Collects scheduled callbacks; tests fire them explicitly."""

    def __init__(self) -> None:
        self.pending: list[tuple[float, Callable[[], None]]] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> object:
        self.pending.append((delay, callback))
        return object()

    def fire_all(self) -> None:
        due, self.pending = self.pending, []
        for _, callback in due:
            callback()


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def show(self, message: str) -> None:
        self.messages.append(message)


class StaticTokenStore:
    def __init__(self, token: str | None = "tok-123") -> None:
        self.token = token
        self.reads = 0

    def read(self) -> str | None:
        self.reads += 1
        return self.token


class Recorder:
    """MockTransport handler that records requests and replies via `respond`."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda r: httpx.Response(200, text="ok")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def tokens() -> StaticTokenStore:
    return StaticTokenStore()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def session(notifier: RecordingNotifier, scheduler: FakeScheduler) -> SessionMonitor:
    return SessionMonitor(notifier, delay_s=0.5, schedule=scheduler)


@pytest_asyncio.fixture
async def http(recorder: Recorder) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
        yield client


@pytest.fixture
def dispatcher(
    http: httpx.AsyncClient,
    tokens: StaticTokenStore,
    session: SessionMonitor,
    notifier: RecordingNotifier,
) -> Dispatcher:
    return Dispatcher(http, tokens, session, notifier)
