from __future__ import annotations

import pytest

from ircbot.irc.dispatcher import IRCDispatcher
from ircbot.logging_config import error_aggregator


class FakeConnection:
    """Captures outbound bytes instead of writing to a socket."""

    def __init__(self) -> None:
        self.sent: list[bytes] = []

    def sendall(self, data: bytes) -> None:
        self.sent.append(data)

    @property
    def lines(self) -> list[str]:
        return [d.decode("utf-8").removesuffix("\r\n") for d in self.sent]


class CollectingSink:
    """Error sink that records everything put on it."""

    def __init__(self) -> None:
        self.items: list[BaseException] = []

    def put(self, item: BaseException) -> None:
        self.items.append(item)


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def client(connection: FakeConnection) -> IRCDispatcher:
    return IRCDispatcher(connection)


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture(autouse=True)
def _reset_error_aggregator():
    error_aggregator.reset()
    yield
    error_aggregator.reset()
