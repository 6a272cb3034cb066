"""Shared fixtures: an in-memory Transport standing in for the websocket."""

import json
from typing import Any, Optional

import pytest

from tipfax.errors import TransportError
from tipfax.sinks import MemorySink

TOKEN = "eyJhbGciOiJIUzI1NiJ9." + "a" * 60 + ".signature"


class FakeTransport:
    def __init__(
        self,
        inbound: Optional[list[Any]] = None,
        fail_connect: bool = False,
        fail_write: bool = False,
        fail_close: bool = False,
    ) -> None:
        self.inbound = list(inbound or [])
        self.fail_connect = fail_connect
        self.fail_write = fail_write
        self.fail_close = fail_close
        self.urls: list[str] = []
        self.sent: list[dict[str, Any]] = []
        self.close_calls = 0
        self.open = False

    async def connect(self, url: str) -> None:
        self.urls.append(url)
        if self.fail_connect:
            raise TransportError(f"Failed to connect to {url}: refused")
        self.open = True

    async def write_message(self, value: dict[str, Any]) -> None:
        if self.fail_write or not self.open:
            raise TransportError("Write failed: broken pipe")
        self.sent.append(value)

    async def read_message(self) -> Any:
        if not self.inbound:
            raise TransportError("Connection closed: 1000 (OK)", code="connection_closed")
        item = self.inbound.pop(0)
        if isinstance(item, Exception):
            raise item
        return item if isinstance(item, (str, bytes)) else json.dumps(item)

    async def close(self) -> None:
        self.close_calls += 1
        self.open = False
        if self.fail_close:
            raise TransportError("Close failed: socket already shut down")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


def tip_payload() -> dict[str, Any]:
    return {
        "donation": {
            "user": {"username": "alice"},
            "amount": 5,
            "currency": "USD",
            "message": "go team",
        },
        "status": "completed",
        "provider": "paypal",
    }
