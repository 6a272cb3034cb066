"""
Websocket transport for the Astro gateway.

A Transport carries whole JSON messages over one full-duplex connection.
It is owned by a single Session and is not safe for concurrent callers.
"""

import asyncio
import json
from typing import Any, Optional, Protocol, Union

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from tipfax.errors import TransportError


class Transport(Protocol):
    async def connect(self, url: str) -> None: ...
    async def write_message(self, value: dict[str, Any]) -> None: ...
    async def read_message(self) -> Union[str, bytes]: ...
    async def close(self) -> None: ...


class WebSocketTransport:
    """`websockets`-backed Transport. Outbound dicts are JSON-encoded."""

    def __init__(self, open_timeout: Optional[float] = 10.0):
        self._open_timeout = open_timeout
        self._ws: Any = None

    @property
    def is_open(self) -> bool:
        return self._ws is not None

    async def connect(self, url: str) -> None:
        try:
            self._ws = await websockets.connect(url, open_timeout=self._open_timeout)
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            raise TransportError(f"Failed to connect to {url}: {e}")

    async def write_message(self, value: dict[str, Any]) -> None:
        if self._ws is None:
            raise TransportError("WebSocket is not connected")
        try:
            await self._ws.send(json.dumps(value))
        except (OSError, WebSocketException) as e:
            raise TransportError(f"Write failed: {e}")

    async def read_message(self) -> Union[str, bytes]:
        # No receive timeout: a silent peer blocks here indefinitely.
        if self._ws is None:
            raise TransportError("WebSocket is not connected")
        try:
            return await self._ws.recv()
        except ConnectionClosed as e:
            raise TransportError(f"Connection closed: {e}", code="connection_closed")
        except (OSError, WebSocketException) as e:
            raise TransportError(f"Read failed: {e}")

    async def close(self) -> None:
        ws, self._ws = self._ws, None
        if ws is None:
            return
        try:
            await ws.close()
        except (OSError, WebSocketException) as e:
            raise TransportError(f"Close failed: {e}")
