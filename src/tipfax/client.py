"""
TipClient / AsyncTipClient — main entry points.
"""

import asyncio
import logging
from typing import Any, Optional

from tipfax.dispatch import Dispatcher
from tipfax.errors import TransportError
from tipfax.models.events import ASTRO_URL, TIPS_TOPIC
from tipfax.session import Session, SessionState
from tipfax.sinks import ReceiptSink
from tipfax.transport.websocket import Transport, WebSocketTransport


class AsyncTipClient:
    """Async Astro tips client (primary)."""

    def __init__(
        self,
        token: Optional[str] = None,
        url: str = ASTRO_URL,
        sink: Optional[ReceiptSink] = None,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = Session(
            transport or WebSocketTransport(),
            token,
            url=url,
            topic=TIPS_TOPIC,
            logger=logger,
        )
        self.dispatcher = Dispatcher(self.session, sink=sink, logger=logger)
        self._log = logger or logging.getLogger("tipfax.client")

    @property
    def connected(self) -> bool:
        return self.session.connected

    @property
    def state(self) -> SessionState:
        return self.session.state

    async def connect(self) -> None:
        await self.session.connect()

    async def subscribe(self) -> str:
        return await self.session.subscribe()

    async def listen(self) -> None:
        """Run the dispatch loop until the connection fails or closes."""
        await self.dispatcher.run()

    async def unsubscribe(self) -> None:
        await self.session.unsubscribe()

    async def disconnect(self) -> None:
        await self.session.disconnect()

    async def run(self) -> None:
        """Connect, subscribe and dispatch; on the way out unsubscribe (if subscribed) and disconnect."""
        await self.connect()
        try:
            await self.subscribe()
            await self.listen()
        finally:
            if self.state is SessionState.SUBSCRIBED:
                await self.unsubscribe()
            try:
                await self.disconnect()
            except TransportError as e:
                self._log.error(f"Error disconnecting: {e}")


class TipClient:
    """Sync wrapper around AsyncTipClient. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncTipClient(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def connected(self) -> bool:
        return self._async.connected

    @property
    def state(self) -> SessionState:
        return self._async.state

    def connect(self) -> None:
        self._run(self._async.connect())

    def subscribe(self) -> str:
        return self._run(self._async.subscribe())

    def listen(self) -> None:
        self._run(self._async.listen())

    def unsubscribe(self) -> None:
        self._run(self._async.unsubscribe())

    def disconnect(self) -> None:
        self._run(self._async.disconnect())

    def run(self) -> None:
        self._run(self._async.run())

    def close(self) -> None:
        self._loop.close()
