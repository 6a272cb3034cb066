"""
Astro session — owns the connection and the subscription handshake.

State machine:
    DISCONNECTED -[connect]-> CONNECTED -[subscribe]-> SUBSCRIBED
    SUBSCRIBED -[unsubscribe]-> CONNECTED -[disconnect]-> DISCONNECTED

Not safe for concurrent callers; serialize access externally.
"""

import enum
import logging
from typing import Optional

from tipfax.errors import ConfigError, TransportError
from tipfax.models.envelope import Envelope
from tipfax.models.events import ASTRO_URL, TIPS_TOPIC, OutboundType
from tipfax.transport.envelope import build_subscription, decode_envelope
from tipfax.transport.websocket import Transport

MIN_PLAUSIBLE_TOKEN_LENGTH = 50

_logger = logging.getLogger("tipfax.session")


class SessionState(str, enum.Enum):
    DISCONNECTED = "disconnected"
    CONNECTED = "connected"
    SUBSCRIBED = "subscribed"


def mask_token(token: str) -> str:
    """Short preview of a token for logs: first and last 10 chars."""
    if len(token) > 20:
        return f"{token[:10]}...{token[-10:]}"
    return token


class Session:
    def __init__(
        self,
        transport: Transport,
        token: Optional[str],
        url: str = ASTRO_URL,
        topic: str = TIPS_TOPIC,
        logger: Optional[logging.Logger] = None,
    ):
        self._transport = transport
        self._token = token or ""
        self._url = url
        self._topic = topic
        self._log = logger or _logger
        self._state = SessionState.DISCONNECTED
        self._last_nonce: Optional[str] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state is not SessionState.DISCONNECTED

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def last_nonce(self) -> Optional[str]:
        """Nonce of the last subscribe request. Diagnostic only."""
        return self._last_nonce

    async def connect(self) -> None:
        """Dial the gateway. A failure here is fatal to the caller."""
        if self.connected:
            return
        self._log.info(f"Connecting to {self._url}")
        await self._transport.connect(self._url)
        self._state = SessionState.CONNECTED
        self._log.info("Connected to Astro")

    async def subscribe(self) -> str:
        """Send a subscribe request for the topic and return its nonce.

        Does not wait for the acknowledgement; it arrives later as a
        `response` envelope in the dispatch loop.
        """
        if not self._token:
            raise ConfigError("SE_JWT_TOKEN is empty or not set")
        if len(self._token) < MIN_PLAUSIBLE_TOKEN_LENGTH:
            self._log.warning(
                f"JWT token seems unusually short ({len(self._token)} chars). This might be invalid."
            )
        if not self.connected:
            raise TransportError("Not connected. Call connect() first.")

        request = build_subscription(OutboundType.SUBSCRIBE, self._topic, self._token)
        nonce = request["nonce"]
        self._log.info(
            f"Subscribing to topic '{self._topic}' with nonce '{nonce}' "
            f"(token length: {len(self._token)}, preview: {mask_token(self._token)})"
        )
        try:
            await self._transport.write_message(request)
        except TransportError as e:
            self._log.error(f"Error sending subscription message: {e}")
            raise
        self._last_nonce = nonce
        self._state = SessionState.SUBSCRIBED
        self._log.info("Subscription message sent, waiting for response...")
        return nonce

    async def unsubscribe(self) -> None:
        """Best-effort unsubscribe. Write failures are logged, never raised."""
        request = build_subscription(OutboundType.UNSUBSCRIBE, self._topic, self._token)
        if not self.connected:
            self._log.error("Error unsubscribing: not connected")
        else:
            try:
                await self._transport.write_message(request)
            except TransportError as e:
                self._log.error(f"Error unsubscribing: {e}")
            self._state = SessionState.CONNECTED
        self._log.info(f"Unsubscribed from Astro topic: {self._topic}")

    async def disconnect(self) -> None:
        """Close the connection. Safe to call repeatedly or after a failed read."""
        if not self.connected:
            return
        self._log.info("Disconnecting from Astro")
        self._state = SessionState.DISCONNECTED
        await self._transport.close()

    async def read_envelope(self) -> Envelope:
        """Block until the next envelope arrives. Raises TransportError."""
        if not self.connected:
            raise TransportError("Not connected. Call connect() first.")
        raw = await self._transport.read_message()
        return decode_envelope(raw)
