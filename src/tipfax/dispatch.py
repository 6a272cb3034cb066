"""
Dispatch loop — reads envelopes from the session and routes them by type.

Tier 1: welcome   -> informational log
Tier 2: response  -> acknowledgement classification
Tier 3: message   -> tip extraction (tips topic only)
Anything else is logged as unknown; the loop never stops for it.
"""

import logging
from typing import Any, Optional, Union

from tipfax.classifier import classify_response
from tipfax.errors import TransportError
from tipfax.models.ack import AckClassification, WelcomeInfo
from tipfax.models.envelope import Envelope
from tipfax.models.events import InboundType
from tipfax.models.tip import TipRecord
from tipfax.session import Session
from tipfax.sinks import ReceiptSink
from tipfax.tips import handle_tip

_logger = logging.getLogger("tipfax.dispatch")

DispatchResult = Optional[Union[WelcomeInfo, AckClassification, TipRecord]]


def extract_welcome(data: Any) -> WelcomeInfo:
    if not isinstance(data, dict):
        return WelcomeInfo()
    client_id = data.get("client_id")
    message = data.get("message")
    return WelcomeInfo(
        client_id=client_id if isinstance(client_id, str) else None,
        message=message if isinstance(message, str) else None,
    )


class Dispatcher:
    """Single-threaded receive loop over one Session.

    The sink runs inline: a slow printer stalls dispatch until it returns.
    """

    def __init__(
        self,
        session: Session,
        sink: Optional[ReceiptSink] = None,
        tips_topic: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self._sink = sink
        self._tips_topic = tips_topic or session.topic
        self._log = logger or _logger

    async def run(self) -> None:
        """Dispatch until the session read fails; the TransportError propagates."""
        while True:
            try:
                envelope = await self._session.read_envelope()
            except TransportError as e:
                self._log.error(f"Error reading message: {e}")
                raise
            self.dispatch(envelope)

    def dispatch(self, envelope: Envelope) -> DispatchResult:
        self._log.debug(f"Received message: {envelope!r}")
        if envelope.type == InboundType.WELCOME:
            return self._on_welcome(envelope)
        if envelope.type == InboundType.RESPONSE:
            return self._on_response(envelope)
        if envelope.type == InboundType.MESSAGE:
            return self._on_message(envelope)
        self._log.warning(f"Received unknown message type '{envelope.type}': {envelope!r}")
        return None

    def _on_welcome(self, envelope: Envelope) -> WelcomeInfo:
        info = extract_welcome(envelope.data)
        if info.client_id is not None:
            self._log.info(f"Connected to Astro (client_id: {info.client_id})")
        if info.message is not None:
            self._log.info(f"   {info.message}")
        return info

    def _on_response(self, envelope: Envelope) -> Optional[AckClassification]:
        self._log.info(f"Received response: Type={envelope.type}, Nonce={envelope.nonce}")
        expected = self._session.last_nonce
        if expected and envelope.nonce and envelope.nonce != expected:
            self._log.debug(f"Response nonce {envelope.nonce} does not match last subscribe nonce {expected}")

        data = envelope.data
        if not isinstance(data, dict):
            self._log.info(f"Response data (raw): {data!r}")
            return None

        ack = classify_response(data)
        if ack.is_error:
            self._log.error(f"Error response: {ack.message}")
            if ack.code is not None:
                self._log.error(f"   Error code: {ack.code}")
            if ack.error_type is not None:
                self._log.error(f"   Error type: {ack.error_type}")
            self._log.error(f"   Full response data: {data!r}")
        else:
            if ack.message is not None:
                self._log.info(ack.message)
            else:
                self._log.info(f"Success response: {data!r}")
            if ack.topic is not None:
                self._log.info(f"   Topic: {ack.topic}")
            if ack.room is not None:
                self._log.info(f"   Room: {ack.room}")
        return ack

    def _on_message(self, envelope: Envelope) -> Optional[TipRecord]:
        self._log.info(f"Received notification on topic '{envelope.topic}'")
        if envelope.topic != self._tips_topic:
            self._log.info(f"Ignoring message on topic '{envelope.topic}'")
            return None
        return handle_tip(envelope.data, self._sink, self._log)
