"""
Envelope construction and parsing.
"""

import json
import uuid
from typing import Any, Union

from pydantic import ValidationError

from tipfax.errors import TransportError
from tipfax.models.envelope import Envelope, SubscriptionData, SubscriptionRequest


def build_subscription(kind: str, topic: str, token: str) -> dict[str, Any]:
    """Build a subscribe/unsubscribe request as a dict ready to be written.

    Every call gets a fresh nonce.
    """
    request = SubscriptionRequest(
        type=kind,
        nonce=str(uuid.uuid4()),
        data=SubscriptionData(topic=topic, token=token, token_type="jwt"),
    )
    return request.model_dump()


def decode_envelope(raw: Union[str, bytes, dict[str, Any]]) -> Envelope:
    """Decode one inbound frame. Raises TransportError(code="decode_error") if it is not an envelope."""
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise TransportError(f"Malformed frame: {e}", code="decode_error")
    if not isinstance(raw, dict):
        raise TransportError(f"Expected a JSON object, got {type(raw).__name__}", code="decode_error")
    try:
        return Envelope.model_validate(raw)
    except ValidationError as e:
        raise TransportError(f"Malformed envelope: {e}", code="decode_error", details={"raw": raw})
