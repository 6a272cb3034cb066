"""
Astro wire envelope.
"""

from typing import Any, Optional
from pydantic import BaseModel, field_validator


class Envelope(BaseModel):
    type: str = ""  # "welcome" | "response" | "message" | anything else
    topic: str = ""
    nonce: str = ""
    data: Optional[Any] = None

    @field_validator("type", "topic", "nonce", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class SubscriptionData(BaseModel):
    topic: str
    token: str
    token_type: str = "jwt"


class SubscriptionRequest(BaseModel):
    """Outbound subscribe/unsubscribe. No top-level topic on the wire."""
    type: str  # "subscribe" | "unsubscribe"
    nonce: str
    data: SubscriptionData
