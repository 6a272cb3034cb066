"""
Acknowledgement models for `welcome` and `response` envelopes.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class WelcomeInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: Optional[str] = None
    message: Optional[str] = None


class AckClassification(BaseModel):
    """Outcome of classifying a `response` payload."""
    model_config = ConfigDict(frozen=True)

    is_error: bool
    message: Optional[str] = None
    code: Optional[str] = None
    error_type: Optional[str] = None
    topic: Optional[str] = None
    room: Optional[str] = None
