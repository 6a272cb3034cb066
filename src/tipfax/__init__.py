"""
tipfax — StreamElements tips to a receipt printer.

Websocket client for the StreamElements Astro gateway: subscribes to the
tips topic and hands each tip to a receipt sink.
"""

from tipfax.client import TipClient, AsyncTipClient
from tipfax.classifier import classify_response
from tipfax.dispatch import Dispatcher
from tipfax.errors import TipfaxError, ConfigError, TransportError, ParseError
from tipfax.models.events import TIPS_TOPIC, TIPS_MODERATION_TOPIC
from tipfax.models.tip import TipRecord
from tipfax.session import Session, SessionState
from tipfax.tips import extract_tip

__version__ = "0.1.0"
__all__ = [
    "TipClient",
    "AsyncTipClient",
    "Session",
    "SessionState",
    "Dispatcher",
    "classify_response",
    "extract_tip",
    "TipRecord",
    "TipfaxError",
    "ConfigError",
    "TransportError",
    "ParseError",
    "TIPS_TOPIC",
    "TIPS_MODERATION_TOPIC",
]
