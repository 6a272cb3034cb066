"""
Astro message types and topics.
"""

ASTRO_URL = "wss://astro.streamelements.com/"

TIPS_TOPIC = "channel.tips"
TIPS_MODERATION_TOPIC = "channel.tips.moderation"


class OutboundType:
    """Client -> server envelope types."""
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"


class InboundType:
    """Server -> client envelope types."""
    WELCOME = "welcome"
    RESPONSE = "response"
    MESSAGE = "message"
