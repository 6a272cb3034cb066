"""Basic unit tests for the tipfax package."""

from tipfax import (
    AsyncTipClient,
    TipClient,
    TipfaxError,
    ConfigError,
    TransportError,
    ParseError,
    TIPS_TOPIC,
    TIPS_MODERATION_TOPIC,
    __version__,
)
from tipfax.models.events import InboundType, OutboundType


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert TipClient is not None
    assert AsyncTipClient is not None


def test_error_hierarchy():
    assert issubclass(ConfigError, TipfaxError)
    assert issubclass(TransportError, TipfaxError)
    assert issubclass(ParseError, TipfaxError)


def test_error_attributes():
    err = TipfaxError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    assert ConfigError("no token").code == "config_error"
    decode = TransportError("bad frame", code="decode_error", details={"raw": "x"})
    assert decode.code == "decode_error"
    assert decode.details == {"raw": "x"}
    assert ParseError("no donation").code == "parse_error"


def test_event_constants():
    assert TIPS_TOPIC == "channel.tips"
    assert TIPS_MODERATION_TOPIC == "channel.tips.moderation"
    assert OutboundType.SUBSCRIBE == "subscribe"
    assert InboundType.MESSAGE == "message"
