"""
Tip extraction from `message` envelopes on the tips topic.

Each field degrades to its default on its own, so a partly malformed
donation still produces a record.
"""

import logging
import math
from typing import Any, Optional

from tipfax.errors import ParseError
from tipfax.models.tip import TipRecord
from tipfax.sinks import ReceiptSink, receipt_lines

_logger = logging.getLogger("tipfax.tips")


def _str(mapping: dict[str, Any], key: str, default: str) -> str:
    value = mapping.get(key)
    return value if isinstance(value, str) else default


def _format_amount(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "0.00"
    try:
        amount = float(value)
    except OverflowError:
        return "0.00"
    # inf/nan (1e400, NaN, Infinity) have no two-digit form.
    if not math.isfinite(amount):
        return "0.00"
    return f"{amount:.2f}"


def parse_tip(data: Any) -> TipRecord:
    """Build a TipRecord from a tip payload. Raises ParseError if there is no donation."""
    if not isinstance(data, dict):
        raise ParseError(f"Tip data is not an object ({type(data).__name__})")

    donation = data.get("donation")
    if not isinstance(donation, dict):
        raise ParseError("Could not find donation data in tip message", details={"raw": data})

    user = donation.get("user")
    username = _str(user, "username", "Unknown") if isinstance(user, dict) else "Unknown"

    return TipRecord(
        username=username,
        amount=_format_amount(donation.get("amount")),
        currency=_str(donation, "currency", "USD"),
        message=_str(donation, "message", ""),
        status=_str(data, "status", "unknown"),
        provider=_str(data, "provider", "unknown"),
    )


def extract_tip(data: Any, logger: Optional[logging.Logger] = None) -> Optional[TipRecord]:
    """Like parse_tip, but logs and returns None instead of raising."""
    log = logger or _logger
    try:
        return parse_tip(data)
    except ParseError as e:
        log.error(f"Error parsing tip data: {e}")
        if e.details:
            log.error(f"Raw data: {e.details['raw']!r}")
        return None


def handle_tip(
    data: Any,
    sink: Optional[ReceiptSink] = None,
    logger: Optional[logging.Logger] = None,
) -> Optional[TipRecord]:
    """Extract a tip, log it and hand it to the sink (if any)."""
    log = logger or _logger
    log.info("NEW TIP RECEIVED!")

    record = extract_tip(data, log)
    if record is None:
        return None

    log.info(f"Tip from {record.username}: {record.amount} {record.currency} (via {record.provider})")
    log.info(f"Status: {record.status}")
    if record.message:
        log.info(f"Message: {record.message}")

    if sink is not None:
        try:
            for line in receipt_lines(record):
                sink.write_line(line)
            sink.cut()
        except Exception as e:
            # A jammed printer must not stop the receive loop.
            log.error(f"Receipt sink failed: {e}")
    return record
