"""
Classification of `response` acknowledgements.

The gateway does not give a reliable status field, so success and failure
are inferred from the message text, then from `code` / `type` fields.
"""

from typing import Any, Mapping, Optional

from tipfax.models.ack import AckClassification

SUCCESS_KEYWORDS = ("success", "subscribed")
ERROR_KEYWORDS = ("error", "failed", "invalid", "unauthorized", "forbidden", "not found")


def _text(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def classify_response(data: Mapping[str, Any]) -> AckClassification:
    """Classify a response payload as success or error.

    A success keyword in `message` wins over everything else, including a
    `code` field.
    """
    message = _text(data, "message")
    error_type = _text(data, "type")

    lowered = message.lower() if message is not None else ""
    if message is not None and any(k in lowered for k in SUCCESS_KEYWORDS):
        is_error = False
    else:
        is_error = (
            any(k in lowered for k in ERROR_KEYWORDS)
            or "code" in data
            or error_type == "error"
        )

    code = data.get("code")
    return AckClassification(
        is_error=is_error,
        message=message,
        code=None if code is None else str(code),
        error_type=error_type,
        topic=_text(data, "topic"),
        room=_text(data, "room"),
    )
