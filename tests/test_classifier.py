"""Response acknowledgement classification."""

import pytest

from tipfax.classifier import classify_response


@pytest.mark.parametrize("payload", [
    {"message": "Successfully subscribed"},
    {"message": "SUCCESS"},
    {"message": "subscribed to channel.tips"},
    {},
    {"topic": "channel.tips"},
])
def test_success(payload):
    assert classify_response(payload).is_error is False


@pytest.mark.parametrize("payload", [
    {"message": "invalid token"},
    {"message": "Unauthorized"},
    {"message": "Request failed"},
    {"message": "topic not found"},
    {"message": "Forbidden"},
    {"code": "E1"},
    {"type": "error"},
    {"message": "hello", "code": 401},
])
def test_error(payload):
    assert classify_response(payload).is_error is True


def test_success_keyword_beats_error_code():
    ack = classify_response({"message": "subscribed", "code": "E1"})
    assert ack.is_error is False
    assert ack.code == "E1"


def test_success_keyword_beats_error_keyword():
    assert classify_response({"message": "success: no error"}).is_error is False


def test_fields_are_extracted():
    ack = classify_response({
        "message": "invalid token",
        "code": "err_bad_token",
        "type": "error",
        "topic": "channel.tips",
        "room": "room-1",
    })
    assert ack.message == "invalid token"
    assert ack.code == "err_bad_token"
    assert ack.error_type == "error"
    assert ack.topic == "channel.tips"
    assert ack.room == "room-1"


def test_non_string_fields_degrade():
    ack = classify_response({"message": 42, "code": 403, "topic": ["x"], "room": None})
    assert ack.message is None
    assert ack.code == "403"
    assert ack.topic is None
    assert ack.room is None
    assert ack.is_error is True


def test_null_code_still_marks_error():
    ack = classify_response({"code": None})
    assert ack.is_error is True
    assert ack.code is None
