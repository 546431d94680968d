"""
Tests for the transport error taxonomy.
"""

import pytest
from pydantic import ValidationError

from requester.schemas.errors import (
    ErrorCodes,
    RequesterException,
    TransportError,
    TransportErrorModel,
    describe,
)


pytestmark = pytest.mark.unit


def test_standard_message():
    err = TransportError.from_code(ErrorCodes.COULDNT_RESOLVE_HOST, url="http://nope.invalid")

    assert err.code == 6
    assert err.message == "transport error: Couldn't resolve host name"
    assert str(err) == err.message
    assert err.details == {"url": "http://nope.invalid"}
    assert isinstance(err, RequesterException)


def test_custom_message():
    err = TransportError(ErrorCodes.OPERATION_TIMEDOUT, "transport error: gave up")

    assert err.message == "transport error: gave up"


def test_code_must_be_positive():
    with pytest.raises(ValueError):
        TransportError(0)


def test_describe_unknown_code():
    assert describe(999) == "Unknown error (999)"


def test_error_model_roundtrip():
    err = TransportError.from_code(ErrorCodes.PEER_FAILED_VERIFICATION, reason="self signed")

    model = err.to_error_model()
    assert model.code == 60
    assert model.details == {"reason": "self signed"}

    again = model.to_exception()
    assert isinstance(again, TransportError)
    assert again.code == err.code
    assert again.message == err.message


def test_error_model_rejects_zero_code():
    with pytest.raises(ValidationError):
        TransportErrorModel(code=0, message="nope")


def test_error_model_is_frozen():
    model = TransportErrorModel(code=7, message="transport error: x")

    with pytest.raises(ValidationError):
        model.code = 8


def test_repr():
    err = TransportError(ErrorCodes.COULDNT_CONNECT)

    assert repr(err) == (
        "TransportError(code=7, message=\"transport error: Couldn't connect to server\")"
    )
