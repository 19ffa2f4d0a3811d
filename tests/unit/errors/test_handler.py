"""Tests for error handling utilities."""

import pytest
from httpx import Response

from infra_console_client.errors.exceptions import (
    ClientError,
    ForbiddenError,
    HTTPStatusError,
    MalformedResponseError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)
from infra_console_client.errors.handler import raise_for_status, unwrap_envelope


@pytest.mark.unit
def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    response = Response(status_code=200)

    # Should not raise
    raise_for_status(response)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (400, ClientError),
        (418, ClientError),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_raise_for_status_maps_status_codes(status_code, exc_class):
    """Test raise_for_status picks the exception class from the status code."""
    response = Response(status_code=status_code, text="nope")

    with pytest.raises(exc_class) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.response == response


@pytest.mark.unit
def test_raise_for_status_generic_4xx_is_not_specific():
    """Test an unmapped 4xx is a plain ClientError."""
    with pytest.raises(ClientError) as exc_info:
        raise_for_status(Response(status_code=418, text="I'm a teapot"))

    assert not isinstance(exc_info.value, NotFoundError)


@pytest.mark.unit
def test_raise_for_status_non_error_status_outside_2xx():
    """Test a 3xx that reaches us is still an HTTPStatusError."""
    with pytest.raises(HTTPStatusError) as exc_info:
        raise_for_status(Response(status_code=304))

    assert type(exc_info.value) is HTTPStatusError
    assert str(exc_info.value) == "HTTP 304"


@pytest.mark.unit
def test_raise_for_status_plain_text_error():
    """Test raise_for_status includes plain text bodies."""
    response = Response(
        status_code=500,
        headers={"content-type": "text/plain"},
        text="Internal Server Error",
    )

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert "500" in str(exc_info.value)
    assert "Internal Server Error" in str(exc_info.value)
    assert exc_info.value.envelope is None


@pytest.mark.unit
def test_raise_for_status_uses_envelope_msg():
    """Test an envelope-shaped error body supplies the detail."""
    response = Response(status_code=404, json={"code": 1, "msg": "server not found", "data": None})

    with pytest.raises(NotFoundError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "HTTP 404: server not found"
    assert exc_info.value.envelope is not None
    assert exc_info.value.envelope.code == 1


@pytest.mark.unit
def test_raise_for_status_truncates_long_bodies():
    response = Response(status_code=502, text="x" * 1000)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert str(exc_info.value) == "HTTP 502: " + "x" * 200


@pytest.mark.unit
def test_unwrap_envelope_returns_envelope():
    response = Response(status_code=200, json={"code": 0, "msg": "ok", "data": {"id": 7}})

    envelope = unwrap_envelope(response)

    assert envelope.code == 0
    assert envelope.msg == "ok"
    assert envelope.data == {"id": 7}


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "<html>gateway</html>"},
        {"json": [1, 2, 3]},
        {"json": {"msg": "no code"}},
        {"content": b""},
    ],
)
def test_unwrap_envelope_rejects_non_envelopes(kwargs):
    response = Response(status_code=200, **kwargs)

    with pytest.raises(MalformedResponseError) as exc_info:
        unwrap_envelope(response)

    assert exc_info.value.response == response
