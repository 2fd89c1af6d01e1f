"""APIError tests — single error kind and its metadata."""

from shega_client.core.errors import (
    APIError, ErrorContext, http_status_message,
)


def test_message_is_str_of_error():
    err = APIError("Scheduler unavailable", 503)
    assert str(err) == "Scheduler unavailable"
    assert err.message == "Scheduler unavailable"
    assert err.status_code == 503


def test_transport_error_has_no_status():
    assert APIError("down").is_transport_error
    assert not APIError("bad", 400).is_transport_error


def test_to_dict_uses_detail_envelope():
    err = APIError("Not found", 404, ErrorContext(method="GET", path="/articles/1"))
    assert err.to_dict() == {
        "detail": "Not found", "status_code": 404, "path": "/articles/1",
    }


def test_default_context_has_timestamp():
    assert APIError("x").context.timestamp is not None


def test_http_status_message():
    assert http_status_message(404) == "HTTP error! status: 404"
