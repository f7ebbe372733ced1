"""Tests for the requests‑based API client."""

from unittest.mock import MagicMock

import pytest
import requests

from jokes_client import DEFAULT_BASE_URL, JokesAPI

from .conftest import EXPECTED_JOKES, make_response


def test_list_jokes_requests_relative_path(api: JokesAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(json_body=EXPECTED_JOKES)

    jokes, error = api.list_jokes()

    assert error is None
    assert jokes == EXPECTED_JOKES
    session.request.assert_called_once_with(
        method="GET", url="http://jokes.test/api/jokes", params=None, timeout=None
    )


def test_list_jokes_returns_body_verbatim(api: JokesAPI, session: MagicMock) -> None:
    body = [{"id": 9, "title": "Z"}, {"id": 3, "title": "A", "extra": True}]
    session.request.return_value = make_response(json_body=body)

    jokes, error = api.list_jokes()

    assert error is None
    assert jokes == body


def test_http_error_is_reported(api: JokesAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(status_code=500, text="Internal Server Error")

    jokes, error = api.list_jokes()

    assert jokes is None
    assert error == {"status_code": 500, "message": "Internal Server Error"}


def test_http_error_prefers_detail(api: JokesAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(status_code=404, json_body={"detail": "Not Found"})

    jokes, error = api.list_jokes()

    assert jokes is None
    assert error == {"status_code": 404, "message": "Not Found"}


def test_connection_error_is_reported(api: JokesAPI, session: MagicMock) -> None:
    session.request.side_effect = requests.ConnectionError("connection refused")

    jokes, error = api.list_jokes()

    assert jokes is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_invalid_json_is_reported(api: JokesAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(text="<html>not json</html>")

    jokes, error = api.list_jokes()

    assert jokes is None
    assert error is not None


def test_base_url_resolution(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JOKES_API_URL", raising=False)
    assert JokesAPI().base_url == DEFAULT_BASE_URL

    monkeypatch.setenv("JOKES_API_URL", "http://api.test:9000/")
    assert JokesAPI().base_url == "http://api.test:9000"
    assert JokesAPI(base_url="http://explicit.test").base_url == "http://explicit.test"


def test_http_error_with_array_body_is_reported(api: JokesAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(status_code=502, json_body=["upstream", "down"])

    jokes, error = api.list_jokes()

    assert jokes is None
    assert error == {"status_code": 502, "message": "['upstream', 'down']"}


def test_http_error_with_scalar_body_is_reported(api: JokesAPI, session: MagicMock) -> None:
    session.request.return_value = make_response(status_code=500, json_body="boom")

    jokes, error = api.list_jokes()

    assert jokes is None
    assert error == {"status_code": 500, "message": "boom"}
