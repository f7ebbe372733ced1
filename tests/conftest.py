"""Shared fixtures for the Jokes API and frontend tests."""

from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from jokes_api.app.main import app
from jokes_client import JokesAPI


EXPECTED_JOKES = [
    {"id": 1, "title": "Joke 1", "content": "This is a sample Joke"},
    {"id": 2, "title": "Joke 2", "content": "This is another sample Joke"},
    {"id": 3, "title": "Joke 3", "content": "This is yet another sample Joke"},
    {"id": 4, "title": "Joke 4", "content": "This is yet another sample Joke"},
    {"id": 5, "title": "Joke 5", "content": "This is yet another sample Joke"},
]


def make_response(status_code: int = 200, json_body: Optional[Any] = None, text: str = "") -> MagicMock:
    """Build a stand‑in for ``requests.Response``."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = b"payload" if json_body is not None or text else b""
    response.text = text
    if json_body is not None:
        response.json.return_value = json_body
    else:
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", text, 0)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session: MagicMock) -> JokesAPI:
    return JokesAPI(base_url="http://jokes.test", session=session)
