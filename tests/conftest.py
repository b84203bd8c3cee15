"""
Pytest configuration and fixtures for request wrapper tests
"""

import json
from http.client import responses as reason_phrases
from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from easy_request.config import Config


def build_response(
    status: int = 200,
    json_body=None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
    url: str = "https://api.example.com/items",
) -> requests.Response:
    """Build a real requests.Response without touching the network"""
    response = requests.Response()
    response.status_code = status
    response.reason = reason_phrases.get(status, "")
    response.url = url
    response.encoding = "utf-8"

    response_headers = dict(headers or {})
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response_headers.setdefault("Content-Type", "application/json")
    elif text is not None:
        response._content = text.encode("utf-8")
        response_headers.setdefault("Content-Type", "text/html; charset=utf-8")
    else:
        response._content = b""

    response.headers = CaseInsensitiveDict(response_headers)
    return response


@pytest.fixture
def make_response():
    """Factory fixture for requests.Response objects"""
    return build_response


@pytest.fixture
def test_config():
    """Config without defaults so transport kwargs stay exactly as passed"""
    return Config({"request": {}})


@pytest.fixture
def mock_http_client(make_response):
    """Mock HTTP client answering 200 {"id": 1}"""
    client = Mock()
    client.request.return_value = make_response(200, json_body={"id": 1})
    return client
