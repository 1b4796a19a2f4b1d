"""
Shared fixtures: canned provider responses and a mocked HTTP session.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> Any:
    """Load a JSON fixture from tests/fixtures."""
    with open(FIXTURES_DIR / name, encoding="utf-8") as f:
        return json.load(f)


def make_response(
    payload: Any = None,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[bytes] = None,
    url: str = "https://example.test/",
) -> requests.Response:
    """Build a real requests.Response so raise_for_status() and json() behave as in production."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    return response


def mock_get(geocoder, *responses) -> MagicMock:
    """Replace the geocoder's session.get, returning the given responses in order."""
    get = MagicMock(side_effect=list(responses))
    geocoder.session.get = get
    return get


def sent_params(get: MagicMock, call: int = -1) -> Dict[str, str]:
    """Query parameters of a recorded call, as a dict."""
    return dict(get.call_args_list[call].kwargs["params"])


def sent_url(get: MagicMock, call: int = -1) -> str:
    return get.call_args_list[call].args[0]


@pytest.fixture
def fixture_response():
    """Factory: fixture_response("name.json", headers={...}) -> requests.Response."""
    def _factory(name: str, **kwargs) -> requests.Response:
        return make_response(load_fixture(name), **kwargs)
    return _factory
