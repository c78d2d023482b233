"""
Shared pytest fixtures for Strava MCP testing.
"""
import json
from http import HTTPStatus
from unittest.mock import Mock

import pytest
import requests

from strava_mcp.sdk.auth import TokenStore
from strava_mcp.sdk.client import StravaClient

NOW = 1_700_000_000


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict)
    or a plain list depending on the mcp version.
    This helper extracts the text from the first TextContent item.
    """
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def make_response(status_code=200, body=None, reason=None):
    """Build a real requests.Response with a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason if reason is not None else HTTPStatus(status_code).phrase
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body if isinstance(body, bytes) else body.encode()
    else:
        response._content = json.dumps(body).encode()
    return response


def token_payload(access_token="new", refresh_token="new-r", expires_in=21600, now=NOW):
    """Token endpoint success body."""
    return {
        "token_type": "Bearer",
        "access_token": access_token,
        "refresh_token": refresh_token,
        "expires_at": now + expires_in,
        "expires_in": expires_in,
    }


@pytest.fixture
def mock_session():
    """A requests.Session double; set .post / .request return values per test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def token_store(mock_session):
    """TokenStore with a mocked session and a frozen clock at NOW."""
    return TokenStore(
        "12345",
        "s3cret",
        session=mock_session,
        clock=lambda: NOW,
    )


@pytest.fixture
def authenticated_store(token_store):
    """TokenStore holding a credential that is valid for a long time."""
    token_store.set_credential("stored", "stored-r", NOW + 10000)
    return token_store


@pytest.fixture
def mock_client():
    """A StravaClient double for tool tests.

    Tool modules call sdk functions, which are patched per test, so the
    client itself only needs a token store.
    """
    client = Mock(spec=StravaClient)
    client.token_store = Mock(spec=TokenStore)
    client.bool_param = StravaClient.bool_param
    return client
