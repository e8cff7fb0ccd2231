"""
Shared pytest fixtures for Tedee MCP testing.
"""
import time
from unittest.mock import Mock, patch

import pytest
import requests

from tedee_mcp.sdk.config import TedeeConfig
from tedee_mcp.sdk.client import TedeeClient


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def api_response(result, success=True, status_code=200, error_messages=None):
    """Build a mock requests.Response carrying a Tedee envelope."""
    response = Mock(status_code=status_code)
    response.raise_for_status = Mock()
    response.json = Mock(return_value={
        "success": success,
        "errorMessages": error_messages or [],
        "statusCode": status_code,
        "result": result,
    })
    return response


def token_response(access_token="new_token", expires_in=3600):
    """Build a mock token endpoint response."""
    response = Mock(status_code=200)
    response.raise_for_status = Mock()
    response.json = Mock(return_value={
        "access_token": access_token,
        "expires_in": expires_in,
    })
    return response


def http_error(status_code=500):
    """Build a mock response whose raise_for_status fails."""
    response = Mock(status_code=status_code)
    response.raise_for_status = Mock(
        side_effect=requests.HTTPError(f"{status_code} Server Error")
    )
    return response


@pytest.fixture
def config():
    """Config with zero retry intervals so retry tests do not sleep."""
    return TedeeConfig(
        email_address="test@test.com",
        password="password123",
        maximum_token_retry=3,
        token_retry_interval=0,
        maximum_api_retry=3,
        api_retry_interval=0,
    )


@pytest.fixture
def client(config):
    return TedeeClient(config)


@pytest.fixture
def authed_client(client):
    """Client holding a token that is valid for another hour."""
    client._access_token = "token"
    client._expires_at = time.monotonic() + 3600
    return client


@pytest.fixture
def front_door():
    return {"id": 1234, "name": "Front Door", "serialNumber": "10000000-000000"}


@pytest.fixture
def mock_tedee_client():
    """Mock client handed to tool modules instead of a real TedeeClient."""
    return Mock(spec=TedeeClient)


@pytest.fixture(autouse=True)
def mock_get_client(mock_tedee_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Yields the mock function (not the client) so tests can set side_effect
    for error scenarios like missing credentials.
    """
    get_client_fn = Mock(return_value=mock_tedee_client)

    with patch("tedee_mcp.locks.get_client", get_client_fn):
        yield get_client_fn
