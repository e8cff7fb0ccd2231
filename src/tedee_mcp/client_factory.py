"""
Client factory for Tedee MCP server.

The server talks to a single Tedee account, so one TedeeClient is shared
by every tool call. Sharing it keeps the cached token across calls.
"""

import threading
from typing import Optional

from tedee_mcp.sdk.config import TedeeConfig
from tedee_mcp.sdk.client import TedeeClient


_client: Optional[TedeeClient] = None
_client_lock = threading.Lock()


def create_client(config: TedeeConfig = None) -> TedeeClient:
    """
    Create a Tedee client.

    Args:
        config: Client configuration (loaded from the environment if omitted)

    Returns:
        New TedeeClient instance

    Raises:
        ValueError: If the configuration is incomplete or invalid
    """
    if config is None:
        config = TedeeConfig.from_env()
    else:
        config.validate()
    return TedeeClient(config)


def get_client() -> TedeeClient:
    """
    Get the shared Tedee client, creating it on first use.

    Usage in tools:
        @app.tool()
        async def list_locks() -> str:
            client = get_client()
            return json.dumps(sdk_locks.get_locks(client))

    Raises:
        ValueError: If TEDEE_EMAIL / TEDEE_PASSWORD are not set
    """
    global _client
    with _client_lock:
        if _client is None:
            _client = create_client()
        return _client


def reset_client() -> None:
    """Forget the shared client (e.g. after changing credentials)."""
    global _client
    with _client_lock:
        if _client is not None:
            _client.logout()
        _client = None
