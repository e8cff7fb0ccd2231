"""
Tedee Low-Level SDK.

Thin typed wrapper over the Tedee HTTP API.
Each function maps 1:1 to a Tedee endpoint.
"""

from tedee_mcp.sdk.client import TedeeClient
from tedee_mcp.sdk.config import TedeeConfig
from tedee_mcp.sdk.types import (
    LockCommand,
    LockState,
    OperationStatus,
    API_BASE_URL,
    TOKEN_URL,
)

__all__ = [
    "TedeeClient",
    "TedeeConfig",
    "LockCommand",
    "LockState",
    "OperationStatus",
    "API_BASE_URL",
    "TOKEN_URL",
]
