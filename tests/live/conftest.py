"""
Live API test fixtures.

These tests hit the REAL Tedee API to validate that response shapes match
what the SDK expects. They are read-only and require an account.

Provide credentials via environment variables:
  TEDEE_EMAIL    = account email
  TEDEE_PASSWORD = account password

Run: pytest tests/live/ -v
"""

import os

import pytest

from tedee_mcp.sdk.client import TedeeClient
from tedee_mcp.sdk.config import TedeeConfig


@pytest.fixture(scope="session")
def live_client():
    """Real client. Skips all live tests if no credentials are available."""
    if not (os.environ.get("TEDEE_EMAIL") and os.environ.get("TEDEE_PASSWORD")):
        pytest.skip("No Tedee credentials: set TEDEE_EMAIL and TEDEE_PASSWORD")
    return TedeeClient(TedeeConfig.from_env())


@pytest.fixture(scope="session")
def first_lock(live_client):
    from tedee_mcp.sdk import locks

    all_locks = locks.get_locks(live_client)
    if not all_locks:
        pytest.skip("Account has no locks")
    return all_locks[0]
