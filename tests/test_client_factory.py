"""Tests for the shared client factory."""

import pytest

from tedee_mcp import client_factory
from tedee_mcp.sdk.config import TedeeConfig
from tedee_mcp.sdk.client import TedeeClient


@pytest.fixture(autouse=True)
def fresh_factory(monkeypatch):
    monkeypatch.setenv("TEDEE_EMAIL", "me@example.com")
    monkeypatch.setenv("TEDEE_PASSWORD", "secret")
    client_factory.reset_client()
    yield
    client_factory.reset_client()


def test_get_client_is_shared():
    first = client_factory.get_client()
    assert isinstance(first, TedeeClient)
    assert client_factory.get_client() is first
    assert first.config.email_address == "me@example.com"


def test_reset_client_builds_new_instance():
    first = client_factory.get_client()
    client_factory.reset_client()
    assert client_factory.get_client() is not first


def test_missing_credentials(monkeypatch):
    monkeypatch.delenv("TEDEE_PASSWORD")
    with pytest.raises(ValueError, match="Missing credentials"):
        client_factory.get_client()


def test_create_client_validates_config():
    with pytest.raises(ValueError):
        client_factory.create_client(TedeeConfig("me@example.com", "secret", maximum_api_retry=0))
