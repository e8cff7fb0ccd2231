"""
Configuration for the Tedee client.

Values come from environment variables so the MCP server can be configured
without a config file:

- TEDEE_EMAIL / TEDEE_PASSWORD: account credentials (required)
- TEDEE_MAX_TOKEN_RETRY: attempts for token requests (default: 3)
- TEDEE_TOKEN_RETRY_INTERVAL: seconds between token attempts (default: 2)
- TEDEE_MAX_API_RETRY: attempts for API calls (default: 3)
- TEDEE_API_RETRY_INTERVAL: seconds between API attempts (default: 2)
- TEDEE_API_URL: API base URL (default: the public v1.18 endpoint)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from tedee_mcp.sdk.types import API_BASE_URL


DEFAULT_MAXIMUM_RETRY = 3
DEFAULT_RETRY_INTERVAL = 2.0


@dataclass
class TedeeConfig:
    """Credentials and retry policy for a TedeeClient."""
    email_address: str
    password: str
    maximum_token_retry: int = DEFAULT_MAXIMUM_RETRY
    token_retry_interval: float = DEFAULT_RETRY_INTERVAL
    maximum_api_retry: int = DEFAULT_MAXIMUM_RETRY
    api_retry_interval: float = DEFAULT_RETRY_INTERVAL
    api_base_url: str = API_BASE_URL

    def validate(self):
        """Validate the configuration.

        Raises:
            ValueError: If credentials are missing or a retry setting is invalid.
        """
        if not self.email_address or not self.password:
            raise ValueError("Missing credentials")
        if self.maximum_token_retry < 1:
            raise ValueError("maximum_token_retry must be >= 1")
        if self.maximum_api_retry < 1:
            raise ValueError("maximum_api_retry must be >= 1")
        if self.token_retry_interval < 0:
            raise ValueError("token_retry_interval must be >= 0")
        if self.api_retry_interval < 0:
            raise ValueError("api_retry_interval must be >= 0")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TedeeConfig":
        """Build a validated config from environment variables."""
        env = os.environ if environ is None else environ

        config = cls(
            email_address=env.get("TEDEE_EMAIL", ""),
            password=env.get("TEDEE_PASSWORD", ""),
            maximum_token_retry=int(env.get("TEDEE_MAX_TOKEN_RETRY", DEFAULT_MAXIMUM_RETRY)),
            token_retry_interval=float(env.get("TEDEE_TOKEN_RETRY_INTERVAL", DEFAULT_RETRY_INTERVAL)),
            maximum_api_retry=int(env.get("TEDEE_MAX_API_RETRY", DEFAULT_MAXIMUM_RETRY)),
            api_retry_interval=float(env.get("TEDEE_API_RETRY_INTERVAL", DEFAULT_RETRY_INTERVAL)),
            api_base_url=env.get("TEDEE_API_URL", API_BASE_URL).rstrip("/"),
        )
        config.validate()
        return config
