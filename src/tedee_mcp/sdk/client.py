"""
Tedee HTTP Client.

Handles HTTP transport, token caching, the retry policy, and response
envelope parsing. Endpoint calls live in the sibling modules (locks, activity).
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, TypeVar

import requests

from tedee_mcp.sdk.config import TedeeConfig
from tedee_mcp.sdk.types import CLIENT_ID, TOKEN_EXPIRY_MARGIN_SECONDS, TOKEN_URL

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TedeeClient:
    """
    Tedee HTTP API transport.

    Owns the cached bearer token and applies the retry policy to every call.
    Token refresh is single-flight: concurrent callers wait on one refresh.
    """

    def __init__(self, config: TedeeConfig):
        self._config = config
        self._access_token: Optional[str] = None
        self._expires_at: Optional[float] = None
        self._token_lock = threading.Lock()
        self._session = requests.Session()

    @property
    def config(self) -> TedeeConfig:
        return self._config

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def expires_at(self) -> Optional[float]:
        """Token expiry on the time.monotonic() clock."""
        return self._expires_at

    @property
    def has_valid_token(self) -> bool:
        """True if a cached token exists and is not within the expiry margin."""
        if not self._access_token or self._expires_at is None:
            return False
        return time.monotonic() < self._expires_at - TOKEN_EXPIRY_MARGIN_SECONDS

    # ── Authentication ───────────────────────────────────────────────────

    def get_access_token(self, retry_count: int = None) -> str:
        """
        Get the access token, either from cache or from the token endpoint.

        Args:
            retry_count: Attempts before reporting failure
                (defaults to config.maximum_token_retry)

        Returns:
            Bearer access token

        Raises:
            requests.RequestException: If every attempt failed
        """
        logger.debug("Getting access token...")
        if self.has_valid_token:
            logger.debug("Access token cached.")
            return self._access_token

        with self._token_lock:
            # Another caller may have refreshed while we waited for the lock
            if self.has_valid_token:
                logger.debug("Access token refreshed by a concurrent call.")
                return self._access_token

            self._access_token = None
            self._expires_at = None

            remaining = retry_count or self._config.maximum_token_retry
            while True:
                try:
                    access_token, expires_in = self._request_token()
                    break
                except Exception as e:
                    logger.warning("Error while retrieving access token: %s", e)
                    remaining -= 1
                    if remaining <= 0:
                        raise
                    time.sleep(self._config.token_retry_interval)

            self._access_token = access_token
            if expires_in <= TOKEN_EXPIRY_MARGIN_SECONDS:
                logger.warning(
                    "Access token lifetime (%ss) is within the %ss expiry margin; "
                    "every call will request a new token.",
                    expires_in, TOKEN_EXPIRY_MARGIN_SECONDS,
                )
            self._expires_at = time.monotonic() + expires_in
            logger.debug("Access token received from server.")
            return access_token

    def _request_token(self):
        """POST a password grant to the token endpoint. Returns (token, expires_in)."""
        response = self._session.post(
            TOKEN_URL,
            data={
                "grant_type": "password",
                "username": self._config.email_address,
                "password": self._config.password,
                "scope": f"openid {CLIENT_ID}",
                "client_id": CLIENT_ID,
                "response_type": "token id_token",
            },
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        response.raise_for_status()
        data = response.json()
        return data["access_token"], int(data["expires_in"])

    def logout(self) -> None:
        """Drop the cached token."""
        self._access_token = None
        self._expires_at = None

    # ── Transport ────────────────────────────────────────────────────────

    def make_request(
        self,
        method: str,
        endpoint: str,
        access_token: str,
        params: Dict = None,
        json_data: Dict = None,
    ) -> Dict[str, Any]:
        """
        Make a single authenticated API request.

        Args:
            method: HTTP method (GET/POST)
            endpoint: API endpoint path (e.g. "my/lock")
            access_token: Bearer token
            params: Query parameters
            json_data: JSON body data

        Returns:
            Full response envelope (success, errorMessages, statusCode, result)

        Raises:
            requests.HTTPError: On a non-2xx response
            ValueError: If the envelope reports success == false
        """
        headers = {"Authorization": f"Bearer {access_token}"}
        url = f"{self._config.api_base_url}/{endpoint}"

        if method.upper() == "GET":
            response = self._session.get(url, headers=headers, params=params)
        else:
            response = self._session.post(url, headers=headers, params=params, json=json_data)

        response.raise_for_status()
        data = response.json()
        logger.debug("Response from %s: %s", endpoint, data)

        if data.get("success") is False:
            messages = data.get("errorMessages") or ["Unknown API error"]
            raise ValueError(
                f"{'; '.join(str(m) for m in messages)} "
                f"(statusCode={data.get('statusCode')})"
            )

        return data

    def call_with_retry(
        self,
        attempt: Callable[[str], T],
        description: str,
        retry_count: int = None,
    ) -> T:
        """
        Run an API call under the retry policy.

        Each attempt obtains a token (with its own retry policy) and calls
        attempt(access_token). Failed attempts are retried after
        config.api_retry_interval until the attempts run out, then the
        last error is re-raised unchanged.

        Args:
            attempt: Callable performing the request(s) with a bearer token
            description: Short text for log messages (e.g. "getting locks")
            retry_count: Attempts before reporting failure
                (defaults to config.maximum_api_retry)
        """
        remaining = retry_count or self._config.maximum_api_retry
        while True:
            access_token = self.get_access_token()
            try:
                return attempt(access_token)
            except Exception as e:
                logger.warning("Error while %s via API: %s", description, e)
                remaining -= 1
                if remaining <= 0:
                    raise
                time.sleep(self._config.api_retry_interval)
