"""
Tedee device activity SDK functions.
"""

import logging
from typing import Any, Dict, List, Optional

from tedee_mcp.sdk.client import TedeeClient

logger = logging.getLogger(__name__)


def get_device_activity(
    client: TedeeClient,
    lock: Dict[str, Any],
    count: int,
    retry_count: int = None,
) -> List[Dict[str, Any]]:
    """
    Get the most recent activity records of a device.

    GET my/deviceactivity?deviceId=&elements=

    Returns:
        [{id, deviceId, userId, username, event, source, date}]
    """
    logger.debug("[%s] Fetching device activity via API...", lock.get("name"))

    def attempt(access_token):
        response = client.make_request(
            "GET",
            "my/deviceactivity",
            access_token,
            params={"deviceId": lock["id"], "elements": count},
        )
        return response["result"]

    return client.call_with_retry(
        attempt, f"fetching device activity of {lock.get('name')}", retry_count
    )


def get_latest_device_activity(
    client: TedeeClient, lock: Dict[str, Any], retry_count: int = None
) -> Optional[Dict[str, Any]]:
    """Most recent activity record of a device, or None if there is none."""
    activities = get_device_activity(client, lock, 1, retry_count)
    return activities[0] if activities else None
