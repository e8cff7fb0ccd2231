"""
Tedee lock SDK functions.

Listing, state sync, and open/close/pull-spring commands.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from tedee_mcp.sdk.client import TedeeClient
from tedee_mcp.sdk.types import OPERATION_POLL_INTERVAL, LockCommand, is_completed

logger = logging.getLogger(__name__)


def get_locks(client: TedeeClient, retry_count: int = None) -> List[Dict[str, Any]]:
    """
    Get all locks of the account.

    GET my/lock

    Returns:
        [{id, name, serialNumber, lockProperties, ...}]
    """
    logger.debug("Getting locks from API...")

    def attempt(access_token):
        response = client.make_request("GET", "my/lock", access_token)
        logger.debug("Locks received from API.")
        return response["result"]

    return client.call_with_retry(attempt, "getting locks", retry_count)


def get_lock_by_name(
    client: TedeeClient, name: str, retry_count: int = None
) -> Optional[Dict[str, Any]]:
    """First lock whose name matches exactly, or None."""
    return next(
        (lock for lock in get_locks(client, retry_count) if lock.get("name") == name),
        None,
    )


def sync_locks(client: TedeeClient, retry_count: int = None) -> List[Dict[str, Any]]:
    """
    Sync the recent changes of all locks.

    GET my/lock/sync

    Returns:
        [{id, isConnected, lockProperties: {state, batteryLevel, ...}, ...}]
    """
    logger.debug("Syncing locks from API...")

    def attempt(access_token):
        response = client.make_request("GET", "my/lock/sync", access_token)
        logger.debug("Locks synced from API.")
        return response["result"]

    return client.call_with_retry(attempt, "syncing locks", retry_count)


def sync_lock(client: TedeeClient, lock_id: int, retry_count: int = None) -> Dict[str, Any]:
    """
    Sync the recent changes of a single lock.

    GET my/lock/{id}/sync
    """
    logger.debug("Syncing lock with ID %s from API...", lock_id)

    def attempt(access_token):
        response = client.make_request("GET", f"my/lock/{lock_id}/sync", access_token)
        logger.debug("Lock with ID %s synced from API.", lock_id)
        return response["result"]

    return client.call_with_retry(attempt, f"syncing lock with ID {lock_id}", retry_count)


def close_lock(client: TedeeClient, lock: Dict[str, Any], retry_count: int = None) -> None:
    """Close (lock) a lock and wait for the operation to complete."""
    _run_command(client, lock, LockCommand.CLOSE, retry_count)


def open_lock(client: TedeeClient, lock: Dict[str, Any], retry_count: int = None) -> None:
    """Open (unlock) a lock and wait for the operation to complete."""
    _run_command(client, lock, LockCommand.OPEN, retry_count)


def pull_spring(client: TedeeClient, lock: Dict[str, Any], retry_count: int = None) -> None:
    """Pull the spring of a lock and wait for the operation to complete."""
    _run_command(client, lock, LockCommand.PULL_SPRING, retry_count)


def _run_command(
    client: TedeeClient,
    lock: Dict[str, Any],
    command: LockCommand,
    retry_count: int = None,
) -> None:
    """
    POST a lock command, then poll the operation until it is completed.

    POST my/lock/{command} with {deviceId}
    GET my/device/operation/{operationId} (once per second)

    A failure anywhere in the sequence re-issues the command from scratch.
    There is no upper bound on the number of polls.
    """
    name = lock.get("name")
    action = command.value.replace("-", " ")
    logger.debug("[%s] Sending %s command via API...", name, action)

    def attempt(access_token):
        response = client.make_request(
            "POST",
            f"my/lock/{command.value}",
            access_token,
            json_data={"deviceId": lock["id"]},
        )
        operation = response["result"]

        while not is_completed(operation):
            time.sleep(OPERATION_POLL_INTERVAL)
            response = client.make_request(
                "GET",
                f"my/device/operation/{operation['operationId']}",
                access_token,
            )
            operation = response["result"]
            logger.info("[%s] Waiting for %s operation to be completed.", name, action)

        logger.info("[%s] %s operation completed via API.", name, action.capitalize())

    client.call_with_retry(attempt, f"running {action} on {name}", retry_count)
