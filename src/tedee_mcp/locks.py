"""
Lock tools for Tedee MCP server.

Provides tools for listing locks, reading their state and activity,
and sending open/close/pull-spring commands.
"""

import asyncio
import json
import logging

from tedee_mcp.client_factory import get_client
from tedee_mcp.sdk import activity as sdk_activity
from tedee_mcp.sdk import locks as sdk_locks
from tedee_mcp.sdk.types import lock_state_name

logger = logging.getLogger(__name__)

MAX_ACTIVITY_COUNT = 50


def register_tools(app):
    """Register lock tools with the MCP app."""

    @app.tool()
    async def list_locks() -> str:
        """
        List all Tedee locks of the account.

        Returns:
            JSON list with id, name, serial number, state and battery level
        """
        client = get_client()
        locks = await asyncio.to_thread(sdk_locks.get_locks, client)
        return json.dumps([_format_lock(lock) for lock in locks], indent=2)

    @app.tool()
    async def sync_locks() -> str:
        """
        Get the current state of every lock.

        Returns:
            JSON list with id, state, battery level and connection status
        """
        client = get_client()
        records = await asyncio.to_thread(sdk_locks.sync_locks, client)
        return json.dumps([_format_lock(record) for record in records], indent=2)

    @app.tool()
    async def get_lock_state(name: str) -> str:
        """
        Get the current state of a lock.

        Args:
            name: Lock name as shown in the Tedee app

        Returns:
            JSON with state, battery level and connection status
        """
        client = get_client()
        lock = await asyncio.to_thread(sdk_locks.get_lock_by_name, client, name)
        if lock is None:
            return _lock_not_found(name)

        record = await asyncio.to_thread(sdk_locks.sync_lock, client, lock["id"])
        result = _format_lock(record)
        result["name"] = lock.get("name")
        return json.dumps(result, indent=2)

    @app.tool()
    async def open_lock(name: str) -> str:
        """
        Open (unlock) a lock and wait until the lock reports completion.

        Args:
            name: Lock name as shown in the Tedee app
        """
        return await _run_command(name, sdk_locks.open_lock, "Opened")

    @app.tool()
    async def close_lock(name: str) -> str:
        """
        Close (lock) a lock and wait until the lock reports completion.

        Args:
            name: Lock name as shown in the Tedee app
        """
        return await _run_command(name, sdk_locks.close_lock, "Closed")

    @app.tool()
    async def pull_spring(name: str) -> str:
        """
        Pull the spring of a lock (unlatch the door) and wait for completion.

        Args:
            name: Lock name as shown in the Tedee app
        """
        return await _run_command(name, sdk_locks.pull_spring, "Pulled spring of")

    @app.tool()
    async def get_lock_activity(name: str, count: int = 10) -> str:
        """
        Get the most recent activity of a lock.

        Args:
            name: Lock name as shown in the Tedee app
            count: Number of records (default: 10, max: 50)

        Returns:
            JSON list of activity records (user, event, source, date)
        """
        client = get_client()
        lock = await asyncio.to_thread(sdk_locks.get_lock_by_name, client, name)
        if lock is None:
            return _lock_not_found(name)

        count = max(1, min(count, MAX_ACTIVITY_COUNT))
        records = await asyncio.to_thread(sdk_activity.get_device_activity, client, lock, count)
        return json.dumps([_format_activity(r) for r in records], indent=2)

    @app.tool()
    async def get_latest_lock_activity(name: str) -> str:
        """
        Get the latest activity record of a lock.

        Args:
            name: Lock name as shown in the Tedee app

        Returns:
            JSON with the activity record, or {"activity": null} if there is none
        """
        client = get_client()
        lock = await asyncio.to_thread(sdk_locks.get_lock_by_name, client, name)
        if lock is None:
            return _lock_not_found(name)

        record = await asyncio.to_thread(sdk_activity.get_latest_device_activity, client, lock)
        return json.dumps(
            {"activity": _format_activity(record) if record else None},
            indent=2,
        )

    return app


async def _run_command(name: str, command, done: str) -> str:
    """Run a blocking lock command in a worker thread so other tools keep running."""
    client = get_client()
    lock = await asyncio.to_thread(sdk_locks.get_lock_by_name, client, name)
    if lock is None:
        return _lock_not_found(name)

    await asyncio.to_thread(command, client, lock)
    return json.dumps({"success": True, "message": f"{done} {name}"}, indent=2)


def _lock_not_found(name: str) -> str:
    logger.warning("Lock not found: %s", name)
    return json.dumps({
        "success": False,
        "error": f"No lock named '{name}'",
        "error_code": "LOCK_NOT_FOUND",
    }, indent=2)


def _format_lock(lock: dict) -> dict:
    """Curate a lock or lock sync record for output."""
    props = lock.get("lockProperties") or {}
    state = props.get("state")
    result = {
        "id": lock.get("id"),
        "state": state,
        "state_name": lock_state_name(state),
        "battery_level": props.get("batteryLevel"),
        "is_charging": props.get("isCharging"),
        "is_connected": lock.get("isConnected"),
    }
    if "name" in lock:
        result["name"] = lock["name"]
    if "serialNumber" in lock:
        result["serial_number"] = lock["serialNumber"]
    return result


def _format_activity(record: dict) -> dict:
    return {
        "id": record.get("id"),
        "device_id": record.get("deviceId"),
        "user_id": record.get("userId"),
        "username": record.get("username"),
        "event": record.get("event"),
        "source": record.get("source"),
        "date": record.get("date"),
    }
