"""
Live verification tests: validate real Tedee API responses.

All tests are READ-ONLY (no lock commands are sent).

Run:  TEDEE_EMAIL=... TEDEE_PASSWORD=... pytest tests/live/ -v
"""

from tedee_mcp.sdk import activity, locks


def assert_has_keys(obj, keys, label=""):
    """Assert obj contains all listed keys. Reports missing keys."""
    missing = [k for k in keys if k not in obj]
    assert not missing, f"{label} missing keys: {missing}. Got: {list(obj.keys())}"


class TestToken:
    def test_token_is_cached(self, live_client):
        first = live_client.get_access_token()
        assert live_client.get_access_token() == first
        assert live_client.has_valid_token


class TestLocks:
    def test_lock_shape(self, first_lock):
        assert_has_keys(first_lock, ["id", "name"], "my/lock[0]")
        assert isinstance(first_lock["id"], int)

    def test_lock_by_name(self, live_client, first_lock):
        assert locks.get_lock_by_name(live_client, first_lock["name"])["id"] == first_lock["id"]

    def test_sync_locks_shape(self, live_client, first_lock):
        records = locks.sync_locks(live_client)
        assert any(r["id"] == first_lock["id"] for r in records)

    def test_sync_lock_shape(self, live_client, first_lock):
        record = locks.sync_lock(live_client, first_lock["id"])
        assert_has_keys(record, ["id", "lockProperties"], "my/lock/{id}/sync")
        assert "state" in record["lockProperties"]


class TestDeviceActivity:
    def test_activity_shape(self, live_client, first_lock):
        records = activity.get_device_activity(live_client, first_lock, 3)
        assert len(records) <= 3
        for record in records:
            assert_has_keys(record, ["id", "deviceId", "event", "source", "date"], "deviceactivity")
