"""
Tedee API types, enums, and constants.

All Tedee-specific codes, URLs, and magic values live here.
"""

from enum import Enum, IntEnum


TOKEN_URL = "https://tedee.b2clogin.com/tedee.onmicrosoft.com/oauth2/v2.0/token?p=B2C_1_SignIn_Ropc"
API_BASE_URL = "https://api.tedee.com/api/v1.18"

# Public client ID of the Tedee mobile app (password grant)
CLIENT_ID = "02106b82-0524-4fd3-ac57-af774f340979"

# Tokens are treated as expired this many seconds before the server says so
TOKEN_EXPIRY_MARGIN_SECONDS = 120

# Delay between operation status polls
OPERATION_POLL_INTERVAL = 1.0


class OperationStatus(Enum):
    """Status of an asynchronous device operation."""
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class LockCommand(Enum):
    """Lock command endpoints (POST my/lock/<command>)."""
    OPEN = "open"
    CLOSE = "close"
    PULL_SPRING = "pull-spring"


class LockState(IntEnum):
    """Lock state codes reported in lockProperties.state."""
    UNCALIBRATED = 0
    CALIBRATING = 1
    UNLOCKED = 2
    SEMI_LOCKED = 3
    UNLOCKING = 4
    LOCKING = 5
    LOCKED = 6
    PULLED = 7
    PULLING = 8
    UNKNOWN = 9
    UPDATING = 18


LOCK_STATE_NAMES = {
    LockState.UNCALIBRATED: "Uncalibrated",
    LockState.CALIBRATING: "Calibrating",
    LockState.UNLOCKED: "Unlocked",
    LockState.SEMI_LOCKED: "Semi-locked",
    LockState.UNLOCKING: "Unlocking",
    LockState.LOCKING: "Locking",
    LockState.LOCKED: "Locked",
    LockState.PULLED: "Pulled",
    LockState.PULLING: "Pulling",
    LockState.UNKNOWN: "Unknown",
    LockState.UPDATING: "Updating",
}


def is_completed(operation: dict) -> bool:
    """Check whether an operation record has reached its terminal status."""
    status = operation.get("status")
    return str(status).upper() == OperationStatus.COMPLETED.value


def lock_state_name(state) -> str:
    """Readable name for a lock state code (falls back to 'Unknown')."""
    try:
        return LOCK_STATE_NAMES[LockState(state)]
    except (ValueError, TypeError):
        return LOCK_STATE_NAMES[LockState.UNKNOWN]
