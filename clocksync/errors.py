"""
clocksync Error Handling

Error codes and exception classes for every failure a sync request can end in.
"""

from enum import IntEnum
from typing import Optional, Any


class ErrorCode(IntEnum):
    """Clock synchronization error codes."""

    # 1xxx - Request errors
    UNKNOWN_ERROR = 1000
    BAD_PARAMETER = 1001
    UNSUPPORTED = 1003

    # 2xxx - Server resolution errors
    NOT_FOUND = 2001

    # 3xxx - Tool execution errors
    UNAVAILABLE = 3001
    FAULT = 3002


class ClockSyncError(Exception):
    """Base exception for all clock synchronization errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: Optional[Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        result = {
            "code": self.code.value,
            "name": self.code.name,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


# ==============================================================================
# Request Errors (1xxx)
# ==============================================================================

class BadParameterError(ClockSyncError):
    def __init__(self, param: str, message: str = ""):
        msg = f"Invalid parameter: {param}"
        if message:
            msg += f" - {message}"
        super().__init__(ErrorCode.BAD_PARAMETER, msg, {"parameter": param})


class UnsupportedError(ClockSyncError):
    def __init__(self, feature: str):
        super().__init__(
            ErrorCode.UNSUPPORTED,
            f"Not supported: {feature}",
            {"feature": feature}
        )


# ==============================================================================
# Resolution Errors (2xxx)
# ==============================================================================

class NotFoundError(ClockSyncError):
    def __init__(self, server: str, reason: str = ""):
        msg = f"Server not resolvable: {server}"
        if reason:
            msg += f" ({reason})"
        super().__init__(ErrorCode.NOT_FOUND, msg, {"server": server})


# ==============================================================================
# Tool Execution Errors (3xxx)
# ==============================================================================

class UnavailableError(ClockSyncError):
    def __init__(self, server: str):
        super().__init__(
            ErrorCode.UNAVAILABLE,
            f"No verdict received from time server {server}",
            {"server": server}
        )


class FaultError(ClockSyncError):
    def __init__(self, reason: str, details: Any = None):
        super().__init__(ErrorCode.FAULT, reason, details)
