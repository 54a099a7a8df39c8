"""
clocksync Core Types
"""

from clocksync.core.types import ClockTime, SyncMode, ProtocolKind, NtpClient

__all__ = [
    "ClockTime",
    "SyncMode",
    "ProtocolKind",
    "NtpClient",
]
