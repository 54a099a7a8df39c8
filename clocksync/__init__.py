"""
clocksync

Get wall-clock time from Time Protocol and NTP servers through the system's
client tools (rdate, ntpdate, ntpd), optionally setting the system clock.
"""

__version__ = "1.0.0"

from clocksync.core.types import ClockTime, SyncMode, ProtocolKind, NtpClient
from clocksync.errors import (
    ClockSyncError,
    BadParameterError,
    NotFoundError,
    UnavailableError,
    UnsupportedError,
    FaultError,
)
from clocksync.sync import (
    TimeProtocolSync,
    NetworkTimeProtocolSync,
    sync_time,
    get_time_with_time_protocol,
    get_time_with_network_time_protocol,
)

__all__ = [
    "ClockTime",
    "SyncMode",
    "ProtocolKind",
    "NtpClient",
    "ClockSyncError",
    "BadParameterError",
    "NotFoundError",
    "UnavailableError",
    "UnsupportedError",
    "FaultError",
    "TimeProtocolSync",
    "NetworkTimeProtocolSync",
    "sync_time",
    "get_time_with_time_protocol",
    "get_time_with_network_time_protocol",
    "__version__",
]
