"""
clocksync Core Types

ClockTime is the normalized wall-clock value every protocol parser produces.
Fields are plain calendar values: month is 1-12, year is the full year.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
import time


class SyncMode(Enum):
    """Whether a sync request only observes the server time or also applies it."""
    OBSERVE_ONLY = "observe"
    OBSERVE_AND_APPLY = "apply"

    @classmethod
    def from_get_only(cls, get_only: bool) -> SyncMode:
        return cls.OBSERVE_ONLY if get_only else cls.OBSERVE_AND_APPLY


class ProtocolKind(Enum):
    """Clock synchronization protocol."""
    TIME_PROTOCOL = "tp"
    NETWORK_TIME_PROTOCOL = "ntp"


class NtpClient(Enum):
    """NTP client tool used for the Network Time Protocol."""
    NTPDATE = "ntpdate"
    NTPD = "ntpd"


@dataclass(frozen=True, slots=True)
class ClockTime:
    """
    Calendar time reported by a time server.

    Neither protocol carries sub-second precision, so millisecond is
    always 0 for parsed values.
    """
    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @classmethod
    def zero(cls) -> ClockTime:
        return cls()

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> ClockTime:
        return cls(
            year=st.tm_year,
            month=st.tm_mon,
            day=st.tm_mday,
            hour=st.tm_hour,
            minute=st.tm_min,
            second=st.tm_sec,
        )

    @property
    def is_zero(self) -> bool:
        """True if no time was reported."""
        return self == ClockTime.zero()

    def to_datetime(self) -> datetime:
        """Naive datetime with the same fields. Fails for the zero value."""
        return datetime(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second,
            self.millisecond * 1000,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
