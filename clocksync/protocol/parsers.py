"""
clocksync Protocol Output Parsers

Each protocol's client tool reports time differently:

- rdate (Time Protocol) prints the server's absolute time as a ctime-style
  line, e.g. "Tue Jan 02 03:04:05 2024".
- ntpdate (Network Time Protocol) prints the offset between the server and
  the local clock, e.g.
  "1 Jan 07:33:20 ntpdate[29329]: step time server 5.196.160.139 offset 1558374338.202418 sec".
  The server time is the caller's current time plus that offset.

A parser takes one line of tool output and returns a ClockTime, returns None
when the line carries no time report, or raises FaultError when the line
should carry one but cannot be read.
"""

from __future__ import annotations
import logging
import re
import time
from abc import ABC, abstractmethod
from typing import Optional

from clocksync.constants import (
    TP_TIME_FORMAT,
    NTP_TOOL_MARKER,
    NTP_OFFSET_MARKER,
    NTP_OFFSET_UNIT_MARKER,
)
from clocksync.core.types import ClockTime, ProtocolKind
from clocksync.errors import BadParameterError, FaultError

logger = logging.getLogger(__name__)

# weekday month day HH:MM:SS year, anchored at line start
_TP_LINE_RE = re.compile(
    r"^\s*([A-Za-z]+\s+[A-Za-z]+\s+\d{1,2}\s+\d{1,2}:\d{1,2}:\d{1,2}\s+\d{4})"
)

# Leading signed integer, fraction ignored
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(text: str) -> Optional[int]:
    """Integer at the start of text (after whitespace), or None if there is none."""
    match = _LEADING_INT_RE.match(text)
    if not match:
        return None
    return int(match.group(1))


class OutputParser(ABC):
    """Protocol-specific parser for one line of client tool output."""

    protocol: ProtocolKind

    @abstractmethod
    def parse(self, line: str, now: Optional[float] = None) -> Optional[ClockTime]:
        """
        Parse one output line.

        Args:
            line: Output line from the tool
            now: Current local time in seconds since the epoch

        Returns:
            ClockTime if the line reports a time, None if it is not relevant

        Raises:
            BadParameterError: If line is None
            FaultError: If the line cannot be parsed
        """


class TimeProtocolParser(OutputParser):
    """Parser for rdate -p output."""

    protocol = ProtocolKind.TIME_PROTOCOL

    def parse(self, line: str, now: Optional[float] = None) -> Optional[ClockTime]:
        if line is None:
            raise BadParameterError("line", "no output line")

        match = _TP_LINE_RE.match(line)
        if not match:
            raise FaultError("Failed to retrieve returned clock time", {"line": line.strip()})

        try:
            st = time.strptime(match.group(1), TP_TIME_FORMAT)
        except ValueError as e:
            raise FaultError(f"Failed to retrieve returned clock time: {e}", {"line": line.strip()}) from e

        clock_time = ClockTime.from_struct_time(st)
        logger.debug(f"TP present time retrieved: {clock_time}")
        return clock_time


class NetworkTimeProtocolParser(OutputParser):
    """
    Parser for ntpdate output.

    Only the whole seconds of the reported offset are used.
    """

    protocol = ProtocolKind.NETWORK_TIME_PROTOCOL

    def __init__(self, tool_marker: str = NTP_TOOL_MARKER):
        self.tool_marker = tool_marker

    def parse(self, line: str, now: Optional[float] = None) -> Optional[ClockTime]:
        if line is None:
            raise BadParameterError("line", "no output line")
        if now is None:
            raise BadParameterError("now", "current time required for NTP offset")

        if self.tool_marker not in line:
            return None

        start = line.find(NTP_OFFSET_MARKER)
        if start < 0:
            return None
        start += len(NTP_OFFSET_MARKER)

        end = line.find(NTP_OFFSET_UNIT_MARKER, start)
        if end < 0:
            return None

        offset_secs = parse_leading_int(line[start:end])
        if offset_secs is None:
            raise FaultError(
                "Unreadable NTP offset",
                {"offset": line[start:end]}
            )
        logger.debug(f"NTP offset time retrieved: {offset_secs} secs")

        server_secs = int(now) + offset_secs
        logger.debug(f"NTP present absolute time: {server_secs} secs")

        clock_time = ClockTime.from_struct_time(time.localtime(server_secs))
        logger.debug(f"NTP present time retrieved: {clock_time}")
        return clock_time
