"""
clocksync Protocol Execution

Command templates, client tool output parsers and the executor that ties
them together.
"""

from clocksync.protocol.commands import CommandTemplate
from clocksync.protocol.parsers import (
    OutputParser,
    TimeProtocolParser,
    NetworkTimeProtocolParser,
)
from clocksync.protocol.executor import SyncExecutor

__all__ = [
    "CommandTemplate",
    "OutputParser",
    "TimeProtocolParser",
    "NetworkTimeProtocolParser",
    "SyncExecutor",
]
