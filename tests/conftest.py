"""
clocksync Test Fixtures
"""

import logging
import time

import pytest

from clocksync.config import ClockSyncConfig
from clocksync.core.types import ClockTime
from clocksync.errors import NotFoundError
from clocksync.protocol.executor import SyncExecutor

# 2024-01-01 00:00:00 UTC
FIXED_NOW = 1704067200

TP_LINE = "Tue Jan 02 03:04:05 2024"
NTP_LINE = "1 Jan 07:33:20 ntpdate[123]: step time server 1.2.3.4 offset 100 sec"


def local_clock_time(epoch_secs: int) -> ClockTime:
    """Expected ClockTime for an epoch value in the test machine's timezone."""
    return ClockTime.from_struct_time(time.localtime(epoch_secs))


class FakeResolver:
    """Resolver stand-in that records lookups."""

    def __init__(self, table=None):
        self.table = table or {}
        self.calls = []

    def __call__(self, name: str) -> str:
        self.calls.append(name)
        if name not in self.table:
            raise NotFoundError(name, "unknown test host")
        return self.table[name]


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver({"time.example.com": "192.0.2.10"})


@pytest.fixture
def executor(resolver) -> SyncExecutor:
    """Executor using /bin/sh, a frozen clock and a fake resolver."""
    return SyncExecutor(shell="/bin/sh", clock=lambda: FIXED_NOW, resolver=resolver)


@pytest.fixture
def sh_config() -> ClockSyncConfig:
    """Configuration whose commands run through /bin/sh."""
    config = ClockSyncConfig()
    config.tools.shell = "/bin/sh"
    return config


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    package_logger = logging.getLogger("clocksync")
    handlers, level = list(root.handlers), root.level
    package_level = package_logger.level
    yield
    package_logger.setLevel(package_level)
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
