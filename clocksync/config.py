"""
clocksync Configuration
"""

from __future__ import annotations
import json
import logging
import sys
from dataclasses import dataclass, field, asdict
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from clocksync.constants import (
    RDATE_PATH,
    NTPDATE_PATH,
    NTPD_PATH,
    DEFAULT_SHELL,
    NTP_QUERY_TIMEOUT_SEC,
    NTP_SAMPLE_COUNT,
)
from clocksync.core.types import NtpClient

logger = logging.getLogger(__name__)


@dataclass
class ToolsConfig:
    """Client tool locations."""
    rdate: str = RDATE_PATH
    ntpdate: str = NTPDATE_PATH
    ntpd: str = NTPD_PATH
    shell: str = DEFAULT_SHELL


@dataclass
class NtpConfig:
    """Network Time Protocol client configuration."""
    client: str = NtpClient.NTPDATE.value
    timeout_sec: float = NTP_QUERY_TIMEOUT_SEC
    samples: int = NTP_SAMPLE_COUNT


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size_mb: int = 100
    backup_count: int = 5


@dataclass
class ClockSyncConfig:
    """
    Complete clocksync configuration.

    Defaults match a stock Linux install with rdate and ntpdate in /usr/sbin.
    """
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    ntp: NtpConfig = field(default_factory=NtpConfig)
    log: LogConfig = field(default_factory=LogConfig)

    @property
    def ntp_client(self) -> NtpClient:
        """Get the configured NTP client variant."""
        return NtpClient(self.ntp.client)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for name in ("rdate", "ntpdate", "ntpd", "shell"):
            if not getattr(self.tools, name):
                errors.append(f"tools.{name} cannot be empty")

        if self.ntp.client not in {c.value for c in NtpClient}:
            errors.append(f"Invalid NTP client: {self.ntp.client}")

        if self.ntp.timeout_sec <= 0:
            errors.append("ntp.timeout_sec must be positive")

        if self.ntp.samples < 1:
            errors.append("ntp.samples must be at least 1")

        if not isinstance(logging.getLevelName(self.log.level.upper()), int):
            errors.append(f"Invalid log level: {self.log.level}")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "ClockSyncConfig":
        """Load configuration from file."""
        with open(path, 'r') as f:
            data = json.load(f)

        config = cls()

        if "tools" in data:
            config.tools = ToolsConfig(**data["tools"])

        if "ntp" in data:
            config.ntp = NtpConfig(**data["ntp"])

        if "log" in data:
            config.log = LogConfig(**data["log"])

        logger.info(f"Configuration loaded from {path}")
        return config

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "tools": asdict(self.tools),
            "ntp": asdict(self.ntp),
            "log": asdict(self.log),
        }


def setup_logging(config: LogConfig) -> logging.Logger:
    """
    Configure logging from config.

    Log records go to stderr, stdout is left for command results. The
    clocksync logger gets the configured level as well, so its level holds
    even if another library reconfigures the root logger later.

    Returns:
        The clocksync package logger
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        ))

    logging.basicConfig(level=level, format=config.format, handlers=handlers, force=True)

    package_logger = logging.getLogger("clocksync")
    package_logger.setLevel(level)
    return package_logger
