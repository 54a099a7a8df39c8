"""
clocksync Protocol Entry Points

One facade per protocol. Each picks the command template for the requested
mode, hands it to the SyncExecutor together with the protocol's output
parser, and returns the executor's result.

Template per protocol and mode:

    Time Protocol        observe   rdate -p SERVER
                         apply     rdate SERVER >& /dev/null; echo $?
    NTP (ntpdate)        observe   ntpdate -t 1.0 -p 1 -q SERVER; echo $?
                         apply     ntpdate -t 1.0 -p 1 SERVER >& /dev/null; echo $?
    NTP (ntpd)           observe   not supported
                         apply     ntpd -n -q -p SERVER >& /dev/null; echo $?
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from clocksync.config import ClockSyncConfig
from clocksync.constants import (
    TP_QUERY_TEMPLATE,
    TP_SET_TEMPLATE,
    NTPDATE_QUERY_TEMPLATE,
    NTPDATE_SET_TEMPLATE,
    NTPD_SET_TEMPLATE,
)
from clocksync.core.types import ClockTime, NtpClient, ProtocolKind, SyncMode
from clocksync.errors import UnsupportedError
from clocksync.protocol.commands import CommandTemplate
from clocksync.protocol.executor import SyncExecutor
from clocksync.protocol.parsers import (
    OutputParser,
    TimeProtocolParser,
    NetworkTimeProtocolParser,
)

logger = logging.getLogger(__name__)


class ProtocolSync(ABC):
    """Base class for a protocol's sync entry point."""

    protocol: ProtocolKind

    def __init__(
        self,
        config: Optional[ClockSyncConfig] = None,
        executor: Optional[SyncExecutor] = None,
    ):
        self.config = config or ClockSyncConfig()
        self.executor = executor or SyncExecutor(shell=self.config.tools.shell)
        self.parser = self._make_parser()
        self.templates = self._make_templates()

    @abstractmethod
    def _make_parser(self) -> OutputParser:
        ...

    @abstractmethod
    def _make_templates(self) -> Dict[SyncMode, Optional[CommandTemplate]]:
        """Command template per mode, None where the mode is unsupported."""

    def supported_modes(self) -> list[SyncMode]:
        return [mode for mode, template in self.templates.items() if template is not None]

    def sync_time(self, server: str, mode: SyncMode) -> ClockTime:
        """
        Retrieve time from a server, and set the system clock if asked to.

        Args:
            server: Time server name or address
            mode: OBSERVE_ONLY or OBSERVE_AND_APPLY

        Returns:
            Server time for OBSERVE_ONLY, ClockTime.zero() for OBSERVE_AND_APPLY

        Raises:
            BadParameterError, NotFoundError, UnavailableError,
            UnsupportedError, FaultError
        """
        template = self.templates.get(mode)
        if template is None:
            logger.error(f"{self.protocol.value}: mode {mode.value} not supported")
            raise UnsupportedError(f"{self.protocol.value} {mode.value}")

        return self.executor.run(server, mode, self.protocol, template, self.parser)


class TimeProtocolSync(ProtocolSync):
    """Time Protocol (RFC 868) via rdate."""

    protocol = ProtocolKind.TIME_PROTOCOL

    def _make_parser(self) -> OutputParser:
        return TimeProtocolParser()

    def _make_templates(self) -> Dict[SyncMode, Optional[CommandTemplate]]:
        tool = self.config.tools.rdate
        return {
            SyncMode.OBSERVE_ONLY: CommandTemplate(TP_QUERY_TEMPLATE.format(tool=tool)),
            SyncMode.OBSERVE_AND_APPLY: CommandTemplate(TP_SET_TEMPLATE.format(tool=tool)),
        }


class NetworkTimeProtocolSync(ProtocolSync):
    """
    Network Time Protocol via ntpdate, or via ntpd in one-shot mode.

    ntpd only sets the clock and prints nothing usable for observing, so
    OBSERVE_ONLY is unsupported with that client.
    """

    protocol = ProtocolKind.NETWORK_TIME_PROTOCOL

    def _make_parser(self) -> OutputParser:
        return NetworkTimeProtocolParser()

    def _make_templates(self) -> Dict[SyncMode, Optional[CommandTemplate]]:
        tools = self.config.tools
        ntp = self.config.ntp

        if self.config.ntp_client is NtpClient.NTPD:
            return {
                SyncMode.OBSERVE_ONLY: None,
                SyncMode.OBSERVE_AND_APPLY: CommandTemplate(
                    NTPD_SET_TEMPLATE.format(tool=tools.ntpd)
                ),
            }

        args = dict(tool=tools.ntpdate, timeout=ntp.timeout_sec, samples=ntp.samples)
        return {
            SyncMode.OBSERVE_ONLY: CommandTemplate(NTPDATE_QUERY_TEMPLATE.format(**args)),
            SyncMode.OBSERVE_AND_APPLY: CommandTemplate(NTPDATE_SET_TEMPLATE.format(**args)),
        }


_PROTOCOLS = {
    ProtocolKind.TIME_PROTOCOL: TimeProtocolSync,
    ProtocolKind.NETWORK_TIME_PROTOCOL: NetworkTimeProtocolSync,
}


def sync_time(
    server: str,
    protocol: ProtocolKind,
    mode: SyncMode,
    config: Optional[ClockSyncConfig] = None,
) -> ClockTime:
    """Retrieve (and optionally apply) time from server with the given protocol."""
    return _PROTOCOLS[protocol](config).sync_time(server, mode)


def get_time_with_time_protocol(
    server: str,
    get_only: bool,
    config: Optional[ClockSyncConfig] = None,
) -> ClockTime:
    """Retrieve time from a server using the Time Protocol."""
    return sync_time(server, ProtocolKind.TIME_PROTOCOL, SyncMode.from_get_only(get_only), config)


def get_time_with_network_time_protocol(
    server: str,
    get_only: bool,
    config: Optional[ClockSyncConfig] = None,
) -> ClockTime:
    """Retrieve time from a server using the Network Time Protocol."""
    return sync_time(
        server, ProtocolKind.NETWORK_TIME_PROTOCOL, SyncMode.from_get_only(get_only), config
    )


def get_sync_info(config: Optional[ClockSyncConfig] = None) -> dict:
    """Get information about the configured protocols and their commands."""
    config = config or ClockSyncConfig()
    info = {}
    for kind, cls in _PROTOCOLS.items():
        facade = cls(config)
        info[kind.value] = {
            "modes": [mode.value for mode in facade.supported_modes()],
            "commands": {
                mode.value: str(template) if template else None
                for mode, template in facade.templates.items()
            },
        }
    info["ntp_client"] = config.ntp.client
    info["shell"] = config.tools.shell
    return info
