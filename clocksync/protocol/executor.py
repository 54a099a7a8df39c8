"""
clocksync Sync Executor

Runs a protocol client tool against a time server and turns its output into
a result.

Two modes:
- OBSERVE_ONLY: the tool only queries the server. Its output lines are fed
  to the protocol parser until one yields a ClockTime.
- OBSERVE_AND_APPLY: the tool also sets the system clock. Its own output is
  discarded by the command template and only the shell's "echo $?" status
  line is read.

No retries are done here; every failure is raised to the caller.
"""

from __future__ import annotations
import logging
import subprocess
import time
from contextlib import contextmanager
from typing import Callable, Iterator, IO, Optional

from clocksync.constants import DEFAULT_SHELL, MAX_SERVER_IDENTIFIER_LENGTH
from clocksync.core.types import ClockTime, ProtocolKind, SyncMode
from clocksync.errors import (
    BadParameterError,
    FaultError,
    NotFoundError,
    UnavailableError,
)
from clocksync.network.resolver import is_literal_address, resolve
from clocksync.protocol.commands import CommandTemplate
from clocksync.protocol.parsers import OutputParser, parse_leading_int

logger = logging.getLogger(__name__)


def validate_server(server: str) -> None:
    """
    Reject server identifiers no tool should ever see.

    Raises:
        BadParameterError: If server is not a non-empty string of sane length
    """
    if not isinstance(server, str) or not server:
        raise BadParameterError("server", "empty server identifier")
    if len(server) > MAX_SERVER_IDENTIFIER_LENGTH:
        raise BadParameterError(
            "server",
            f"identifier longer than {MAX_SERVER_IDENTIFIER_LENGTH} characters"
        )


class SyncExecutor:
    """
    Spawns client tools and interprets their output.

    Holds no per-request state, so one instance can serve any number of
    sequential requests.
    """

    def __init__(
        self,
        shell: str = DEFAULT_SHELL,
        clock: Callable[[], float] = time.time,
        resolver: Callable[[str], str] = resolve,
    ):
        self.shell = shell
        self.clock = clock
        self.resolver = resolver

    def run(
        self,
        server: str,
        mode: SyncMode,
        protocol: ProtocolKind,
        template: CommandTemplate,
        parser: Optional[OutputParser],
    ) -> ClockTime:
        """
        Retrieve time from a server and optionally apply it.

        Args:
            server: Time server name or address
            mode: Observe only, or observe and set the system clock
            protocol: Protocol the tool speaks (for logging)
            template: Command to run for this protocol and mode
            parser: Output line parser, required for OBSERVE_ONLY

        Returns:
            Server time for OBSERVE_ONLY, ClockTime.zero() for OBSERVE_AND_APPLY

        Raises:
            BadParameterError: Invalid server identifier or missing parser
            NotFoundError: Server name could not be resolved
            UnavailableError: Tool gave no verdict (OBSERVE_AND_APPLY)
            FaultError: Tool could not run, failed, or printed no usable time
        """
        validate_server(server)
        if mode is SyncMode.OBSERVE_ONLY and parser is None:
            raise BadParameterError("parser", "required to observe time")

        # Validate name resolution before spending a tool run on it
        if not is_literal_address(server):
            try:
                self.resolver(server)
            except NotFoundError:
                logger.warning(
                    f"Failed to resolve server {server} into IP address to get clock time"
                )
                raise

        command = template.render(server)
        logger.debug(f"{protocol.value}: running '{command}'")

        with self._spawn(command) as output:
            if mode is SyncMode.OBSERVE_ONLY:
                return self._scan_time(output, server, parser)
            return self._scan_status(output, server)

    @contextmanager
    def _spawn(self, command: str) -> Iterator[IO[str]]:
        """Run command through the shell, yielding its stdout. Always reaps the process."""
        try:
            process = subprocess.Popen(
                command,
                shell=True,
                executable=self.shell,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.error(f"Failed to run command '{command}' ({e})")
            raise FaultError(f"Failed to run command: {e}", {"command": command}) from e

        try:
            yield process.stdout
        finally:
            process.stdout.close()
            returncode = process.wait()
            logger.debug(f"Command '{command}' exited with {returncode}")

    def _scan_time(self, output: IO[str], server: str, parser: OutputParser) -> ClockTime:
        for line in output:
            try:
                clock_time = parser.parse(line, self.clock())
            except FaultError as e:
                # Tools may print informational lines before the time report
                logger.debug(f"Skipping output line: {e.message}")
                continue
            if clock_time is not None:
                return clock_time

        logger.error(f"Failed to get time from server {server}")
        raise FaultError(f"No time retrieved from server {server}", {"server": server})

    def _scan_status(self, output: IO[str], server: str) -> ClockTime:
        """
        Read the first non-blank line as the tool's exit status.

        Only a line starting with the integer 0 is success. A verdict line
        with no leading integer is a fault, not an implicit 0.
        """
        for line in output:
            verdict = line.strip()
            if not verdict:
                continue

            result_code = parse_leading_int(verdict)
            logger.info(f"Result: {verdict}")
            if result_code == 0:
                return ClockTime.zero()
            raise FaultError(
                f"Time update from server {server} failed",
                {"server": server, "result": verdict}
            )

        logger.error(f"No result received while updating time from server {server}")
        raise UnavailableError(server)
