"""
clocksync Command Templates
"""

from __future__ import annotations
import shlex
from dataclasses import dataclass

from clocksync.constants import SERVER_PLACEHOLDER


@dataclass(frozen=True)
class CommandTemplate:
    """
    Shell command line with one server placeholder.

    The server identifier is shell-quoted when rendered, so a name can never
    inject extra shell syntax into the command.
    """
    pattern: str

    def __post_init__(self):
        if self.pattern.count(SERVER_PLACEHOLDER) != 1:
            raise ValueError(
                f"Command template needs exactly one {SERVER_PLACEHOLDER!r}: {self.pattern!r}"
            )

    def render(self, server: str) -> str:
        return self.pattern.replace(SERVER_PLACEHOLDER, shlex.quote(server))

    def __str__(self) -> str:
        return self.pattern
