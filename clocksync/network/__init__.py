"""
clocksync Network Helpers
"""

from clocksync.network.resolver import is_literal_address, resolve

__all__ = [
    "is_literal_address",
    "resolve",
]
