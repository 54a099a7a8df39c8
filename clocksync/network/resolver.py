"""
clocksync Server Address Resolution

Time servers may be given as literal IPv4/IPv6 addresses or as host names.
Names are checked with a single resolver call before any tool is spawned so
an unknown server is reported as NotFound instead of a tool failure.
"""

from __future__ import annotations
import ipaddress
import logging
import socket

from clocksync.errors import NotFoundError

logger = logging.getLogger(__name__)


def is_literal_address(identifier: str) -> bool:
    """
    Classify a server identifier.

    Args:
        identifier: Server name or address

    Returns:
        True if identifier is a valid IPv4 or IPv6 address literal
    """
    if not isinstance(identifier, str) or not identifier:
        return False
    # Scoped IPv6 ("fe80::1%eth0") is not an address literal for inet_pton
    if "%" in identifier:
        return False
    try:
        ipaddress.ip_address(identifier)
    except ValueError:
        return False
    return True


def resolve(name: str) -> str:
    """
    Resolve a host name into an IP address.

    Only the first address returned by the resolver is used, no
    reachability check is done.

    Args:
        name: Host name to resolve

    Returns:
        Resolved address in presentation format

    Raises:
        NotFoundError: If resolution fails or yields no address
    """
    try:
        results = socket.getaddrinfo(
            name, None, family=socket.AF_UNSPEC, type=socket.SOCK_DGRAM
        )
    except (socket.gaierror, UnicodeError) as e:
        logger.error(f"Failed to resolve host name {name}: {e}")
        raise NotFoundError(name, str(e)) from e

    for _family, _type, _proto, _canonname, sockaddr in results:
        address = sockaddr[0]
        logger.debug(f"Name {name} resolved to IP address {address}")
        return address

    logger.error(f"Name {name} not resolved to any valid IP address")
    raise NotFoundError(name, "no address returned")
