"""
clocksync Address Resolution Tests
"""

import socket
from unittest.mock import patch

import pytest

from clocksync.errors import NotFoundError
from clocksync.network.resolver import is_literal_address, resolve


class TestIsLiteralAddress:
    """Tests for address literal classification."""

    @pytest.mark.parametrize("address", [
        "127.0.0.1",
        "0.0.0.0",
        "255.255.255.255",
        "::1",
        "::",
        "2001:db8::1",
        "fe80::1:2:3:4",
        "::ffff:192.0.2.1",
    ])
    def test_valid_literals(self, address):
        assert is_literal_address(address) is True

    @pytest.mark.parametrize("identifier", [
        "",
        "pool.ntp.org",
        "localhost",
        "256.1.1.1",
        "1.2.3",
        "1.2.3.4.5",
        "2001:db8:::1",
        "1.2.3.4 ",
        "gggg::1",
        "fe80::1%eth0",
        "::1%1",
    ])
    def test_non_literals(self, identifier):
        assert is_literal_address(identifier) is False

    def test_non_string(self):
        """Test classification never raises."""
        assert is_literal_address(None) is False
        assert is_literal_address(1234) is False


class TestResolve:
    """Tests for host name resolution."""

    def test_first_result_wins(self):
        results = [
            (socket.AF_INET, socket.SOCK_DGRAM, 17, "", ("192.0.2.1", 0)),
            (socket.AF_INET6, socket.SOCK_DGRAM, 17, "", ("2001:db8::1", 0, 0, 0)),
        ]
        with patch("clocksync.network.resolver.socket.getaddrinfo", return_value=results) as gai:
            assert resolve("time.example.com") == "192.0.2.1"

        gai.assert_called_once_with(
            "time.example.com", None, family=socket.AF_UNSPEC, type=socket.SOCK_DGRAM
        )

    def test_ipv6_result(self):
        results = [(socket.AF_INET6, socket.SOCK_DGRAM, 17, "", ("2001:db8::1", 0, 0, 0))]
        with patch("clocksync.network.resolver.socket.getaddrinfo", return_value=results):
            assert resolve("v6.example.com") == "2001:db8::1"

    def test_resolver_error(self):
        error = socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        with patch("clocksync.network.resolver.socket.getaddrinfo", side_effect=error):
            with pytest.raises(NotFoundError) as exc_info:
                resolve("nowhere.invalid")
        assert exc_info.value.details == {"server": "nowhere.invalid"}

    def test_empty_result(self):
        with patch("clocksync.network.resolver.socket.getaddrinfo", return_value=[]):
            with pytest.raises(NotFoundError):
                resolve("empty.example.com")

    def test_localhost(self):
        """Test a real lookup yields an address literal."""
        assert is_literal_address(resolve("localhost"))
