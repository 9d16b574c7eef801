"""tests/unit/test_authority.py"""

import logging

import pytest

from urlcraft.exceptions import InvalidHost, InvalidPort
from urlcraft.net.authority import Authority, split
from urlcraft.net.host import IPv4Address, IPv6Address, RegisteredName
from urlcraft.net.port import UNSPECIFIED_PORT


class TestSplit:
    """Tests for split()."""

    def test_name_with_port(self):
        """Test a registered name and port."""
        assert split("example.com:8080") == (RegisteredName("example.com"), 8080)

    def test_ipv6_with_port(self):
        """Test a bracketed IPv6 literal and port."""
        host, port = split("[::1]:9000")
        assert host == IPv6Address((0, 0, 0, 0, 0, 0, 0, 1))
        assert port == 9000

    def test_ipv6_without_port(self):
        """Test colons inside brackets are not port separators."""
        authority = split("[2001:db8::1]")
        assert isinstance(authority.host, IPv6Address)
        assert authority.port == UNSPECIFIED_PORT
        assert not authority.has_port

    def test_ipv4_with_port(self):
        """Test an IPv4 address and port."""
        assert split("127.0.0.1:0") == (IPv4Address((127, 0, 0, 1)), 0)

    def test_no_port(self):
        """Test a missing port yields the unspecified sentinel."""
        authority = split("example.com")
        assert authority.port == UNSPECIFIED_PORT
        assert authority.host == RegisteredName("example.com")

    @pytest.mark.parametrize(
        "raw",
        ["example.com:http", "example.com:", "example.com:-1", "example.com:8o", "[::1]9000", "[::1]:", "example.com:８０"],
    )
    def test_non_decimal_port(self, raw):
        """Test non-decimal port text raises InvalidHost."""
        with pytest.raises(InvalidHost):
            split(raw)

    @pytest.mark.parametrize("raw", ["example.com:65536", "[::1]:99999"])
    def test_port_out_of_range(self, raw):
        """Test out-of-range ports raise InvalidPort."""
        with pytest.raises(InvalidPort):
            split(raw)

    @pytest.mark.parametrize("raw", ["", ":80", "bad host:80", "[::1:80", "::1", "999.1.1.1:80"])
    def test_invalid_host(self, raw):
        """Test invalid hosts raise InvalidHost."""
        with pytest.raises(InvalidHost):
            split(raw)

    def test_logs_result(self, caplog):
        """Test the split is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="urlcraft.net.authority"):
            split("example.com:8080")
        assert "example.com:8080" in caplog.text


class TestAuthority:
    """Tests for the Authority value."""

    def test_str_with_port(self):
        """Test the port is rendered when given."""
        assert str(Authority(RegisteredName("a.b"), 81)) == "a.b:81"

    def test_str_without_port(self):
        """Test the port is omitted when unspecified."""
        assert str(Authority(IPv6Address((0,) * 7 + (1,)))) == "[::1]"

    def test_round_trip(self):
        """Test str(split(x)) == x for canonical input."""
        for raw in ("example.com:8080", "[::1]:9000", "10.0.0.1", "Example.org"):
            assert str(split(raw)) == raw
