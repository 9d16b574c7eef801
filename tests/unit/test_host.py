"""tests/unit/test_host.py

Unit tests for urlcraft.net.host.

Test Coverage:
    - Registered names: label rules, case-insensitive equality, pre-encoded input
    - IPv4: octet range, leading zeros, no fallback to registered name
    - IPv6: '::' compression, group counts, embedded IPv4, canonical output
"""

import pytest

from urlcraft.exceptions import InvalidHost, MalformedEncoding
from urlcraft.net.host import IPv4Address, IPv6Address, RegisteredName, classify

# ============================================================================
# TEST CLASS: Registered names
# ============================================================================


class TestRegisteredName:
    """Tests for registered name classification."""

    @pytest.mark.parametrize(
        "raw",
        ["example.com", "localhost", "a-b.c-d.e", "x1.y2", "1.2.3", "xn--bcher-kva.example"],
    )
    def test_valid(self, raw):
        """Test valid names classify and round-trip."""
        host = classify(raw)
        assert isinstance(host, RegisteredName)
        assert str(host) == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            ".",
            "example..com",
            "example.com.",
            ".example.com",
            "-example.com",
            "example-.com",
            "exa_mple.com",
            "exa mple.com",
            "bücher.example",
            "1:2:3:4:5:6:7:8:9",
            "host:80",
        ],
    )
    def test_invalid(self, raw):
        """Test malformed names raise InvalidHost."""
        with pytest.raises(InvalidHost):
            classify(raw)

    def test_case_preserved_but_ignored_for_equality(self):
        """Test case is kept for output and ignored for equality."""
        upper = classify("WWW.Example.COM")
        assert str(upper) == "WWW.Example.COM"
        assert upper == RegisteredName("www.example.com")
        assert hash(upper) == hash(RegisteredName("www.example.com"))

    def test_percent_encoded_name_decoded(self):
        """Test pre-encoded names are decoded first."""
        host = classify("ex%61mple.com")
        assert host == RegisteredName("example.com")
        assert str(host) == "example.com"

    def test_percent_decoding_keeps_decoded_case(self):
        """Test a decoded name keeps the case of the decoded characters."""
        host = classify("ex%41mple.com")
        assert str(host) == "exAmple.com"
        assert host == RegisteredName("example.com")

    def test_bad_percent_encoding(self):
        """Test decode failures surface as InvalidHost."""
        with pytest.raises(InvalidHost) as exc_info:
            classify("exa%zzmple.com")
        assert exc_info.value.__cause__ is not None

    def test_lone_surrogate(self):
        """Test a lone surrogate raises InvalidHost."""
        with pytest.raises(InvalidHost) as exc_info:
            classify("a\ud800")
        assert isinstance(exc_info.value.__cause__, MalformedEncoding)

    def test_encoded_dotted_quad_is_ipv4(self):
        """Test an encoded dotted quad is still an IPv4 address."""
        assert classify("%31.2.3.4") == IPv4Address((1, 2, 3, 4))

    def test_not_equal_to_other_variants(self):
        """Test variants never compare equal to each other."""
        assert RegisteredName("localhost") != IPv4Address((127, 0, 0, 1))

    def test_type_check(self):
        """Test non-str input raises TypeError."""
        with pytest.raises(TypeError):
            classify(None)  # type: ignore[arg-type]


# ============================================================================
# TEST CLASS: IPv4
# ============================================================================


class TestIPv4:
    """Tests for IPv4 classification."""

    @pytest.mark.parametrize(
        "raw, octets",
        [
            ("0.0.0.0", (0, 0, 0, 0)),
            ("127.0.0.1", (127, 0, 0, 1)),
            ("192.0.2.10", (192, 0, 2, 10)),
            ("255.255.255.255", (255, 255, 255, 255)),
        ],
    )
    def test_valid(self, raw, octets):
        """Test valid dotted quads classify as IPv4."""
        host = classify(raw)
        assert isinstance(host, IPv4Address)
        assert host.octets == octets
        assert str(host) == raw

    @pytest.mark.parametrize(
        "raw",
        ["999.1.1.1", "256.0.0.1", "1.2.3.256", "01.2.3.4", "1.2.3.00", "1.2.3.4444"],
    )
    def test_invalid_is_not_a_name(self, raw):
        """Test invalid dotted quads fail instead of becoming names."""
        with pytest.raises(InvalidHost):
            classify(raw)

    def test_constructor_validates(self):
        """Test direct construction checks octets."""
        with pytest.raises(InvalidHost):
            IPv4Address((1, 2, 3))  # type: ignore[arg-type]
        with pytest.raises(InvalidHost):
            IPv4Address((1, 2, 3, 300))


# ============================================================================
# TEST CLASS: IPv6
# ============================================================================


class TestIPv6:
    """Tests for IPv6 classification."""

    @pytest.mark.parametrize(
        "raw, groups",
        [
            ("[::1]", (0, 0, 0, 0, 0, 0, 0, 1)),
            ("[::]", (0,) * 8),
            ("[1:2:3:4:5:6:7:8]", (1, 2, 3, 4, 5, 6, 7, 8)),
            ("[2001:db8::1]", (0x2001, 0xDB8, 0, 0, 0, 0, 0, 1)),
            ("[fe80::]", (0xFE80, 0, 0, 0, 0, 0, 0, 0)),
            ("[1:2:3:4:5:6:7::]", (1, 2, 3, 4, 5, 6, 7, 0)),
            ("[::ffff:192.0.2.1]", (0, 0, 0, 0, 0, 0xFFFF, 0xC000, 0x0201)),
            ("[64:ff9b::192.0.2.33]", (0x64, 0xFF9B, 0, 0, 0, 0, 0xC000, 0x0221)),
        ],
    )
    def test_valid(self, raw, groups):
        """Test valid literals parse into eight groups."""
        host = classify(raw)
        assert isinstance(host, IPv6Address)
        assert host.groups == groups

    @pytest.mark.parametrize(
        "raw",
        [
            "[1:2:3:4:5:6:7:8:9]",
            "[1:2:3:4:5:6:7]",
            "[1:2:3:4::5:6:7:8]",
            "[1::2::3]",
            "[:::1]",
            "[12345::1]",
            "[g::1]",
            "[:1:2:3:4:5:6:7]",
            "[1:2:3:4:5:6:7:]",
            "[::1.2.3]",
            "[::256.1.1.1]",
            "[::1.2.3.4:5]",
            "[1.2.3.4::]",
            "[]",
            "[::1",
            "::1]",
            "[fe80::1%25eth0]",
        ],
    )
    def test_invalid(self, raw):
        """Test malformed literals raise InvalidHost."""
        with pytest.raises(InvalidHost):
            classify(raw)

    @pytest.mark.parametrize(
        "raw, canonical",
        [
            ("[::1]", "[::1]"),
            ("[0:0:0:0:0:0:0:1]", "[::1]"),
            ("[2001:DB8:0:0:0:0:0:1]", "[2001:db8::1]"),
            ("[2001:0db8::0001]", "[2001:db8::1]"),
            ("[1:0:0:2:0:0:0:3]", "[1:0:0:2::3]"),
            ("[1:0:0:2:3:0:0:4]", "[1::2:3:0:0:4]"),
            ("[1:0:2:3:4:5:6:7]", "[1:0:2:3:4:5:6:7]"),
            ("[::ffff:c000:201]", "[::ffff:192.0.2.1]"),
        ],
    )
    def test_canonical_text(self, raw, canonical):
        """Test output is lowercase with the longest zero run compressed."""
        assert str(classify(raw)) == canonical

    def test_compressed_range(self):
        """Test the compressed range is the first longest zero run."""
        assert classify("[1:0:0:2:0:0:3:4]").compressed_range == (1, 3)
        assert classify("[1:0:2:3:4:5:6:7]").compressed_range is None
        assert classify("[::]").compressed_range == (0, 8)

    def test_too_many_groups_without_brackets(self):
        """Test an unbracketed literal is not accepted as a host."""
        with pytest.raises(InvalidHost):
            classify("1:2:3:4:5:6:7:8:9")

    def test_constructor_validates(self):
        """Test direct construction checks groups."""
        with pytest.raises(InvalidHost):
            IPv6Address((0,) * 7)
        with pytest.raises(InvalidHost):
            IPv6Address((0x10000,) + (0,) * 7)

    def test_equality_is_structural(self):
        """Test different spellings of one address are equal."""
        assert classify("[::1]") == classify("[0:0:0:0:0:0:0:1]")
        assert hash(classify("[::1]")) == hash(classify("[0::1]"))
