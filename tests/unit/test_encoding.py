"""Tests for hex and hash utilities."""

import pytest

from adaconv.exceptions import HexDecodingError
from adaconv.utils.encoding import bytes_to_hex, hex_prefix_to_bytes, hex_to_bytes, is_hex
from adaconv.utils.hash import blake2b_224, blake2b_256


class TestBytesToHex:
    """Test bytes_to_hex function."""

    def test_lowercase(self):
        assert bytes_to_hex(bytes([0, 1, 2, 255, 254, 253])) == "000102fffefd"

    def test_empty(self):
        assert bytes_to_hex(b"") == ""


class TestHexToBytes:
    """Test strict hex decoding."""

    def test_case_insensitive(self):
        assert hex_to_bytes("ABCD") == hex_to_bytes("abcd") == b"\xab\xcd"

    def test_odd_length_error(self):
        with pytest.raises(HexDecodingError, match="even number of characters"):
            hex_to_bytes("6a8")

    def test_invalid_chars(self):
        with pytest.raises(HexDecodingError):
            hex_to_bytes("GGGG")

    def test_whitespace_rejected(self):
        """bytes.fromhex would skip the space; strict decoding must not."""
        with pytest.raises(HexDecodingError):
            hex_to_bytes("ab cd ")

    def test_is_hex(self):
        assert is_hex("0123456789abcdefABCDEF")
        assert not is_hex("0x12")


class TestHexPrefixToBytes:
    """Test lenient prefix decoding."""

    def test_full_decode(self):
        assert hex_prefix_to_bytes("deadbeef") == (b"\xde\xad\xbe\xef", "")

    def test_stops_at_invalid_pair(self):
        assert hex_prefix_to_bytes("dead zz beef") == (b"\xde\xad", " zz beef")

    def test_pair_with_one_bad_char(self):
        assert hex_prefix_to_bytes("ab0g12") == (b"\xab", "0g12")

    def test_odd_trailing_char(self):
        assert hex_prefix_to_bytes("abc") == (b"\xab", "c")

    def test_nothing_decodable(self):
        assert hex_prefix_to_bytes("xy") == (b"", "xy")


class TestBlake2b:
    """Test hash helpers."""

    def test_digest_sizes(self):
        assert len(blake2b_256(b"body")) == 32
        assert len(blake2b_224(b"key")) == 28

    def test_str_and_bytes_agree(self):
        assert blake2b_256("abc") == blake2b_256(b"abc")

    def test_known_empty_digest(self):
        assert blake2b_256(b"").hex() == (
            "0e5751c026e543b2e8ab2eb06099daa1d1e5df47778f7787faab45cdf12fe3a8"
        )
