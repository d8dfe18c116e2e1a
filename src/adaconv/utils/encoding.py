"""Encoding and decoding utilities."""

import string
from typing import Tuple

from adaconv.exceptions import HexDecodingError

HEX_DIGITS = frozenset(string.hexdigits)


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string.

    Args:
        data: Bytes to convert

    Returns:
        str: Hexadecimal string without prefix
    """
    return data.hex()


def is_hex(text: str) -> bool:
    """Return True if every character of `text` is a hexadecimal digit."""
    return all(ch in HEX_DIGITS for ch in text)


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hexadecimal string to bytes, rejecting anything else.

    Unlike :meth:`bytes.fromhex` this does not skip whitespace.

    Args:
        hex_str: Hexadecimal string, either case

    Returns:
        bytes: Decoded bytes

    Raises:
        HexDecodingError: If the string has odd length or non-hex characters
    """
    if len(hex_str) % 2 != 0:
        raise HexDecodingError("Hex string must have even number of characters")
    if not is_hex(hex_str):
        raise HexDecodingError(f"Invalid hex characters in: {hex_str!r}")
    return bytes.fromhex(hex_str)


def hex_prefix_to_bytes(hex_str: str) -> Tuple[bytes, str]:
    """
    Decode the longest valid run of hex pairs at the start of `hex_str`.

    Decoding stops at the first pair containing a non-hex character (or at a
    trailing odd character). The undecoded remainder is returned alongside the
    bytes so callers can decide whether to accept a partial decode.

    Args:
        hex_str: Text to decode

    Returns:
        tuple: (decoded bytes, undecoded remainder)
    """
    end = 0
    while end + 2 <= len(hex_str) and is_hex(hex_str[end:end + 2]):
        end += 2
    return bytes.fromhex(hex_str[:end]), hex_str[end:]
