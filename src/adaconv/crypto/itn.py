"""
Import of Incentivized Testnet (ITN) keys.

ITN keys are raw Ed25519 keys written as Bech32 strings, for example
``ed25519_pk1...`` for verification keys and ``ed25519_sk1...`` for signing
keys. The functions here turn those strings into Shelley-era key values and
report every failure as a :class:`~adaconv.models.errors.ConversionError`
value rather than raising.
"""

import logging
from typing import Optional, Union

from bech32 import CHARSET, bech32_decode, convertbits

from adaconv.config import get_settings
from adaconv.crypto.keys import SigningKey, StakingVerificationKey
from adaconv.exceptions import InvalidKeyError
from adaconv.models.errors import (
    Bech32DecodingError,
    ConversionError,
    ITNError,
    SigningKeyDeserializationError,
    VerificationKeyDeserializationError,
)
from adaconv.models.results import ReadFailure
from adaconv.utils.files import read_text

logger = logging.getLogger(__name__)

BECH32_MAX_LENGTH = 90
DATA_PART_ERROR = (
    "Error extracting a ByteString from a DataPart: "
    "the 5-bit data does not regroup into whole bytes"
)


class _Bech32Error(Exception):
    """Text is not a valid Bech32 string."""
    pass


def describe_bech32_failure(text: str) -> str:
    """
    Explain why `text` is not a valid Bech32 string.

    Checks run in the order `bech32_decode` applies them.
    """
    unprintable = [i for i, ch in enumerate(text) if ord(ch) < 33 or ord(ch) > 126]
    if unprintable:
        return f"StringToDecodeContainsInvalidChars at positions {unprintable}"
    if text.lower() != text and text.upper() != text:
        return "StringToDecodeHasMixedCase"
    if len(text) > BECH32_MAX_LENGTH:
        return f"StringToDecodeTooLong: {len(text)} characters, at most {BECH32_MAX_LENGTH} allowed"
    separator = text.rfind("1")
    if separator < 1:
        return "StringToDecodeMissingSeparatorChar"
    if separator + 7 > len(text):
        return "StringToDecodeTooShort"
    bad = [i for i, ch in enumerate(text) if i > separator and ch.lower() not in CHARSET]
    if bad:
        return f"StringToDecodeContainsInvalidChars at positions {bad}"
    return "StringToDecodeInvalidChecksum"


def _decode(text: str) -> Optional[bytes]:
    """
    Return the raw bytes of the data part, or None if it does not regroup
    into whole bytes.

    Raises:
        _Bech32Error: If `text` is not valid Bech32
    """
    # bech32_decode does not enforce the overall length limit
    if len(text) > BECH32_MAX_LENGTH:
        raise _Bech32Error(describe_bech32_failure(text))
    hrp, data = bech32_decode(text)
    if hrp is None or data is None:
        raise _Bech32Error(describe_bech32_failure(text))
    raw = convertbits(data, 5, 8, False)
    if raw is None:
        return None
    logger.debug(f"Decoded {len(raw)} bytes with human readable part {hrp!r}")
    return bytes(raw)


def decode_bech32_key(text: str) -> Union[bytes, ConversionError]:
    """
    Decode a Bech32 key string into its raw bytes.

    Returns:
        The bytes of the data part, or ITNError if the string is not valid
        Bech32 or its data part does not regroup into whole bytes
    """
    try:
        raw = _decode(text)
    except _Bech32Error as e:
        return ITNError(message=str(e))
    if raw is None:
        return ITNError(message=DATA_PART_ERROR)
    return raw


def human_readable_part(text: str) -> str:
    """Return the part of a Bech32 string before its last ``1`` separator."""
    return text[:text.rfind("1")].lower() if "1" in text else ""


def _warn_unexpected_prefix(text: str, expected: str) -> None:
    hrp = human_readable_part(text)
    if hrp != expected:
        logger.warning(f"Expected key prefix {expected!r}, got {hrp!r}")


def _to_verification_key(raw: bytes) -> Union[StakingVerificationKey, ConversionError]:
    try:
        return StakingVerificationKey.from_raw(raw)
    except InvalidKeyError as e:
        logger.debug(str(e))
        return VerificationKeyDeserializationError(raw_bytes=raw)


def _to_signing_key(raw: bytes) -> Union[SigningKey, ConversionError]:
    try:
        return SigningKey.from_raw(raw)
    except InvalidKeyError as e:
        logger.debug(str(e))
        return SigningKeyDeserializationError(raw_bytes=raw)


def convert_itn_verification_key(text: str) -> Union[StakingVerificationKey, ConversionError]:
    """Convert an ITN Bech32 public key into a Shelley staking verification key."""
    _warn_unexpected_prefix(text, get_settings().itn_verification_key_hrp)
    raw = decode_bech32_key(text)
    if isinstance(raw, ConversionError):
        return raw
    return _to_verification_key(raw)


def convert_itn_signing_key(text: str) -> Union[SigningKey, ConversionError]:
    """Convert an ITN Bech32 private key into a Shelley signing key."""
    _warn_unexpected_prefix(text, get_settings().itn_signing_key_hrp)
    raw = decode_bech32_key(text)
    if isinstance(raw, ConversionError):
        return raw
    return _to_signing_key(raw)


def _read_key_file(path: str, expected_hrp: str) -> Union[bytes, ConversionError]:
    content = read_text(path)
    if isinstance(content, ReadFailure):
        return ITNError(message=content.message)
    text = content.strip()
    _warn_unexpected_prefix(text, expected_hrp)
    try:
        raw = _decode(text)
    except _Bech32Error as e:
        return Bech32DecodingError(path=path, underlying_error=str(e))
    if raw is None:
        return ITNError(message=DATA_PART_ERROR)
    return raw


def import_itn_verification_key_file(path: str) -> Union[StakingVerificationKey, ConversionError]:
    """
    Read an ITN verification key file and convert it.

    A Bech32 failure is reported as Bech32DecodingError naming `path`.
    """
    raw = _read_key_file(path, get_settings().itn_verification_key_hrp)
    if isinstance(raw, ConversionError):
        return raw
    return _to_verification_key(raw)


def import_itn_signing_key_file(path: str) -> Union[SigningKey, ConversionError]:
    """
    Read an ITN signing key file and convert it.

    A Bech32 failure is reported as Bech32DecodingError naming `path`.
    """
    raw = _read_key_file(path, get_settings().itn_signing_key_hrp)
    if isinstance(raw, ConversionError):
        return raw
    return _to_signing_key(raw)
