"""Closed taxonomy of key conversion errors.

Each variant carries its own payload and a ``kind`` tag.
:func:`adaconv.core.reporting.render_conversion_error` matches every variant
listed in :data:`CONVERSION_ERROR_VARIANTS`.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ConversionError(BaseModel):
    """Base of the conversion error variants."""
    model_config = ConfigDict(frozen=True)


class Bech32DecodingError(ConversionError):
    """A Bech32 key read from a file failed to decode."""
    kind: Literal["bech32_decoding"] = "bech32_decoding"
    path: str = Field(..., description="File the key was read from")
    underlying_error: str = Field(..., description="Decoder failure description")


class ITNError(ConversionError):
    """A legacy ITN key could not be turned into raw bytes."""
    kind: Literal["itn"] = "itn"
    message: str


class SigningKeyDeserializationError(ConversionError):
    """Raw bytes do not form an Ed25519 signing key."""
    kind: Literal["signing_key_deserialization"] = "signing_key_deserialization"
    raw_bytes: bytes


class VerificationKeyDeserializationError(ConversionError):
    """Raw bytes do not form an Ed25519 verification key."""
    kind: Literal["verification_key_deserialization"] = "verification_key_deserialization"
    raw_bytes: bytes


CONVERSION_ERROR_VARIANTS = (
    Bech32DecodingError,
    ITNError,
    SigningKeyDeserializationError,
    VerificationKeyDeserializationError,
)
