"""Human readable rendering of conversion errors."""

from adaconv.models.errors import (
    Bech32DecodingError,
    ConversionError,
    ITNError,
    SigningKeyDeserializationError,
    VerificationKeyDeserializationError,
)


def render_conversion_error(err: ConversionError) -> str:
    """
    Render a conversion error for display to the user.

    Raw key bytes are shown as an escaped byte string rather than hex.
    """
    if isinstance(err, Bech32DecodingError):
        return f"Error decoding Bech32 key at: {err.path!r} Error: {err.underlying_error}"
    if isinstance(err, ITNError):
        return err.message
    if isinstance(err, SigningKeyDeserializationError):
        return f"Error deserialising signing key: {err.raw_bytes!r}"
    if isinstance(err, VerificationKeyDeserializationError):
        return f"Error deserialising verification key: {err.raw_bytes!r}"
    raise TypeError(f"Unknown conversion error: {type(err).__name__}")
