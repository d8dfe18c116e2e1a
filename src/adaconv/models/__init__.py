"""Pydantic models for results, errors and reports."""

from adaconv.models.results import Failure, ParseFailure, ReadFailure
from adaconv.models.errors import (
    ConversionError,
    Bech32DecodingError,
    ITNError,
    SigningKeyDeserializationError,
    VerificationKeyDeserializationError,
)

__all__ = [
    "Failure",
    "ParseFailure",
    "ReadFailure",
    "ConversionError",
    "Bech32DecodingError",
    "ITNError",
    "SigningKeyDeserializationError",
    "VerificationKeyDeserializationError",
]
