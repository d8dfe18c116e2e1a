"""Hex text <-> address conversion.

Byron and Shelley addresses carry no shared tag that tells them apart, so
decoding tries each era's deserializer in a fixed priority order and keeps the
first one that accepts the bytes. Shelley is tried first.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple

import cbor2

from adaconv.config import get_settings
from adaconv.exceptions import AddressDeserializationError
from adaconv.ledger.address import Address
from adaconv.ledger.byron import ByronAddress
from adaconv.ledger.shelley import RewardAccount, ShelleyAddress
from adaconv.utils.encoding import bytes_to_hex, hex_prefix_to_bytes

logger = logging.getLogger(__name__)

AddressDecoder = Callable[[bytes], Address]

#: Trial decoders in priority order.
ADDRESS_DECODERS: Tuple[Tuple[str, AddressDecoder], ...] = (
    ("shelley", ShelleyAddress.from_bytes),
    ("byron", ByronAddress.from_bytes),
)


def decode_address_bytes(
    raw: bytes,
    decoders: Sequence[Tuple[str, AddressDecoder]] = ADDRESS_DECODERS,
) -> Optional[Address]:
    """
    Return the address produced by the first decoder that accepts `raw`.

    Args:
        raw: Binary address
        decoders: (name, decoder) pairs tried in order

    Returns:
        The decoded address, or None if every decoder rejects the bytes
    """
    for name, decoder in decoders:
        try:
            address = decoder(raw)
        except AddressDeserializationError as e:
            logger.debug(f"{name} decoder rejected {len(raw)} bytes: {e}")
            continue
        logger.debug(f"{name} decoder accepted {len(raw)} bytes")
        return address
    return None


def address_from_hex(text: str, strict: Optional[bool] = None) -> Optional[Address]:
    """
    Decode hex text into an address.

    Hex decoding stops at the first invalid pair and the rest of the text is
    ignored, unless `strict` is set (it defaults to the ``strict_hex``
    setting), in which case any undecodable tail rejects the input.

    Returns:
        The address, or None if the text is not a Shelley or Byron address
    """
    if strict is None:
        strict = get_settings().strict_hex
    raw, remainder = hex_prefix_to_bytes(text)
    if remainder:
        if strict:
            logger.debug(f"Rejecting address hex with undecodable tail: {remainder!r}")
            return None
        logger.debug(f"Ignoring undecodable address hex tail: {remainder!r}")
    return decode_address_bytes(raw)


def serialize_address(address: Address) -> bytes:
    """Serialize an address with its era's binary serializer."""
    if isinstance(address, ByronAddress):
        return address.to_bytes()
    if isinstance(address, ShelleyAddress):
        return address.to_bytes()
    if isinstance(address, RewardAccount):
        # Reward accounts are written as a CBOR byte string.
        return cbor2.dumps(address.to_bytes())
    raise TypeError(f"Not an address: {type(address).__name__}")


def address_to_hex(address: Address) -> str:
    """Encode an address as lowercase hex."""
    return bytes_to_hex(serialize_address(address))
