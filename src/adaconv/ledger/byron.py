"""
Byron-era (bootstrap) address binary format.

A Byron address is the CBOR array ``[Tag(24, payload), crc32(payload)]``
where ``payload`` is itself the CBOR encoding of
``[root, attributes, address_type]``:

- ``root``: 28-byte address root hash
- ``attributes``: map from small unsigned ints to CBOR-encoded byte strings
  (1 = encrypted derivation path, 2 = network magic)
- ``address_type``: 0 public key, 1 script, 2 redeem
"""

import zlib
from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Tuple

import cbor2

from adaconv.exceptions import AddressDeserializationError, CredentialError
from adaconv.utils.hash import KEY_HASH_SIZE

CBOR_IN_CBOR_TAG = 24


class ByronAddressType(IntEnum):
    PUBKEY = 0
    SCRIPT = 1
    REDEEM = 2


@dataclass(frozen=True)
class ByronAddress:
    """A legacy Byron-era address."""

    root: bytes
    attributes: Tuple[Tuple[int, bytes], ...] = ()
    address_type: ByronAddressType = ByronAddressType.PUBKEY

    def __post_init__(self):
        if not isinstance(self.root, bytes) or len(self.root) != KEY_HASH_SIZE:
            raise CredentialError(f"Byron address root must be {KEY_HASH_SIZE} bytes")
        # Ordered (key, value) pairs; key order is kept for re-encoding
        pairs = self.attributes.items() if isinstance(self.attributes, Mapping) else self.attributes
        object.__setattr__(self, "attributes", tuple((int(k), bytes(v)) for k, v in pairs))

    def payload(self) -> bytes:
        return cbor2.dumps([self.root, dict(self.attributes), int(self.address_type)])

    def to_bytes(self) -> bytes:
        """Serialize to the CRC-protected CBOR envelope."""
        payload = self.payload()
        return cbor2.dumps([cbor2.CBORTag(CBOR_IN_CBOR_TAG, payload), zlib.crc32(payload)])

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByronAddress":
        """
        Deserialize a Byron address, checking structure, CRC and that the
        whole input is consumed.

        Raises:
            AddressDeserializationError: If `data` is not a Byron address
        """
        envelope = _decode_full(data)
        if not isinstance(envelope, list) or len(envelope) != 2:
            raise AddressDeserializationError("Byron address must be a 2-element array")
        tagged, crc = envelope
        if not isinstance(tagged, cbor2.CBORTag) or tagged.tag != CBOR_IN_CBOR_TAG:
            raise AddressDeserializationError("Byron address payload must be tag 24")
        payload = tagged.value
        if not isinstance(payload, bytes):
            raise AddressDeserializationError("Byron address payload must be bytes")
        if not isinstance(crc, int) or zlib.crc32(payload) != crc:
            raise AddressDeserializationError("Byron address CRC mismatch")

        body = _decode_full(payload)
        if not isinstance(body, list) or len(body) != 3:
            raise AddressDeserializationError("Byron address body must be a 3-element array")
        root, attributes, address_type = body
        if not isinstance(root, bytes) or len(root) != KEY_HASH_SIZE:
            raise AddressDeserializationError("Byron address root must be 28 bytes")
        if not isinstance(attributes, dict) or not all(
            isinstance(k, int) and k >= 0 and isinstance(v, bytes)
            for k, v in attributes.items()
        ):
            raise AddressDeserializationError("Malformed Byron address attributes")
        try:
            kind = ByronAddressType(address_type)
        except ValueError:
            raise AddressDeserializationError(
                f"Unknown Byron address type: {address_type!r}"
            ) from None
        return cls(root, tuple(attributes.items()), kind)


def _decode_full(data: bytes):
    """Decode exactly one CBOR item that is canonically encoded as all of `data`."""
    try:
        item = cbor2.loads(data)
        reencoded = cbor2.dumps(item)
    except Exception as e:  # cbor2 reports malformed input through many exception types
        raise AddressDeserializationError(f"Invalid CBOR: {e}") from e
    if reencoded != data:
        raise AddressDeserializationError("Trailing or non-canonical CBOR data")
    return item
