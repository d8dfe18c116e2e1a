"""
Shelley-era address and reward account binary formats.

A Shelley address starts with a header byte whose high nibble is the address
type and whose low nibble is the network id. The header is followed by the
payment credential hash and, depending on the type, a stake credential hash,
a stake pointer, or nothing:

======  ===========  ===========
 type    payment      stake
======  ===========  ===========
 0       key hash     key hash
 1       script hash  key hash
 2       key hash     script hash
 3       script hash  script hash
 4       key hash     pointer
 5       script hash  pointer
 6       key hash     (none)
 7       script hash  (none)
======  ===========  ===========

Reward accounts use types 14 (key hash) and 15 (script hash) followed by the
stake credential hash only.
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from adaconv.exceptions import (
    AddressDeserializationError,
    CredentialError,
    InvalidNetworkError,
    PointerError,
)
from adaconv.utils.hash import KEY_HASH_SIZE

logger = logging.getLogger(__name__)

_PAYMENT_SCRIPT_BIT = 0x10
_STAKE_SCRIPT_BIT = 0x20
_POINTER_TYPES = (4, 5)
_ENTERPRISE_TYPES = (6, 7)
_REWARD_KEY_TYPE = 14
_REWARD_SCRIPT_TYPE = 15


class Network(IntEnum):
    """Network id stored in the low nibble of the header byte."""
    TESTNET = 0
    MAINNET = 1

    @classmethod
    def from_id(cls, value: int) -> "Network":
        try:
            return cls(value)
        except ValueError:
            raise InvalidNetworkError(f"Unknown network id: {value}") from None


class CredentialKind(str, Enum):
    """What a credential hash commits to."""
    KEY_HASH = "key_hash"
    SCRIPT_HASH = "script_hash"


@dataclass(frozen=True)
class Credential:
    """A payment or stake credential: a 28-byte key or script hash."""

    kind: CredentialKind
    digest: bytes

    def __post_init__(self):
        if not isinstance(self.digest, bytes) or len(self.digest) != KEY_HASH_SIZE:
            raise CredentialError(f"Credential hash must be {KEY_HASH_SIZE} bytes")

    @property
    def is_script(self) -> bool:
        return self.kind is CredentialKind.SCRIPT_HASH


@dataclass(frozen=True)
class Pointer:
    """Location of a stake registration certificate on chain."""

    slot: int
    tx_index: int
    cert_index: int

    def __post_init__(self):
        if min(self.slot, self.tx_index, self.cert_index) < 0:
            raise PointerError("Pointer fields must be non-negative")

    def to_bytes(self) -> bytes:
        return b"".join(
            encode_varnat(n) for n in (self.slot, self.tx_index, self.cert_index)
        )

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> Tuple["Pointer", int]:
        """Decode a pointer at `offset`; return it and the offset after it."""
        slot, offset = decode_varnat(data, offset)
        tx_index, offset = decode_varnat(data, offset)
        cert_index, offset = decode_varnat(data, offset)
        return cls(slot, tx_index, cert_index), offset


StakeReference = Optional[Union[Credential, Pointer]]


def encode_varnat(n: int) -> bytes:
    """
    Encode a natural number as big-endian 7-bit groups.

    Every byte except the last has its high bit set.
    """
    if n < 0:
        raise PointerError("Cannot encode a negative number")
    out = [n & 0x7F]
    n >>= 7
    while n:
        out.append(0x80 | (n & 0x7F))
        n >>= 7
    return bytes(reversed(out))


def decode_varnat(data: bytes, offset: int) -> Tuple[int, int]:
    """Decode a natural encoded by :func:`encode_varnat` starting at `offset`."""
    value = 0
    while True:
        if offset >= len(data):
            raise AddressDeserializationError("Truncated variable-length natural")
        byte = data[offset]
        offset += 1
        value = (value << 7) | (byte & 0x7F)
        if not byte & 0x80:
            return value, offset


def _read_hash(data: bytes, offset: int) -> Tuple[bytes, int]:
    end = offset + KEY_HASH_SIZE
    if len(data) < end:
        raise AddressDeserializationError(
            f"Expected {KEY_HASH_SIZE}-byte hash at offset {offset}"
        )
    return data[offset:end], end


def _credential_kind(is_script: bool) -> CredentialKind:
    return CredentialKind.SCRIPT_HASH if is_script else CredentialKind.KEY_HASH


@dataclass(frozen=True)
class ShelleyAddress:
    """A Shelley-era payment address."""

    network: Network
    payment: Credential
    stake: StakeReference = None

    @property
    def address_type(self) -> int:
        header_type = _PAYMENT_SCRIPT_BIT if self.payment.is_script else 0
        if self.stake is None:
            header_type |= 0x60
        elif isinstance(self.stake, Pointer):
            header_type |= 0x40
        elif self.stake.is_script:
            header_type |= _STAKE_SCRIPT_BIT
        return header_type >> 4

    def to_bytes(self) -> bytes:
        """Serialize to the header-prefixed binary address format."""
        header = (self.address_type << 4) | int(self.network)
        body = bytes([header]) + self.payment.digest
        if isinstance(self.stake, Pointer):
            body += self.stake.to_bytes()
        elif self.stake is not None:
            body += self.stake.digest
        return body

    @classmethod
    def from_bytes(cls, data: bytes) -> "ShelleyAddress":
        """
        Deserialize a Shelley address, requiring the whole input be consumed.

        Raises:
            AddressDeserializationError: If `data` is not a Shelley address
        """
        if not data:
            raise AddressDeserializationError("Empty address")
        header = data[0]
        address_type = header >> 4
        if address_type > 7:
            raise AddressDeserializationError(
                f"Header type {address_type} is not a Shelley payment address"
            )
        try:
            network = Network.from_id(header & 0x0F)
        except InvalidNetworkError as e:
            raise AddressDeserializationError(str(e)) from e

        digest, offset = _read_hash(data, 1)
        payment = Credential(_credential_kind(bool(header & _PAYMENT_SCRIPT_BIT)), digest)

        stake: StakeReference
        if address_type in _ENTERPRISE_TYPES:
            stake = None
        elif address_type in _POINTER_TYPES:
            stake, offset = Pointer.from_bytes(data, offset)
        else:
            digest, offset = _read_hash(data, offset)
            stake = Credential(_credential_kind(bool(header & _STAKE_SCRIPT_BIT)), digest)

        if offset != len(data):
            raise AddressDeserializationError(
                f"{len(data) - offset} trailing bytes after Shelley address"
            )
        return cls(network, payment, stake)


@dataclass(frozen=True)
class RewardAccount:
    """A Shelley reward (stake) account."""

    network: Network
    credential: Credential

    def to_bytes(self) -> bytes:
        address_type = _REWARD_SCRIPT_TYPE if self.credential.is_script else _REWARD_KEY_TYPE
        return bytes([(address_type << 4) | int(self.network)]) + self.credential.digest

    @classmethod
    def from_bytes(cls, data: bytes) -> "RewardAccount":
        """
        Deserialize the 29-byte reward account format.

        Raises:
            AddressDeserializationError: If `data` is not a reward account
        """
        if len(data) != 1 + KEY_HASH_SIZE:
            raise AddressDeserializationError("Reward account must be 29 bytes")
        header = data[0]
        address_type = header >> 4
        if address_type not in (_REWARD_KEY_TYPE, _REWARD_SCRIPT_TYPE):
            raise AddressDeserializationError(
                f"Header type {address_type} is not a reward account"
            )
        try:
            network = Network.from_id(header & 0x0F)
        except InvalidNetworkError as e:
            raise AddressDeserializationError(str(e)) from e
        kind = _credential_kind(address_type == _REWARD_SCRIPT_TYPE)
        return cls(network, Credential(kind, data[1:]))
