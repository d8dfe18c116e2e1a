"""Transaction references: ids, inputs and outputs."""

from dataclasses import dataclass
from typing import Optional

from adaconv.exceptions import HexDecodingError, InvalidTxIdError, LedgerError
from adaconv.ledger.address import Address
from adaconv.utils.encoding import bytes_to_hex, hex_to_bytes
from adaconv.utils.hash import TX_ID_SIZE, blake2b_256


@dataclass(frozen=True)
class TxId:
    """Blake2b-256 hash of a transaction body."""

    digest: bytes

    def __post_init__(self):
        if not isinstance(self.digest, bytes) or len(self.digest) != TX_ID_SIZE:
            raise InvalidTxIdError(f"Transaction id must be {TX_ID_SIZE} bytes")

    @classmethod
    def from_body(cls, body: bytes) -> "TxId":
        """Compute the id of a serialized transaction body."""
        return cls(blake2b_256(body))

    @classmethod
    def from_hex(cls, text: str) -> Optional["TxId"]:
        """
        Interpret `text` as exactly 64 hex characters.

        Returns:
            TxId, or None if `text` is not hex or has the wrong length
        """
        if len(text) != 2 * TX_ID_SIZE:
            return None
        try:
            return cls(hex_to_bytes(text))
        except HexDecodingError:
            return None

    def to_hex(self) -> str:
        return bytes_to_hex(self.digest)


@dataclass(frozen=True)
class TxIn:
    """Reference to an output of a previous transaction."""

    tx_id: TxId
    index: int

    def __post_init__(self):
        if self.index < 0:
            raise LedgerError("Transaction input index must be non-negative")


@dataclass(frozen=True)
class TxOut:
    """An amount of lovelace locked at an address."""

    address: Address
    lovelace: int

    def __post_init__(self):
        if self.lovelace < 0:
            raise LedgerError("Lovelace amount must be non-negative")
