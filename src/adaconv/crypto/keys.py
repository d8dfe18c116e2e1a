"""Era-tagged Ed25519 key values."""

from dataclasses import dataclass
from enum import Enum

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from adaconv.exceptions import InvalidKeyError
from adaconv.ledger.shelley import Credential, CredentialKind, Network, RewardAccount
from adaconv.utils.hash import blake2b_224

ED25519_KEY_SIZE = 32


class KeyEra(str, Enum):
    """Ledger era a key is used in."""
    SHELLEY = "shelley"


def _public_bytes(key: Ed25519PublicKey) -> bytes:
    return key.public_bytes(Encoding.Raw, PublicFormat.Raw)


@dataclass(frozen=True)
class StakingVerificationKey:
    """
    Ed25519 staking verification key.

    Construct with :meth:`from_raw`, which validates the key material.
    """

    era: KeyEra
    raw: bytes

    @classmethod
    def from_raw(cls, raw: bytes, era: KeyEra = KeyEra.SHELLEY) -> "StakingVerificationKey":
        """
        Raises:
            InvalidKeyError: If `raw` is not a 32-byte Ed25519 public key
        """
        try:
            key = Ed25519PublicKey.from_public_bytes(raw)
        except ValueError as e:
            raise InvalidKeyError(f"Not an Ed25519 verification key: {e}") from e
        return cls(era, _public_bytes(key))

    def key_hash(self) -> bytes:
        """Blake2b-224 hash of the key, as used in stake credentials."""
        return blake2b_224(self.raw)

    def reward_account(self, network: Network) -> RewardAccount:
        """Reward account whose stake credential is this key."""
        return RewardAccount(network, Credential(CredentialKind.KEY_HASH, self.key_hash()))


@dataclass(frozen=True, repr=False)
class SigningKey:
    """Ed25519 signing key (32-byte seed)."""

    era: KeyEra
    raw: bytes

    @classmethod
    def from_raw(cls, raw: bytes, era: KeyEra = KeyEra.SHELLEY) -> "SigningKey":
        """
        Raises:
            InvalidKeyError: If `raw` is not a 32-byte Ed25519 private key
        """
        try:
            Ed25519PrivateKey.from_private_bytes(raw)
        except ValueError as e:
            raise InvalidKeyError(f"Not an Ed25519 signing key: {e}") from e
        return cls(era, bytes(raw))

    def verification_key(self) -> StakingVerificationKey:
        """Derive the matching verification key."""
        public = Ed25519PrivateKey.from_private_bytes(self.raw).public_key()
        return StakingVerificationKey(self.era, _public_bytes(public))

    def __repr__(self) -> str:
        return f"SigningKey(era={self.era.value!r}, raw=<redacted>)"
