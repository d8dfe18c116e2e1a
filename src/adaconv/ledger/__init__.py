"""Ledger value types and their binary formats."""

from adaconv.ledger.byron import ByronAddress, ByronAddressType
from adaconv.ledger.shelley import (
    Network,
    CredentialKind,
    Credential,
    Pointer,
    ShelleyAddress,
    RewardAccount,
)
from adaconv.ledger.address import Address, address_era
from adaconv.ledger.tx import TxId, TxIn, TxOut

__all__ = [
    "ByronAddress",
    "ByronAddressType",
    "Network",
    "CredentialKind",
    "Credential",
    "Pointer",
    "ShelleyAddress",
    "RewardAccount",
    "Address",
    "address_era",
    "TxId",
    "TxIn",
    "TxOut",
]
