"""Pydantic report models printed by the CLI."""

from typing import Optional

from pydantic import BaseModel, Field


class AddressReport(BaseModel):
    """Decoded address."""
    era: str = Field(..., description="byron, shelley or shelley_reward_account")
    network: Optional[str] = Field(default=None, description="Network for Shelley addresses")
    hex: str = Field(..., description="Canonical lowercase hex")


class TxInReport(BaseModel):
    """Parsed transaction input."""
    tx_id: str = Field(..., description="Transaction id (hex)")
    index: int = Field(..., ge=0, description="Output index")
    rendered: str = Field(..., description="Canonical text form")


class TxOutReport(BaseModel):
    """Parsed transaction output."""
    address: AddressReport
    lovelace: int = Field(..., ge=0, description="Amount in lovelace")
    rendered: str = Field(..., description="Canonical text form")


class KeyReport(BaseModel):
    """Imported ITN key."""
    era: str
    key_type: str = Field(..., description="verification or signing")
    verification_key: str = Field(..., description="Raw Ed25519 verification key (hex)")
    key_hash: str = Field(..., description="Blake2b-224 hash of the verification key (hex)")
