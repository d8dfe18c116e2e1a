"""The address union shared by the codec and transaction outputs."""

from typing import Union

from adaconv.ledger.byron import ByronAddress
from adaconv.ledger.shelley import RewardAccount, ShelleyAddress

#: Tagged by class: Byron, Shelley or Shelley reward account.
Address = Union[ByronAddress, ShelleyAddress, RewardAccount]


def address_era(address: Address) -> str:
    """Return the era tag of an address variant."""
    if isinstance(address, ByronAddress):
        return "byron"
    if isinstance(address, ShelleyAddress):
        return "shelley"
    if isinstance(address, RewardAccount):
        return "shelley_reward_account"
    raise TypeError(f"Not an address: {type(address).__name__}")
