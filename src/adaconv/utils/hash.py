"""Cryptographic hash utilities."""

import hashlib
from typing import Union

TX_ID_SIZE = 32  # Blake2b-256
KEY_HASH_SIZE = 28  # Blake2b-224


def blake2b_256(data: Union[bytes, str]) -> bytes:
    """
    Compute the Blake2b-256 hash of data.

    Used for transaction ids, which hash the serialized transaction body.

    Args:
        data: Bytes or string to hash

    Returns:
        bytes: 32-byte digest
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hashlib.blake2b(data, digest_size=TX_ID_SIZE).digest()


def blake2b_224(data: Union[bytes, str]) -> bytes:
    """
    Compute the Blake2b-224 hash of data.

    Used for key and script hashes inside addresses.

    Args:
        data: Bytes or string to hash

    Returns:
        bytes: 28-byte digest
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    return hashlib.blake2b(data, digest_size=KEY_HASH_SIZE).digest()
