"""Key material and legacy ITN key import."""

from adaconv.crypto.keys import KeyEra, StakingVerificationKey, SigningKey
from adaconv.crypto.itn import (
    decode_bech32_key,
    convert_itn_verification_key,
    convert_itn_signing_key,
    import_itn_verification_key_file,
    import_itn_signing_key_file,
)

__all__ = [
    'KeyEra',
    'StakingVerificationKey',
    'SigningKey',
    'decode_bech32_key',
    'convert_itn_verification_key',
    'convert_itn_signing_key',
    'import_itn_verification_key_file',
    'import_itn_signing_key_file',
]
