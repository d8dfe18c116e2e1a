"""Main package initialization."""

__version__ = "0.1.0"
__description__ = "Conversions between text and ledger addresses, tx references and ITN keys"

from .core.address_codec import address_from_hex, address_to_hex
from .core.tx_reference import parse_tx_in, parse_tx_out, render_tx_in, render_tx_out
from .core.reporting import render_conversion_error
from .crypto.itn import convert_itn_verification_key, convert_itn_signing_key
from .utils.files import read_text

__all__ = [
    "address_from_hex",
    "address_to_hex",
    "parse_tx_in",
    "parse_tx_out",
    "render_tx_in",
    "render_tx_out",
    "render_conversion_error",
    "convert_itn_verification_key",
    "convert_itn_signing_key",
    "read_text",
]
