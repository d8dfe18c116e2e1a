"""Text conversions for addresses, transaction references and errors."""

from adaconv.core.address_codec import (
    ADDRESS_DECODERS,
    decode_address_bytes,
    address_from_hex,
    address_to_hex,
    serialize_address,
)
from adaconv.core.tx_reference import (
    parse_tx_in,
    parse_tx_out,
    parse_tx_out_verbose,
    render_tx_in,
    render_tx_out,
)
from adaconv.core.reporting import render_conversion_error

__all__ = [
    "ADDRESS_DECODERS",
    "decode_address_bytes",
    "address_from_hex",
    "address_to_hex",
    "serialize_address",
    "parse_tx_in",
    "parse_tx_out",
    "parse_tx_out_verbose",
    "render_tx_in",
    "render_tx_out",
    "render_conversion_error",
]
