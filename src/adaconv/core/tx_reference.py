"""Parsing and rendering of transaction input and output references.

Grammar (the whole text must be consumed)::

    TxIn  ::= HASH '#' DIGITS
    TxOut ::= ADDRHEX '+' DIGITS
    HASH, ADDRHEX ::= one or more ASCII letters or digits
    DIGITS ::= one or more ASCII decimal digits
"""

import logging
import string
from typing import Optional, Union

from adaconv.core.address_codec import address_from_hex, address_to_hex
from adaconv.ledger.address import Address
from adaconv.ledger.tx import TxId, TxIn, TxOut
from adaconv.models.results import ParseFailure

logger = logging.getLogger(__name__)

ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
DIGITS = frozenset(string.digits)

ADDRESS_INSTEAD_OF_TXIN = "You have entered an address, please enter a tx input"
MALFORMED_TXIN_HASH = "Your input is either malformed or not hex encoded: "


class _ParseError(Exception):
    """Internal signal carrying the failure message out of the scanner."""
    pass


class _Scanner:
    """Cursor over the input text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def take_while1(self, allowed: frozenset, what: str) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in allowed:
            self.pos += 1
        if self.pos == start:
            raise _ParseError(f"Expected {what} at position {start}")
        return self.text[start:self.pos]

    def char(self, expected: str) -> None:
        if self.text[self.pos:self.pos + 1] != expected:
            raise _ParseError(f"Expected '{expected}' at position {self.pos}")
        self.pos += 1

    def decimal(self) -> int:
        start = self.pos
        digits = self.take_while1(DIGITS, "a decimal number")
        try:
            return int(digits)
        except ValueError:
            # int() refuses very long digit strings
            raise _ParseError(f"Number too long at position {start}") from None

    def end(self) -> None:
        if self.pos != len(self.text):
            raise _ParseError(
                f"Unexpected trailing input at position {self.pos}: {self.text[self.pos:]!r}"
            )


def _tx_id(scanner: _Scanner, strict_hex: Optional[bool]) -> TxId:
    token = scanner.take_while1(ALPHANUMERIC, "a hex encoded transaction id")
    tx_id = TxId.from_hex(token)
    if tx_id is not None:
        return tx_id
    # Only picks the message; an address is never accepted here.
    if address_from_hex(token, strict_hex) is not None:
        raise _ParseError(ADDRESS_INSTEAD_OF_TXIN)
    raise _ParseError(MALFORMED_TXIN_HASH + token)


def _address(scanner: _Scanner, strict_hex: Optional[bool]) -> Address:
    token = scanner.take_while1(ALPHANUMERIC, "a hex encoded address")
    address = address_from_hex(token, strict_hex)
    if address is None:
        raise _ParseError(f"Not a Shelley or Byron address: {token}")
    return address


def parse_tx_in(text: str, strict_hex: Optional[bool] = None) -> Union[TxIn, ParseFailure]:
    """
    Parse ``<tx id hex>#<index>``.

    Returns:
        TxIn on success, otherwise a ParseFailure with the diagnostic
    """
    scanner = _Scanner(text)
    try:
        tx_id = _tx_id(scanner, strict_hex)
        scanner.char("#")
        index = scanner.decimal()
        scanner.end()
    except _ParseError as e:
        logger.debug(f"Failed to parse tx input {text!r}: {e}")
        return ParseFailure(message=str(e))
    return TxIn(tx_id, index)


def parse_tx_out_verbose(text: str, strict_hex: Optional[bool] = None) -> Union[TxOut, ParseFailure]:
    """Parse ``<address hex>+<lovelace>``, keeping the failure diagnostic."""
    scanner = _Scanner(text)
    try:
        address = _address(scanner, strict_hex)
        scanner.char("+")
        lovelace = scanner.decimal()
        scanner.end()
    except _ParseError as e:
        logger.debug(f"Failed to parse tx output {text!r}: {e}")
        return ParseFailure(message=str(e))
    return TxOut(address, lovelace)


def parse_tx_out(text: str, strict_hex: Optional[bool] = None) -> Optional[TxOut]:
    """
    Parse ``<address hex>+<lovelace>``.

    `strict_hex` is passed to :func:`address_from_hex`.

    Returns:
        TxOut, or None if the text does not match
    """
    result = parse_tx_out_verbose(text, strict_hex)
    return None if isinstance(result, ParseFailure) else result


def render_tx_in(tx_in: TxIn) -> str:
    return f"{tx_in.tx_id.to_hex()}#{tx_in.index}"


def render_tx_out(tx_out: TxOut) -> str:
    return f"{address_to_hex(tx_out.address)}+{tx_out.lovelace}"
