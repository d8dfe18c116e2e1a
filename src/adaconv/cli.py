"""Command line interface: ``adaconv``."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from adaconv.config import get_settings
from adaconv.core.address_codec import address_from_hex, address_to_hex
from adaconv.core.reporting import render_conversion_error
from adaconv.core.tx_reference import parse_tx_in, parse_tx_out_verbose, render_tx_in, render_tx_out
from adaconv.crypto.itn import import_itn_signing_key_file, import_itn_verification_key_file
from adaconv.crypto.keys import SigningKey
from adaconv.ledger.address import Address, address_era
from adaconv.ledger.byron import ByronAddress
from adaconv.models.errors import ConversionError
from adaconv.models.results import ParseFailure
from adaconv.models.schemas import AddressReport, KeyReport, TxInReport, TxOutReport

logger = logging.getLogger(__name__)


def _address_report(address: Address) -> AddressReport:
    network = None if isinstance(address, ByronAddress) else address.network.name.lower()
    return AddressReport(era=address_era(address), network=network, hex=address_to_hex(address))


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def cmd_address(args) -> int:
    address = address_from_hex(args.hex, strict=args.strict_hex)
    if address is None:
        return _fail(f"Not a Shelley or Byron address: {args.hex}")
    print(_address_report(address).model_dump_json(indent=2))
    return 0


def cmd_txin(args) -> int:
    result = parse_tx_in(args.text, args.strict_hex)
    if isinstance(result, ParseFailure):
        return _fail(result.message)
    report = TxInReport(tx_id=result.tx_id.to_hex(), index=result.index, rendered=render_tx_in(result))
    print(report.model_dump_json(indent=2))
    return 0


def cmd_txout(args) -> int:
    result = parse_tx_out_verbose(args.text, args.strict_hex)
    if isinstance(result, ParseFailure):
        return _fail(result.message)
    report = TxOutReport(
        address=_address_report(result.address),
        lovelace=result.lovelace,
        rendered=render_tx_out(result),
    )
    print(report.model_dump_json(indent=2))
    return 0


def cmd_itn_key(args) -> int:
    if args.verification_key_file:
        key = import_itn_verification_key_file(args.verification_key_file)
    else:
        key = import_itn_signing_key_file(args.signing_key_file)
    if isinstance(key, ConversionError):
        return _fail(render_conversion_error(key))

    key_type = "signing" if isinstance(key, SigningKey) else "verification"
    vkey = key.verification_key() if isinstance(key, SigningKey) else key
    report = KeyReport(
        era=key.era.value,
        key_type=key_type,
        verification_key=vkey.raw.hex(),
        key_hash=vkey.key_hash().hex(),
    )
    print(report.model_dump_json(indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adaconv",
        description="Convert addresses, transaction references and ITN keys",
    )
    parser.add_argument('--log-level', default=None,
                        help='logging level (default: ADACONV_LOG_LEVEL or WARNING)')
    parser.add_argument('--strict-hex', action=argparse.BooleanOptionalAction, default=None,
                        help='reject address hex with an undecodable tail (default: ADACONV_STRICT_HEX)')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('address', help='decode a hex encoded address')
    p.add_argument('hex')
    p.set_defaults(func=cmd_address)

    p = sub.add_parser('txin', help='parse a TXID#INDEX transaction input')
    p.add_argument('text')
    p.set_defaults(func=cmd_txin)

    p = sub.add_parser('txout', help='parse an ADDRESS+LOVELACE transaction output')
    p.add_argument('text')
    p.set_defaults(func=cmd_txout)

    p = sub.add_parser('itn-key', help='import a Bech32 ITN key file')
    group = p.add_mutually_exclusive_group(required=True)
    group.add_argument('--verification-key-file', metavar='PATH')
    group.add_argument('--signing-key-file', metavar='PATH')
    p.set_defaults(func=cmd_itn_key)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.strict_hex is None:
        args.strict_hex = settings.strict_hex
    logger.debug(f"Running {args.command}")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
