"""Command line interface for multikey encoding and decoding."""

import argparse
import json

from typing import Optional, Sequence

from .core.key_codec import DEFAULT_KEY_TYPE, SUPPORTED_CODECS
from .core.multi_key import decode, encode
from .crypto_key import load_pem_public_key


def _encode(args: argparse.Namespace) -> str:
    try:
        pk = bytes.fromhex(args.key)
    except ValueError:
        raise SystemExit("Key bytes must be hex encoded") from None
    return encode(pk, args.type)


def _encode_pem(args: argparse.Namespace) -> str:
    try:
        with open(args.path, "rb") as pem:
            data = pem.read()
    except OSError as err:
        raise SystemExit(f"Error reading key file: {err}") from None
    return load_pem_public_key(data, args.type)


def _decode(args: argparse.Namespace) -> str:
    decoded = decode(args.multikey)
    result = decoded.serialize()
    result["key"] = decoded.key.hex()
    return json.dumps(result, indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multikey", description="encode and decode multikey public keys"
    )
    commands = parser.add_subparsers(dest="command", required=True)
    key_types = [codec.key_type for codec in SUPPORTED_CODECS]

    enc = commands.add_parser("encode", help="encode hex public key bytes")
    enc.add_argument(
        "--type",
        choices=key_types,
        default=DEFAULT_KEY_TYPE,
        help=f"the key algorithm (default {DEFAULT_KEY_TYPE})",
    )
    enc.add_argument("key", help="the raw public key bytes, hex encoded")
    enc.set_defaults(handler=_encode)

    enc_pem = commands.add_parser("encode-pem", help="encode a PEM public key file")
    enc_pem.add_argument(
        "--type", choices=key_types, help="the expected key algorithm"
    )
    enc_pem.add_argument("path", help="the path to a PEM encoded public key")
    enc_pem.set_defaults(handler=_encode_pem)

    dec = commands.add_parser("decode", help="decode a multikey value")
    dec.add_argument("multikey", help="the multikey value, with or without 'z'")
    dec.set_defaults(handler=_decode)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        output = args.handler(args)
    except (TypeError, ValueError) as err:
        raise SystemExit(f"{args.command} failed: {err}") from None
    print(output)
    return 0
