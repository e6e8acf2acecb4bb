"""Multikey encoding for public key material.

A multikey is the multibase (base58btc, marker 'z') rendering of a public key
prefixed with the varint of its multicodec code.
"""

from .core.key_codec import KeyCodec, KeyType
from .core.multi_key import DecodedKey, MultiKey, decode, encode

__all__ = ["DecodedKey", "KeyCodec", "KeyType", "MultiKey", "decode", "encode"]
