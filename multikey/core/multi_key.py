"""MultiKey format handling."""

from dataclasses import dataclass
from typing import ClassVar, Union

import base58

from multiformats import multibase, varint

from ..const import MULTIBASE_NAME, MULTIBASE_PREFIX, UNKNOWN_KEY_TYPE
from .key_codec import DEFAULT_KEY_TYPE, KeyCodec, classify
from .varint import read_varint

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class DecodedKey:
    """The result of decoding a multikey value."""

    multicodec: int
    key: bytes
    type: str

    @property
    def is_known(self) -> bool:
        """Check whether the multicodec code names a supported key type."""
        return self.type != UNKNOWN_KEY_TYPE

    def serialize(self) -> dict:
        return {"multicodec": self.multicodec, "key": self.key, "type": self.type}


class MultiKey(str):
    """MultiKey string representation."""

    BASE: ClassVar[str] = MULTIBASE_NAME

    @classmethod
    def from_public_key(cls, key_type: str, pk: BytesLike) -> "MultiKey":
        """Encode public key bytes as a MultiKey.

        `key_type` may be a key type ('ed25519', 'rsa') or the matching
        multicodec name ('ed25519-pub', 'rsa-pub').
        """
        try:
            codec = KeyCodec.from_type(key_type)
        except ValueError:
            codec = KeyCodec.from_name(key_type)
        return cls(_wrap_encode(codec.varint, pk))

    @classmethod
    def from_code(cls, code: int, pk: BytesLike) -> "MultiKey":
        """Encode public key bytes under an arbitrary multicodec code."""
        return cls(_wrap_encode(varint.encode(code), pk))

    @property
    def key_type(self) -> str:
        """The key type named by this MultiKey's multicodec prefix."""
        return self.decode().type

    def decode(self) -> DecodedKey:
        """Decode this MultiKey into a multicodec code and public key.

        Surrounding whitespace is ignored and the leading 'z' is optional.
        """
        value = str(self).strip().removeprefix(MULTIBASE_PREFIX)
        try:
            data = base58.b58decode(value)
        except ValueError as err:
            raise ValueError(f"Invalid {MultiKey.BASE} encoding for multikey: {err}") from err
        if not data:
            raise ValueError("Empty multikey value")
        code, pos = read_varint(data)
        return DecodedKey(multicodec=code, key=data[pos:], type=classify(code))


def _wrap_encode(prefix: bytes, pk: BytesLike) -> str:
    if not isinstance(pk, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes for public key, got {type(pk).__name__}")
    enc = multibase.encode(prefix + bytes(pk), MultiKey.BASE)
    if not enc.startswith(MULTIBASE_PREFIX):
        enc = MULTIBASE_PREFIX + enc
    return enc


def encode(raw_key_bytes: BytesLike, key_type: str = DEFAULT_KEY_TYPE) -> str:
    """Encode raw public key bytes as a multikey string.

    Only the key types 'ed25519' and 'rsa' are accepted.
    """
    codec = KeyCodec.from_type(key_type)
    return _wrap_encode(codec.varint, raw_key_bytes)


def decode(multikey: str) -> DecodedKey:
    """Decode a multikey string, with or without its leading 'z'."""
    if not isinstance(multikey, str):
        raise TypeError(f"Expected str for multikey, got {type(multikey).__name__}")
    return MultiKey(multikey).decode()
