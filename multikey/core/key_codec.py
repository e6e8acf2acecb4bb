"""Supported public key codecs."""

from dataclasses import dataclass
from typing import Literal, Optional, TypeAlias

from multiformats import multicodec, varint

from ..const import UNKNOWN_KEY_TYPE

KeyType: TypeAlias = Literal["ed25519", "rsa"]

DEFAULT_KEY_TYPE: KeyType = "ed25519"


@dataclass(frozen=True)
class KeyCodec:
    """Descriptor for a public key multicodec."""

    key_type: KeyType
    name: str
    code: int
    varint: bytes

    @classmethod
    def register(cls, key_type: KeyType, name: str) -> "KeyCodec":
        """Build a descriptor from the multicodec table entry for `name`."""
        code = multicodec.get(name).code
        return KeyCodec(key_type=key_type, name=name, code=code, varint=varint.encode(code))

    @classmethod
    def from_type(cls, key_type: str) -> "KeyCodec":
        """Resolve a codec descriptor from its key type."""
        for codec in SUPPORTED_CODECS:
            if codec.key_type == key_type:
                return codec
        raise ValueError(f"Unsupported key type: {key_type}")

    @classmethod
    def from_name(cls, name: str) -> "KeyCodec":
        """Resolve a codec descriptor from its multicodec name."""
        for codec in SUPPORTED_CODECS:
            if codec.name == name:
                return codec
        raise ValueError(f"Unsupported codec: {name}")

    @classmethod
    def from_code(cls, code: int) -> Optional["KeyCodec"]:
        """Resolve a codec descriptor from its multicodec code, if supported."""
        for codec in SUPPORTED_CODECS:
            if codec.code == code:
                return codec
        return None


SUPPORTED_CODECS: tuple[KeyCodec, ...] = (
    KeyCodec.register("ed25519", "ed25519-pub"),
    KeyCodec.register("rsa", "rsa-pub"),
)


def classify(code: int) -> str:
    """Map a multicodec code to its key type, or 'unknown'."""
    codec = KeyCodec.from_code(code)
    return codec.key_type if codec else UNKNOWN_KEY_TYPE
