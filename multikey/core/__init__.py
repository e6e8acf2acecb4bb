"""Core multikey codec."""

from . import key_codec, multi_key, varint

__all__ = ["key_codec", "multi_key", "varint"]
