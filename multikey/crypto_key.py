"""Conversion between `cryptography` public keys and multikey values."""

from typing import Optional, Tuple, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa

from .core.multi_key import MultiKey, decode

PublicKey = Union[ed25519.Ed25519PublicKey, rsa.RSAPublicKey]
KeyObject = Union[PublicKey, ed25519.Ed25519PrivateKey, rsa.RSAPrivateKey]


def public_key_bytes(key: KeyObject) -> Tuple[str, bytes]:
    """Export the public key bytes for a key object.

    Ed25519 keys are exported raw (32 bytes), RSA keys as a DER encoded
    SubjectPublicKeyInfo structure.
    """
    if isinstance(key, (ed25519.Ed25519PrivateKey, rsa.RSAPrivateKey)):
        key = key.public_key()
    if isinstance(key, ed25519.Ed25519PublicKey):
        return "ed25519", key.public_bytes(
            serialization.Encoding.Raw, serialization.PublicFormat.Raw
        )
    if isinstance(key, rsa.RSAPublicKey):
        return "rsa", key.public_bytes(
            serialization.Encoding.DER,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    raise ValueError(f"Unsupported key object: {type(key).__name__}")


def encode_public_key(key: KeyObject, key_type: Optional[str] = None) -> MultiKey:
    """Encode the public part of a key object as a MultiKey."""
    alg, pk = public_key_bytes(key)
    if key_type is not None and key_type != alg:
        raise ValueError(f"Key type mismatch: expected {key_type}, found {alg}")
    return MultiKey.from_public_key(alg, pk)


def decode_public_key(multikey: str) -> PublicKey:
    """Decode a multikey value into a public key object."""
    decoded = decode(multikey)
    match decoded.type:
        case "ed25519":
            try:
                return ed25519.Ed25519PublicKey.from_public_bytes(decoded.key)
            except ValueError as err:
                raise ValueError(f"Invalid ed25519 public key: {err}") from err
        case "rsa":
            try:
                key = serialization.load_der_public_key(decoded.key)
            except (ValueError, UnsupportedAlgorithm) as err:
                raise ValueError(f"Invalid rsa public key: {err}") from err
            if not isinstance(key, rsa.RSAPublicKey):
                raise ValueError("Expected an RSA public key for rsa-pub multikey")
            return key
    raise ValueError(f"Unsupported multicodec for key import: {decoded.multicodec}")


def load_pem_public_key(data: bytes, key_type: Optional[str] = None) -> MultiKey:
    """Encode a PEM formatted public key as a MultiKey."""
    try:
        key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as err:
        raise ValueError(f"Invalid PEM public key: {err}") from err
    return encode_public_key(key, key_type)
