import base58
import pytest

from multikey.core.multi_key import DecodedKey, MultiKey, decode, encode

TEST_PK = b"\xaby\xbaw\xfaa\x9f\xf2\xc9r\xfd\x9a\xeb\x830.\xda\x8e$U%_\xfe\x1a\x13\xf0\x9b\x1b+\xdc\x1e_"

TEST_KEYS = [
    b"",
    bytes(32),
    b"\xff" * 32,
    bytes(range(32)),
    bytes(i * 7 % 256 for i in range(32)),
    TEST_PK,
    bytes(range(256)) + b"\x01" * 38,
]


def test_multi_key():
    multi_key = MultiKey.from_public_key("ed25519-pub", TEST_PK)
    assert isinstance(multi_key, MultiKey)
    decoded = multi_key.decode()
    assert decoded.multicodec == 237
    assert decoded.type == "ed25519"
    assert decoded.key == TEST_PK
    assert multi_key.key_type == "ed25519"

    # Public key is not bytes
    pk_bad = TEST_PK.decode("latin-1")
    with pytest.raises(TypeError):
        MultiKey.from_public_key("ed25519", pk_bad)

    # Invalid codec
    with pytest.raises(ValueError):
        MultiKey.from_public_key("edd225", TEST_PK)


@pytest.mark.parametrize("key_type,code", [("ed25519", 237), ("rsa", 4613)])
@pytest.mark.parametrize("pk", TEST_KEYS)
def test_round_trip(pk: bytes, key_type: str, code: int):
    decoded = decode(encode(pk, key_type))
    assert decoded == DecodedKey(multicodec=code, key=pk, type=key_type)


def test_encode_default_type():
    pk = b"\x01" * 32
    encoded = encode(pk)
    assert encoded.startswith("z")
    assert len(encoded) > 32
    assert encoded == encode(pk, "ed25519")
    assert decode(encoded).multicodec == 237


def test_encode_deterministic():
    pk = b"\x7b" * 32
    assert encode(pk) == encode(pk)
    assert encode(pk, "rsa") == encode(pk, "rsa")


def test_encode_distinct():
    assert encode(b"\x01" * 32) != encode(b"\x02" * 32)
    assert encode(TEST_PK, "ed25519") != encode(TEST_PK, "rsa")


def test_encode_bytes_like():
    assert encode(bytearray(TEST_PK)) == encode(TEST_PK)
    assert encode(memoryview(TEST_PK), "rsa") == encode(TEST_PK, "rsa")


def test_encode_unsupported_type():
    with pytest.raises(ValueError):
        encode(TEST_PK, "p256")
    # multicodec names are only accepted by MultiKey.from_public_key
    with pytest.raises(ValueError):
        encode(b"", "ed25519-pub")
    assert MultiKey.from_public_key("ed25519-pub", b"") == encode(b"", "ed25519")


def test_encoded_structure():
    pk = b"\x01" * 32
    encoded = encode(pk)
    raw = base58.b58decode(encoded[1:])
    assert len(raw) == 34
    assert raw[:2] == b"\xed\x01"
    assert raw[2:] == pk
    assert encode(pk, "rsa")[0] == "z"
    assert base58.b58decode(encode(pk, "rsa")[1:])[:2] == b"\x85\x24"


def test_encoded_length():
    encoded = encode(TEST_PK)
    assert len(encoded) == 48
    assert encoded.startswith("z6Mk")


def test_decode_without_prefix():
    pk = b"\x2a" * 32
    encoded = encode(pk)
    assert decode(encoded[1:]) == decode(encoded)
    assert decode(encoded[1:]).key == pk


def test_decode_extracts_key():
    decoded = decode(encode(TEST_PK))
    assert len(decoded.key) == 32
    assert decoded.key[0] != 0xED
    assert decoded.is_known


def test_decode_unknown():
    pk = b"\x7b" * 32
    encoded = "z" + base58.b58encode(b"\xe7\x07" + pk).decode("ascii")
    decoded = decode(encoded)
    assert decoded.multicodec == 999
    assert decoded.type == "unknown"
    assert decoded.key == pk
    assert not decoded.is_known
    assert MultiKey.from_code(999, pk) == encoded


def test_decode_unterminated_varint():
    encoded = "z" + base58.b58encode(b"\x85\xa4").decode("ascii")
    decoded = decode(encoded)
    assert decoded.multicodec == 0x05 | (0x24 << 7)
    assert decoded.key == b""
    assert decoded.type == "rsa"


def test_decode_empty_key():
    decoded = decode(encode(b"", "rsa"))
    assert decoded.type == "rsa"
    assert decoded.key == b""


@pytest.mark.parametrize("value", ["z0OIl", "zabc_def", "z6Mké", "", "z"])
def test_decode_invalid(value: str):
    with pytest.raises(ValueError):
        decode(value)


@pytest.mark.parametrize(
    "value,cause", [("z0OIl", ValueError), ("z6Mk\u00e9", UnicodeEncodeError)]
)
def test_decode_invalid_chained(value: str, cause: type):
    with pytest.raises(ValueError) as exc:
        decode(value)
    assert isinstance(exc.value.__cause__, cause)


def test_decode_whitespace():
    encoded = encode(TEST_PK)
    assert decode(f"  {encoded}\n") == decode(encoded)
    assert decode(f" {encoded[1:]} ") == decode(encoded)
    with pytest.raises(ValueError):
        decode("   ")


def test_decode_not_str():
    with pytest.raises(TypeError):
        decode(b"z6Mk")


def test_serialize():
    decoded = decode(encode(TEST_PK, "rsa"))
    assert decoded.serialize() == {"multicodec": 4613, "key": TEST_PK, "type": "rsa"}
