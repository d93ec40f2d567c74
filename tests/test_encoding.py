import pytest

from netspawner.constants import ED25519_SPKI_PREFIX
from netspawner.exceptions import DecodeError
from netspawner.utils.encoding import (
    encode_base58, decode_base58, encode_base64, decode_base64,
    int_to_bytes, bytes_to_int, to_bytes,
)


def test_base58_roundtrip():
    payload = b"hello world"
    encoded = encode_base58(payload)
    assert encoded == "StV1DL6CwTryKyV"
    assert decode_base58(encoded) == payload


def test_base58_leading_zeros():
    assert encode_base58(b"\x00\x00\x01") == "112"
    assert decode_base58("112") == b"\x00\x00\x01"
    assert encode_base58(b"\x00") == "1"
    assert decode_base58("1") == b"\x00"


def test_base58_empty():
    assert encode_base58(b"") == ""
    assert decode_base58("") == b""


def test_base58_invalid_character():
    for bad in ("0abc", "abcO", "Il", "a b"):
        with pytest.raises(DecodeError):
            decode_base58(bad)


def test_base64_roundtrip():
    data = bytes(range(48))
    assert decode_base64(encode_base64(data)) == data


def test_base64_rejects_malformed():
    for bad in ("not base64!", "abc", "YWJj*"):
        with pytest.raises(DecodeError):
            decode_base64(bad)


def test_int_bytes_roundtrip():
    assert int_to_bytes(0x80000000, 4) == b"\x80\x00\x00\x00"
    assert bytes_to_int(b"\x80\x00\x00\x00") == 0x80000000


def test_to_bytes():
    assert to_bytes("héllo") == "héllo".encode("utf-8")
    assert to_bytes(b"raw") == b"raw"


def test_spki_prefix_is_pinned():
    assert ED25519_SPKI_PREFIX == bytes.fromhex("302a300506032b6570032100")
    assert len(ED25519_SPKI_PREFIX) == 12


def test_base64_ignores_line_breaks():
    payload = bytes(range(64))
    encoded = encode_base64(payload)
    assert decode_base64(encoded[:20] + "\n" + encoded[20:]) == payload
    assert decode_base64(encoded[:20] + "\r\n" + encoded[20:40] + "\n") == payload


def test_base64_still_rejects_other_whitespace():
    with pytest.raises(DecodeError):
        decode_base64("AAAA AAAA")
