import dataclasses
import json

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from netspawner.constants import DEFAULT_BIP44_PATH, ED25519_SPKI_PREFIX, KeyType
from netspawner.crypto.keys import (
    PrivateKey, PublicKey, Ed25519KeyPair, build_key_pair,
    encode_public_key, decode_public_key, encode_private_key, decode_private_key,
    generate_key_box,
)
from netspawner.exceptions import DecodeError, UnsupportedKeyTypeError
from netspawner.types.keybox import KeyBox
from netspawner.utils.encoding import decode_base64, encode_base58, encode_base64

# RFC 8032, section 7.1, test 1
RFC_SECRET = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")

MNEMONIC = " ".join(["abandon"] * 23 + ["art"])


def test_build_key_pair_matches_rfc8032():
    pair = build_key_pair(RFC_SECRET)
    assert isinstance(pair, Ed25519KeyPair)
    assert pair.key_type == KeyType.ED25519
    assert pair.public_key.raw == RFC_PUBLIC
    assert pair.private_key.secret == RFC_SECRET


def test_build_key_pair_rejects_wrong_length():
    with pytest.raises(DecodeError):
        build_key_pair(b"\x01" * 31)


def test_public_key_encoding_strips_prefix():
    pub = build_key_pair(RFC_SECRET).public_key
    der = pub.to_der()
    assert der == ED25519_SPKI_PREFIX + RFC_PUBLIC
    assert encode_public_key(pub) == encode_base58(RFC_PUBLIC)


def test_public_key_roundtrip():
    pub = build_key_pair(RFC_SECRET).public_key
    assert decode_public_key(encode_public_key(pub)) == pub


def test_private_key_roundtrip():
    priv = build_key_pair(RFC_SECRET).private_key
    encoded = encode_private_key(priv)
    assert len(priv.to_pkcs8()) == 48
    assert priv.to_pkcs8().endswith(RFC_SECRET)
    assert decode_private_key(encoded) == priv


def test_decode_public_key_errors():
    with pytest.raises(DecodeError):
        decode_public_key("0OIl")
    with pytest.raises(DecodeError):
        decode_public_key(encode_base58(RFC_PUBLIC[:31]))
    with pytest.raises(DecodeError):
        decode_public_key(encode_base58(RFC_PUBLIC + b"\x00"))


def test_decode_private_key_errors():
    with pytest.raises(DecodeError):
        decode_private_key("%%%")
    with pytest.raises(DecodeError):
        decode_private_key(encode_base64(b"\x30\x03\x02\x01\x00"))


def test_decode_private_key_wrong_algorithm():
    ec_key = ec.generate_private_key(ec.SECP256R1())
    der = ec_key.private_bytes(
        serialization.Encoding.DER,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )
    with pytest.raises(UnsupportedKeyTypeError):
        decode_private_key(encode_base64(der))


def test_private_key_repr_is_masked():
    priv = PrivateKey(RFC_SECRET)
    assert RFC_SECRET.hex() not in repr(priv)


def test_key_pair_is_immutable():
    pair = build_key_pair(RFC_SECRET)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pair.public_key = PublicKey(RFC_PUBLIC)


def test_key_box_is_deterministic():
    a = generate_key_box(MNEMONIC, "", [44, 7337, 0, 0])
    b = generate_key_box(MNEMONIC, "", [44, 7337, 0, 0])
    assert a == b
    assert a.mnemonic == MNEMONIC


def test_key_box_default_path():
    box = generate_key_box(MNEMONIC)
    assert box.bip44_path == DEFAULT_BIP44_PATH == (44, 7337, 0, 0)
    assert box == generate_key_box(MNEMONIC, "", [])
    assert box == generate_key_box(MNEMONIC, "", None)


def test_key_box_inputs_change_identity():
    base = generate_key_box(MNEMONIC)
    assert generate_key_box(MNEMONIC, "secret").public_key != base.public_key
    assert generate_key_box(MNEMONIC, "", [44, 7337, 0, 1]).public_key != base.public_key


def test_key_box_generates_mnemonic_from_entropy_source():
    box = generate_key_box(entropy_source=lambda n: b"\x00" * n)
    assert box.mnemonic == MNEMONIC
    assert box == generate_key_box(MNEMONIC)


def test_key_box_fields_decode():
    box = generate_key_box(MNEMONIC)
    pub = decode_public_key(box.public_key)
    priv = decode_private_key(box.private_key)
    assert priv.public_key() == pub
    assert box.key_pair().public_key == pub


def test_key_box_json_shape():
    box = generate_key_box(MNEMONIC)
    data = json.loads(box.to_json())
    assert list(data) == ["mnemonic", "bip44Path", "publicKey", "privateKey"]
    assert data["bip44Path"] == [44, 7337, 0, 0]
    assert KeyBox.from_dict(data) == box


def test_key_box_repr_hides_secrets():
    box = generate_key_box(MNEMONIC)
    assert "abandon" not in repr(box)
    assert box.private_key not in repr(box)


def test_key_box_cross_implementation_vector():
    # Derived independently from the same mnemonic, empty passphrase and 44/7337/0/0
    expected_public = "7KMNzdK2dRD3HG9fz5Yb15RUy68N1jNZi3jPwjiEV57M"
    box = generate_key_box(MNEMONIC, "", (44, 7337, 0, 0))
    assert box.public_key == expected_public

    der = decode_base64(box.private_key)
    assert len(der) == 48
    assert der.startswith(bytes.fromhex("302e020100300506032b657004220420"))
    assert encode_public_key(decode_private_key(box.private_key).public_key()) == expected_public
    assert box.private_key == generate_key_box(MNEMONIC).private_key


def test_key_box_accepts_tuple_path():
    assert generate_key_box(MNEMONIC, path=(44, 7337, 0, 0)) == generate_key_box(MNEMONIC, path=[44, 7337, 0, 0])
