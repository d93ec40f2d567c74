"""Cryptographic utilities for NetSpawner."""

from ..crypto.bip39 import (
    generate_mnemonic,
    provide_mnemonic,
    mnemonic_to_seed,
    is_valid_mnemonic,
)
from ..crypto.hd import ExtendedKey, master_key, derive_child, derive_path
from ..crypto.keys import (
    PrivateKey,
    PublicKey,
    Ed25519KeyPair,
    KeyPair,
    build_key_pair,
    encode_public_key,
    decode_public_key,
    encode_private_key,
    decode_private_key,
    generate_key_box,
)
from ..crypto.signature import sign, verify, sign_message, verify_message

__all__ = [
    # Mnemonic
    "generate_mnemonic",
    "provide_mnemonic",
    "mnemonic_to_seed",
    "is_valid_mnemonic",

    # HD
    "ExtendedKey",
    "master_key",
    "derive_child",
    "derive_path",

    # Keys
    "PrivateKey",
    "PublicKey",
    "Ed25519KeyPair",
    "KeyPair",
    "build_key_pair",
    "encode_public_key",
    "decode_public_key",
    "encode_private_key",
    "decode_private_key",
    "generate_key_box",

    # Signatures
    "sign",
    "verify",
    "sign_message",
    "verify_message",
]
