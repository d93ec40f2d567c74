"""
NetSpawner

Deterministic Ed25519 node identities derived from BIP39 mnemonics, plus
a launcher for local multi-validator test networks.
"""

from .constants import DEFAULT_BIP44_PATH, HARDENED_OFFSET, KeyType
from .exceptions import (
    NetSpawnerError,
    CryptoError,
    SeedDerivationError,
    PathParseError,
    DecodeError,
    UnsupportedKeyTypeError,
)
from .crypto import (
    PrivateKey,
    PublicKey,
    Ed25519KeyPair,
    generate_key_box,
    sign_message,
    verify_message,
)
from .types import KeyBox

__version__ = "1.0.0"

__all__ = [
    # Constants
    "DEFAULT_BIP44_PATH",
    "HARDENED_OFFSET",
    "KeyType",

    # Exceptions
    "NetSpawnerError",
    "CryptoError",
    "SeedDerivationError",
    "PathParseError",
    "DecodeError",
    "UnsupportedKeyTypeError",

    # Crypto
    "PrivateKey",
    "PublicKey",
    "Ed25519KeyPair",
    "generate_key_box",
    "sign_message",
    "verify_message",

    # Types
    "KeyBox",
]
