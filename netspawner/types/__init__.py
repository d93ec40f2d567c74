"""Type definitions for NetSpawner."""

# Common types
from ..types.common import (
    Mnemonic,
    Seed,
    Base58Str,
    Base64Str,
    PrivateKeyBytes,
    PublicKeyBytes,
    Signature,
    Bip44Path,
    PathInput,
    EntropySource,
    Message,
)

# Key box
from ..types.keybox import KeyBox

__all__ = [
    # Common
    "Mnemonic",
    "Seed",
    "Base58Str",
    "Base64Str",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "Signature",
    "Bip44Path",
    "PathInput",
    "EntropySource",
    "Message",

    # Key box
    "KeyBox",
]
