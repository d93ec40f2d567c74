"""Common type definitions for NetSpawner."""

from typing import Callable, NewType, Sequence, Tuple, Union

__all__ = [
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
]

# Secrets
Mnemonic = NewType("Mnemonic", str)
"""Space-separated BIP39 word phrase."""

Seed = NewType("Seed", bytes)
"""64-byte stretched BIP39 seed."""

# Encodings
Base58Str = NewType("Base58Str", str)
"""Base58 string (Bitcoin alphabet)."""

Base64Str = NewType("Base64Str", str)
"""Standard padded base64 string."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte Ed25519 private seed."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""32-byte Ed25519 public point."""

Signature = NewType("Signature", bytes)
"""64-byte Ed25519 signature."""

# Type aliases
Bip44Path = Tuple[int, ...]
"""Ordered unsigned 32-bit path components (hardened offset not applied)."""

PathInput = Union[Bip44Path, Sequence[int]]
"""Anything that can be normalized into a Bip44Path."""

EntropySource = Callable[[int], bytes]
"""Callable returning the requested number of random bytes."""

Message = Union[str, bytes]
"""Message to sign; strings are UTF-8 encoded."""
