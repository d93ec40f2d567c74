"""Hierarchical Deterministic key derivation for NetSpawner.

Only hardened BIP32 private derivation is supported: Ed25519 has no
public-parent-to-public-child derivation, so every path component is
offset by ``HARDENED_OFFSET`` before it is hashed.
"""

import hashlib
import hmac
from dataclasses import dataclass
from typing import Sequence

from ..constants import BIP32_SEED_KEY, HARDENED_OFFSET, SECP256K1_ORDER
from ..exceptions import DerivationError
from ..utils.encoding import bytes_to_int, int_to_bytes
from ..utils.validation import validate_path_component

__all__ = ["ExtendedKey", "master_key", "derive_child", "derive_path"]

N = SECP256K1_ORDER


@dataclass(frozen=True)
class ExtendedKey:
    """BIP32 extended private key (key material plus chain code)."""

    key: bytes
    chain_code: bytes
    depth: int = 0
    child_number: int = 0

    def __post_init__(self) -> None:
        if len(self.key) != 32 or len(self.chain_code) != 32:
            raise DerivationError("Extended key material and chain code must be 32 bytes each")

    @classmethod
    def from_seed(cls, seed: bytes) -> "ExtendedKey":
        """Create master key from seed."""
        if len(seed) < 16 or len(seed) > 64:
            raise ValueError("Seed must be between 16 and 64 bytes")

        h = hmac.new(BIP32_SEED_KEY, seed, hashlib.sha512).digest()

        key_int = bytes_to_int(h[:32])
        if key_int == 0 or key_int >= N:
            raise DerivationError("Invalid master key")

        return cls(key=h[:32], chain_code=h[32:])

    @property
    def is_hardened(self) -> bool:
        return self.child_number >= HARDENED_OFFSET

    def derive(self, index: int) -> "ExtendedKey":
        """
        Derive the hardened child ``index'``.

        Args:
            index: Path component in ``[0, 2**31)``; the hardened offset
                is added here, never by the caller

        Returns:
            Child extended key

        Raises:
            ValidationError: If index is out of range
            DerivationError: If the child key is zero
        """
        child_number = HARDENED_OFFSET + validate_path_component(index)

        data = b"\x00" + self.key + int_to_bytes(child_number, 4)
        h = hmac.new(self.chain_code, data, hashlib.sha512).digest()

        child_key_int = (bytes_to_int(h[:32]) + bytes_to_int(self.key)) % N
        if child_key_int == 0:
            raise DerivationError(f"Derived zero key at index {index}'")

        return ExtendedKey(
            key=int_to_bytes(child_key_int, 32),
            chain_code=h[32:],
            depth=self.depth + 1,
            child_number=child_number,
        )

    def derive_path(self, path: Sequence[int]) -> "ExtendedKey":
        """Derive along ``path``; an empty path returns this key."""
        node = self
        for component in path:
            node = node.derive(component)
        return node

    def __repr__(self) -> str:
        return f"ExtendedKey(depth={self.depth}, child_number={self.child_number:#010x})"


def master_key(seed: bytes) -> ExtendedKey:
    """Derive the master extended key from a BIP39 seed."""
    return ExtendedKey.from_seed(seed)


def derive_child(parent: ExtendedKey, index: int) -> ExtendedKey:
    """Derive the hardened child of ``parent`` at ``index``."""
    return parent.derive(index)


def derive_path(seed: bytes, path: Sequence[int]) -> ExtendedKey:
    """Derive the leaf key for ``path`` starting from ``seed``."""
    return master_key(seed).derive_path(path)
