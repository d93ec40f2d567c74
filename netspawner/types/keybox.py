"""Exportable key box type."""

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

from ..exceptions import SerializationError
from ..types.common import Base58Str, Base64Str, Bip44Path, Mnemonic

if TYPE_CHECKING:
    from ..crypto.keys import Ed25519KeyPair

__all__ = ["KeyBox"]


@dataclass(frozen=True)
class KeyBox:
    """
    Everything needed to reconstruct a node identity.

    Field names follow Python conventions; ``to_dict`` emits the camelCase
    names other tooling expects (``mnemonic``, ``bip44Path``, ``publicKey``,
    ``privateKey``).
    """

    mnemonic: Mnemonic
    bip44_path: Bip44Path
    public_key: Base58Str
    private_key: Base64Str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-compatible dictionary."""
        return {
            "mnemonic": self.mnemonic,
            "bip44Path": list(self.bip44_path),
            "publicKey": self.public_key,
            "privateKey": self.private_key,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize as JSON."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyBox":
        """
        Load a key box from its JSON dictionary form.

        Raises:
            SerializationError: If a field is missing or has the wrong type
        """
        try:
            return cls(
                mnemonic=Mnemonic(str(data["mnemonic"])),
                bip44_path=tuple(int(p) for p in data["bip44Path"]),
                public_key=Base58Str(str(data["publicKey"])),
                private_key=Base64Str(str(data["privateKey"])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SerializationError(f"Invalid key box: {e}") from e

    def key_pair(self) -> "Ed25519KeyPair":
        """Rebuild the signing key pair from the encoded private key."""
        from ..crypto.keys import decode_private_key
        return decode_private_key(self.private_key).key_pair()

    def __repr__(self) -> str:
        # Never print the mnemonic or private key
        return f"KeyBox(public_key={self.public_key!r}, bip44_path={self.bip44_path!r})"
