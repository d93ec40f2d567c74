"""Ed25519 key management for NetSpawner."""

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ..constants import ED25519_KEY_LENGTH, ED25519_SPKI_PREFIX, KeyType
from ..exceptions import DecodeError, SigningError, UnsupportedKeyTypeError
from ..types.common import (
    Base58Str,
    Base64Str,
    EntropySource,
    PathInput,
    PrivateKeyBytes,
    PublicKeyBytes,
    Signature,
)
from ..types.keybox import KeyBox
from ..utils.encoding import decode_base58, decode_base64, encode_base58, encode_base64
from ..utils.validation import normalize_path

__all__ = [
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
]

logger = logging.getLogger(__name__)


class PublicKey:
    """
    Ed25519 public key wrapper.

    Exported as base58 over the DER SubjectPublicKeyInfo with the fixed
    ``ED25519_SPKI_PREFIX`` removed.
    """

    key_type: ClassVar[KeyType] = KeyType.ED25519

    def __init__(self, key: Union[bytes, ed25519.Ed25519PublicKey, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: 32 raw bytes, a ``cryptography`` public key, or another PublicKey

        Raises:
            DecodeError: If raw bytes have the wrong length or are not a point
        """
        if isinstance(key, PublicKey):
            self._key = key._key
        elif isinstance(key, ed25519.Ed25519PublicKey):
            self._key = key
        else:
            if len(key) != ED25519_KEY_LENGTH:
                raise DecodeError(f"Invalid public key length: {len(key)}")
            try:
                self._key = ed25519.Ed25519PublicKey.from_public_bytes(bytes(key))
            except ValueError as e:
                raise DecodeError(f"Invalid public key: {e}") from e

    @classmethod
    def from_der(cls, der: bytes) -> "PublicKey":
        """
        Parse a DER SubjectPublicKeyInfo.

        Raises:
            DecodeError: If the container is malformed
            UnsupportedKeyTypeError: If it holds a non-Ed25519 key
        """
        try:
            loaded = serialization.load_der_public_key(der)
        except (ValueError, UnsupportedAlgorithm) as e:
            raise DecodeError(f"Invalid public key container: {e}") from e

        if not isinstance(loaded, ed25519.Ed25519PublicKey):
            raise UnsupportedKeyTypeError(type(loaded).__name__)
        return cls(loaded)

    @classmethod
    def from_base58(cls, encoded: str) -> "PublicKey":
        """
        Import from the prefix-stripped base58 form.

        Raises:
            DecodeError: If the string is not a valid encoded public key
        """
        body = decode_base58(encoded)
        if len(body) != ED25519_KEY_LENGTH:
            raise DecodeError(
                f"Encoded public key must decode to {ED25519_KEY_LENGTH} bytes, got {len(body)}"
            )
        return cls.from_der(ED25519_SPKI_PREFIX + body)

    @property
    def raw(self) -> PublicKeyBytes:
        """Get the 32-byte public point."""
        return PublicKeyBytes(self._key.public_bytes(
            serialization.Encoding.Raw, serialization.PublicFormat.Raw
        ))

    def to_der(self) -> bytes:
        """Serialize as DER SubjectPublicKeyInfo."""
        return self._key.public_bytes(
            serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo
        )

    def to_base58(self) -> Base58Str:
        """Export without the SPKI prefix, base58 encoded."""
        der = self.to_der()
        return encode_base58(der[len(ED25519_SPKI_PREFIX):])

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify signature.

        Returns:
            True if signature is valid
        """
        try:
            self._key.verify(bytes(signature), message)
            return True
        except InvalidSignature:
            return False

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)

    def __repr__(self) -> str:
        return f"PublicKey({self.to_base58()})"


class PrivateKey:
    """
    Ed25519 private key wrapper.

    Exported as base64 over the full DER PKCS#8 container.
    """

    key_type: ClassVar[KeyType] = KeyType.ED25519

    def __init__(self, key: Union[bytes, ed25519.Ed25519PrivateKey, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: 32-byte seed, a ``cryptography`` private key, or another PrivateKey

        Raises:
            DecodeError: If the seed is not 32 bytes
        """
        if isinstance(key, PrivateKey):
            self._key = key._key
        elif isinstance(key, ed25519.Ed25519PrivateKey):
            self._key = key
        else:
            if len(key) != ED25519_KEY_LENGTH:
                raise DecodeError(f"Invalid private key length: {len(key)}")
            self._key = ed25519.Ed25519PrivateKey.from_private_bytes(bytes(key))

    @classmethod
    def from_pkcs8(cls, der: bytes) -> "PrivateKey":
        """
        Parse an unencrypted DER PKCS#8 container.

        Raises:
            DecodeError: If the container is malformed
            UnsupportedKeyTypeError: If it holds a non-Ed25519 key
        """
        try:
            loaded = serialization.load_der_private_key(der, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise DecodeError(f"Invalid private key container: {e}") from e

        if not isinstance(loaded, ed25519.Ed25519PrivateKey):
            raise UnsupportedKeyTypeError(type(loaded).__name__)
        return cls(loaded)

    @classmethod
    def from_base64(cls, encoded: str) -> "PrivateKey":
        """Import from base64 PKCS#8."""
        return cls.from_pkcs8(decode_base64(encoded))

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get the 32-byte private seed."""
        return PrivateKeyBytes(self._key.private_bytes(
            serialization.Encoding.Raw,
            serialization.PrivateFormat.Raw,
            serialization.NoEncryption(),
        ))

    def to_pkcs8(self) -> bytes:
        """Serialize as unencrypted DER PKCS#8."""
        return self._key.private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )

    def to_base64(self) -> Base64Str:
        """Export as base64 PKCS#8."""
        return encode_base64(self.to_pkcs8())

    def public_key(self) -> PublicKey:
        """Get corresponding public key."""
        return PublicKey(self._key.public_key())

    def key_pair(self) -> "Ed25519KeyPair":
        return Ed25519KeyPair(public_key=self.public_key(), private_key=self)

    def sign(self, message: bytes) -> Signature:
        """
        Sign message bytes (RFC 8032, deterministic).

        Raises:
            SigningError: If signing fails
        """
        try:
            return Signature(self._key.sign(message))
        except (TypeError, ValueError) as e:
            raise SigningError(f"Signing failed: {e}") from e

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PrivateKey):
            return False
        return self.secret == other.secret

    def __hash__(self) -> int:
        return hash(self.secret)

    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars of hex for security
        hex_str = self.secret.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


@dataclass(frozen=True)
class Ed25519KeyPair:
    """Ed25519 signing key pair."""

    key_type: ClassVar[KeyType] = KeyType.ED25519

    public_key: PublicKey
    private_key: PrivateKey


# New curves join this union as extra members
KeyPair = Union[Ed25519KeyPair]


def build_key_pair(secret_seed: bytes) -> Ed25519KeyPair:
    """Build the Ed25519 key pair whose RFC 8032 seed is ``secret_seed``."""
    return PrivateKey(secret_seed).key_pair()


def encode_public_key(public_key: PublicKey) -> Base58Str:
    return public_key.to_base58()


def decode_public_key(encoded: str) -> PublicKey:
    return PublicKey.from_base58(encoded)


def encode_private_key(private_key: PrivateKey) -> Base64Str:
    return private_key.to_base64()


def decode_private_key(encoded: str) -> PrivateKey:
    return PrivateKey.from_base64(encoded)


def generate_key_box(
    mnemonic: str = "",
    passphrase: str = "",
    path: Optional[PathInput] = None,
    entropy_source: Optional[EntropySource] = None,
) -> KeyBox:
    """
    Derive an Ed25519 key box from a mnemonic (BIP39/BIP32, hardened only).

    Args:
        mnemonic: Existing phrase; a fresh 24-word phrase is generated if empty
        passphrase: Optional mnemonic password
        path: Path components without hardened offset; defaults to 44/7337/0/0
        entropy_source: Random byte source used only when generating a mnemonic

    Returns:
        Key box with encoded public and private keys
    """
    from .bip39 import mnemonic_to_seed, provide_mnemonic
    from .hd import ExtendedKey

    words = provide_mnemonic(mnemonic, entropy_source)
    bip44_path = normalize_path(path)

    seed = mnemonic_to_seed(words, passphrase)
    leaf = ExtendedKey.from_seed(seed).derive_path(bip44_path)
    pair = build_key_pair(leaf.key)

    logger.debug(
        "Derived key at path %s",
        "/".join(f"{p}'" for p in bip44_path),
    )

    return KeyBox(
        mnemonic=words,
        bip44_path=bip44_path,
        public_key=encode_public_key(pair.public_key),
        private_key=encode_private_key(pair.private_key),
    )
