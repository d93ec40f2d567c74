"""NetSpawner exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "NetSpawnerError",
    "CryptoError",
    "MnemonicError",
    "SeedDerivationError",
    "DerivationError",
    "SigningError",
    "ValidationError",
    "PathParseError",
    "SerializationError",
    "DecodeError",
    "UnsupportedKeyTypeError",
    "ConfigError",
    "ProvisioningError",
    "ProcessError",
]


class NetSpawnerError(Exception):
    """Base exception for all NetSpawner errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class CryptoError(NetSpawnerError):
    """Raised when cryptographic operation fails."""
    pass


class MnemonicError(CryptoError):
    """Raised when a mnemonic phrase cannot be produced."""
    pass


class SeedDerivationError(CryptoError):
    """Raised when a mnemonic cannot be stretched into a seed."""
    pass


class DerivationError(CryptoError):
    """Raised when hierarchical derivation yields an unusable key."""
    pass


class SigningError(CryptoError):
    """Raised when the signing primitive fails."""
    pass


class ValidationError(NetSpawnerError):
    """Raised when validation fails."""
    pass


class PathParseError(ValidationError):
    """Raised when a derivation path component is not an unsigned integer."""

    def __init__(self, token: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Invalid BIP44 path component {token!r}"
        super().__init__(message)
        self.token = token


class SerializationError(NetSpawnerError):
    """Raised when serialization/deserialization fails."""
    pass


class DecodeError(SerializationError):
    """Raised when an encoded key or signature is malformed."""
    pass


class UnsupportedKeyTypeError(DecodeError):
    """Raised when a decoded container holds a key of the wrong algorithm."""

    def __init__(self, key_type: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Unsupported key type: {key_type}"
        super().__init__(message)
        self.key_type = key_type


class ConfigError(NetSpawnerError):
    """Raised when the launcher configuration is missing or invalid."""
    pass


class ProvisioningError(NetSpawnerError):
    """Raised when node directories cannot be prepared."""
    pass


class ProcessError(ProvisioningError):
    """Raised when a node process cannot be started."""
    pass
