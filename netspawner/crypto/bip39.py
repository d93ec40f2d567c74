"""BIP39 mnemonic implementation for NetSpawner."""

import hashlib
import logging
import secrets
from typing import Optional

from mnemonic import Mnemonic as _Wordlist

from ..constants import MNEMONIC_LANGUAGE, MNEMONIC_STRENGTH, PBKDF2_ROUNDS, SEED_LENGTH
from ..exceptions import MnemonicError, SeedDerivationError
from ..types.common import EntropySource, Mnemonic, Seed

__all__ = [
    "generate_mnemonic",
    "provide_mnemonic",
    "mnemonic_to_seed",
    "is_valid_mnemonic",
]

logger = logging.getLogger(__name__)

_wordlist = _Wordlist(MNEMONIC_LANGUAGE)


def generate_mnemonic(
    strength: int = MNEMONIC_STRENGTH,
    entropy_source: Optional[EntropySource] = None,
) -> Mnemonic:
    """
    Generate BIP39 mnemonic phrase.

    Args:
        strength: Entropy size in bits
        entropy_source: Callable returning ``n`` random bytes
            (defaults to ``secrets.token_bytes``)

    Returns:
        Space-separated word phrase

    Raises:
        ValueError: If strength is not a BIP39 size
        MnemonicError: If the entropy source returns the wrong length
    """
    if strength not in (128, 160, 192, 224, 256):
        raise ValueError("Strength must be 128, 160, 192, 224, or 256")

    if entropy_source is None:
        entropy_source = secrets.token_bytes

    entropy = entropy_source(strength // 8)
    if len(entropy) != strength // 8:
        raise MnemonicError(
            f"Entropy source returned {len(entropy)} bytes, expected {strength // 8}"
        )

    return Mnemonic(_wordlist.to_mnemonic(bytes(entropy)))


def provide_mnemonic(
    existing: str = "",
    entropy_source: Optional[EntropySource] = None,
) -> Mnemonic:
    """Return ``existing`` as-is, or a fresh 24-word phrase when it is empty."""
    if existing:
        return Mnemonic(existing)

    logger.debug("No mnemonic supplied, generating a %d-bit one", MNEMONIC_STRENGTH)
    return generate_mnemonic(MNEMONIC_STRENGTH, entropy_source)


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> Seed:
    """
    Convert mnemonic to seed using PBKDF2.

    The phrase and passphrase are used byte-for-byte; no Unicode
    normalization or whitespace cleanup is applied.

    Raises:
        SeedDerivationError: If either string cannot be UTF-8 encoded
    """
    try:
        mnemonic_bytes = mnemonic.encode("utf-8")
        passphrase_bytes = ("mnemonic" + passphrase).encode("utf-8")
    except UnicodeEncodeError as e:
        raise SeedDerivationError(f"Cannot encode mnemonic or passphrase: {e}") from e

    return Seed(hashlib.pbkdf2_hmac(
        "sha512",
        mnemonic_bytes,
        passphrase_bytes,
        PBKDF2_ROUNDS,
        dklen=SEED_LENGTH
    ))


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Check words and checksum against the English wordlist."""
    try:
        return bool(_wordlist.check(mnemonic))
    except (ValueError, LookupError):
        return False
