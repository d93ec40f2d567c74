"""Signature utilities for NetSpawner."""

import logging
from typing import Union

from ..constants import ED25519_SIGNATURE_LENGTH
from ..crypto.keys import PrivateKey, PublicKey, decode_private_key, decode_public_key
from ..types.common import Base64Str, Message, Signature
from ..utils.encoding import decode_base64, encode_base64, to_bytes

__all__ = [
    "sign",
    "verify",
    "sign_message",
    "verify_message",
]

logger = logging.getLogger(__name__)


def sign(private_key: PrivateKey, message: bytes) -> Signature:
    """
    Sign raw message bytes.

    Ed25519 derives its nonce from the key and message, so the same
    inputs always produce the same 64-byte signature.
    """
    return private_key.sign(message)


def verify(
    message: bytes,
    encoded_public_key: Union[str, PublicKey],
    encoded_signature: str
) -> bool:
    """
    Verify a base64 signature against a base58 public key.

    Args:
        message: Signed message bytes
        encoded_public_key: Prefix-stripped base58 public key (or a PublicKey)
        encoded_signature: Base64 signature

    Returns:
        True if signature is valid, False for any mismatch or bad length

    Raises:
        DecodeError: If the public key or signature string is malformed
        UnsupportedKeyTypeError: If the public key is not Ed25519
    """
    if isinstance(encoded_public_key, PublicKey):
        public_key = encoded_public_key
    else:
        public_key = decode_public_key(encoded_public_key)

    signature = decode_base64(encoded_signature)
    if len(signature) != ED25519_SIGNATURE_LENGTH:
        logger.debug("Rejecting signature of length %d", len(signature))
        return False

    return public_key.verify(signature, message)


def sign_message(
    private_key: Union[str, PrivateKey],
    message: Message
) -> Base64Str:
    """
    Sign a message and return the signature as base64.

    Args:
        private_key: Base64 PKCS#8 private key, or a PrivateKey
        message: Message to sign; strings are UTF-8 encoded

    Returns:
        Base64 signature
    """
    if not isinstance(private_key, PrivateKey):
        private_key = decode_private_key(private_key)

    return encode_base64(sign(private_key, to_bytes(message)))


def verify_message(
    message: Message,
    public_key: Union[str, PublicKey],
    signature: str
) -> bool:
    """Verify a base64 signature over a str or bytes message."""
    return verify(to_bytes(message), public_key, signature)
