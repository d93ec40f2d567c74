"""Encoding and decoding utilities for NetSpawner."""

import base64
import binascii
from typing import Union

from ..exceptions import DecodeError
from ..types.common import Base58Str, Base64Str

__all__ = [
    "bytes_to_int",
    "int_to_bytes",
    "encode_base58",
    "decode_base58",
    "encode_base64",
    "decode_base64",
    "to_bytes",
]

# Constants
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: i for i, char in enumerate(BASE58_ALPHABET)}


def int_to_bytes(value: int, length: int, byteorder: str = "big") -> bytes:
    """Convert unsigned integer to bytes with specified length."""
    return value.to_bytes(length, byteorder=byteorder)


def bytes_to_int(data: bytes, byteorder: str = "big") -> int:
    """Convert bytes to unsigned integer."""
    return int.from_bytes(data, byteorder=byteorder)


def to_bytes(message: Union[str, bytes]) -> bytes:
    """UTF-8 encode strings, pass bytes through."""
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def encode_base58(data: bytes) -> Base58Str:
    """
    Encode bytes as Base58 string.

    Each leading zero byte becomes a leading ``1``.

    Args:
        data: Bytes to encode

    Returns:
        Base58 encoded string
    """
    n = bytes_to_int(data)

    encoded = ""
    while n:
        n, remainder = divmod(n, 58)
        encoded = BASE58_ALPHABET[remainder] + encoded

    # Add leading zeros
    for byte in data:
        if byte == 0:
            encoded = "1" + encoded
        else:
            break

    return Base58Str(encoded)


def decode_base58(string: str) -> bytes:
    """
    Decode Base58 string to bytes.

    Args:
        string: Base58 string

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If string contains invalid characters
    """
    n = 0
    for char in string:
        try:
            n = n * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise DecodeError(f"Invalid Base58 character: {char!r}") from None

    leading_zeros = len(string) - len(string.lstrip("1"))
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""
    return b"\x00" * leading_zeros + body


def encode_base64(data: bytes) -> Base64Str:
    """Encode bytes as standard padded base64."""
    return Base64Str(base64.b64encode(data).decode("ascii"))


def decode_base64(string: str) -> bytes:
    """
    Decode standard padded base64.

    Line breaks are ignored so keys and signatures pasted across lines decode.

    Raises:
        DecodeError: If the string is not valid base64
    """
    try:
        return base64.b64decode(string.replace("\r", "").replace("\n", ""), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 string: {e}") from e
