"""Validation utilities for NetSpawner."""

from typing import Optional

from ..constants import DEFAULT_BIP44_PATH, MAX_PATH_COMPONENT
from ..exceptions import PathParseError, ValidationError
from ..types.common import Bip44Path, PathInput

__all__ = [
    "is_valid_path_component",
    "validate_path_component",
    "normalize_path",
    "parse_derivation_path",
]


def is_valid_path_component(value: int) -> bool:
    """
    Check if a path component can be hardened without overflowing uint32.

    Args:
        value: Path component before the hardened offset is applied

    Returns:
        True if valid, False otherwise
    """
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_PATH_COMPONENT


def validate_path_component(value: int) -> int:
    """
    Validate a single path component.

    Raises:
        ValidationError: If the component is out of range
    """
    if not is_valid_path_component(value):
        raise ValidationError(
            f"Path component must be an integer in [0, {MAX_PATH_COMPONENT}], got {value!r}"
        )
    return value


def normalize_path(path: Optional[PathInput]) -> Bip44Path:
    """
    Turn a caller-supplied path into a tuple, selecting the default when empty.

    Args:
        path: Sequence of path components, or None

    Returns:
        Validated path tuple
    """
    if not path:
        return DEFAULT_BIP44_PATH
    return tuple(validate_path_component(p) for p in path)


def parse_derivation_path(text: Optional[str]) -> Bip44Path:
    """
    Parse a path like ``44/7337/0/0``.

    Empty components are skipped, and a blank or missing string selects
    the default path.

    Args:
        text: Slash-separated unsigned decimal integers

    Returns:
        Path tuple

    Raises:
        PathParseError: If a component is not an unsigned integer in range
    """
    if text is None or not text.strip():
        return DEFAULT_BIP44_PATH

    components = []
    for part in text.split("/"):
        part = part.strip()
        if not part:
            continue
        if not (part.isascii() and part.isdigit()):
            raise PathParseError(part)
        value = int(part)
        if value > MAX_PATH_COMPONENT:
            raise PathParseError(
                part,
                f"BIP44 path component {part!r} exceeds {MAX_PATH_COMPONENT}; "
                f"hardened components must be in 0..{MAX_PATH_COMPONENT} (2**31-1)",
            )
        components.append(value)

    return normalize_path(components)
