"""
Locale-aware name collation.

Produces sort keys that order names the way a reader expects rather than by
code point: letters compare case- and accent-insensitively first, then by
accents, then by case with lowercase before uppercase.
"""

import unicodedata
from typing import Tuple


def collation_key(value: str) -> Tuple[str, str, Tuple[bool, ...], str]:
    """
    Build a multi-level collation key for a name.

    Args:
        value: The string to collate

    Returns:
        Tuple of (primary, secondary, tertiary, raw) comparison levels
    """
    decomposed = unicodedata.normalize("NFD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    primary = base.casefold()
    secondary = decomposed.casefold()
    tertiary = tuple(ch.isupper() for ch in base)

    return primary, secondary, tertiary, value
