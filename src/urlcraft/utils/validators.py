"""utils/validators.py

Validation utilities for urlcraft.
"""

_DIGITS = frozenset("0123456789")
_HEXDIGITS = frozenset("0123456789abcdefABCDEF")


def is_decimal(text: str) -> bool:
    """True if text is one or more ASCII decimal digits."""
    return bool(text) and all(c in _DIGITS for c in text)


def is_hex(text: str) -> bool:
    """True if text is one or more ASCII hex digits."""
    return bool(text) and all(c in _HEXDIGITS for c in text)
