"""Shared numeric limits and character tables for formatting and generation."""

from __future__ import annotations

__all__ = [
    "DIGIT_ALPHABET",
    "MIN_BASE",
    "MAX_BASE",
    "DECIMAL_BASE",
    "GROUP_SIZE",
    "MAX_VALUE_DIFFERENCE",
    "DISABLED_SEPARATORS",
    "separator_or_none",
]

DIGIT_ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyz"

MIN_BASE: int = 2
MAX_BASE: int = len(DIGIT_ALPHABET)
DECIMAL_BASE: int = 10

GROUP_SIZE: int = 3

MAX_VALUE_DIFFERENCE: float = 1e53

DISABLED_SEPARATORS: frozenset[str] = frozenset({"", "\0"})


def separator_or_none(separator: str | None) -> str | None:
    """Return ``separator`` or ``None`` when it denotes a disabled separator."""

    if separator is None or separator in DISABLED_SEPARATORS:
        return None
    return separator
