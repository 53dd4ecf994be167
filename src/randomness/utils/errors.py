"""Typed exceptions and validation error values.

Loading and generation failures are raised as exceptions deriving from
:class:`RandomnessError`.  Validation never raises; it returns a
:class:`ValidationFailure` carrying a :class:`ValidationErrorKind` so that a
caller can render or branch on the specific problem.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RandomnessError(Exception):
    """Base class for all errors raised by the package."""


class UnknownSymbolSetError(RandomnessError, KeyError):
    """Raised when a symbol set identifier is not registered."""


class UnknownCapitalizationModeError(RandomnessError, ValueError):
    """Raised when no capitalization mode has the requested name."""


class ConfigError(RandomnessError, ValueError):
    """Raised when a user settings file does not hold a mapping."""


class DictionaryError(RandomnessError):
    """Base class for dictionary loading errors."""

    def __init__(self, uid: str, message: str) -> None:
        super().__init__(f"Dictionary '{uid}' {message}")
        self.uid = uid


class DictionaryUnreadableError(DictionaryError):
    """Raised when the source of a dictionary cannot be read.

    The underlying ``OSError`` is available as ``cause`` and is also chained as
    ``__cause__``.
    """

    def __init__(self, uid: str, cause: BaseException) -> None:
        super().__init__(uid, f"is unreadable: {cause}")
        self.cause = cause


class DictionaryEmptyError(DictionaryError):
    """Raised when a dictionary source contains no words."""

    def __init__(self, uid: str) -> None:
        super().__init__(uid, "is empty.")


class GenerationError(RandomnessError):
    """Base class for failures detected while generating a value."""


class NoWordsInRangeError(GenerationError):
    """Raised when no dictionary word has a length within the requested range."""

    def __init__(self, min_length: int, max_length: int) -> None:
        super().__init__(
            f"There are no words with a length between {min_length} and {max_length}."
        )
        self.min_length = min_length
        self.max_length = max_length


class ValidationErrorKind(str, Enum):
    """Categories of invalid constraints."""

    RANGE_INVERTED = "range_inverted"
    VALUE_RANGE_TOO_LARGE = "value_range_too_large"
    EMPTY_ALPHABET = "empty_alphabet"
    EMPTY_DICTIONARY_SELECTION = "empty_dictionary_selection"
    DICTIONARY_EMPTY = "dictionary_empty"
    DICTIONARY_UNREADABLE = "dictionary_unreadable"
    DUPLICATE_DICTIONARY_NAME = "duplicate_dictionary_name"
    WORD_RANGE_UNSATISFIABLE = "word_range_unsatisfiable"
    INVALID_AFFIX = "invalid_affix"


@dataclass(slots=True, frozen=True)
class ValidationFailure:
    """The first problem found in a constraints value."""

    kind: ValidationErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


__all__ = [
    "RandomnessError",
    "UnknownSymbolSetError",
    "UnknownCapitalizationModeError",
    "ConfigError",
    "DictionaryError",
    "DictionaryUnreadableError",
    "DictionaryEmptyError",
    "GenerationError",
    "NoWordsInRangeError",
    "ValidationErrorKind",
    "ValidationFailure",
]
