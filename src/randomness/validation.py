"""Validation of constraint values before generation.

:func:`validate` returns the first problem found as a
:class:`~randomness.utils.errors.ValidationFailure`, or ``None`` when the
constraints can be used.  Nothing in this module raises for invalid input.
Word constraints are checked against actual dictionary contents, which are
loaded through a :class:`~randomness.dictionary.DictionaryRepository`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .config.schema import (
    DecimalConstraints,
    GenerationConstraints,
    IntegerConstraints,
    StringConstraints,
    UuidConstraints,
    WordConstraints,
)
from .decorators import has_trailing_escape
from .dictionary import DictionaryRepository, combine, get_default_repository
from .dictionary import validate as validate_dictionary
from .symbols import concatenate
from .utils.constants import MAX_VALUE_DIFFERENCE
from .utils.errors import (
    DictionaryEmptyError,
    DictionaryError,
    ValidationErrorKind,
    ValidationFailure,
)


def _range_inverted(minimum: object, maximum: object, what: str) -> ValidationFailure:
    return ValidationFailure(
        ValidationErrorKind.RANGE_INVERTED,
        f"The minimum {what} ({minimum}) should not be larger than the maximum {what} ({maximum}).",
    )


def _check_affix(descriptor: str) -> ValidationFailure | None:
    if has_trailing_escape(descriptor):
        return ValidationFailure(
            ValidationErrorKind.INVALID_AFFIX,
            f"The affix '{descriptor}' ends in an unpaired escape character.",
        )
    return None


def validate_integer(constraints: IntegerConstraints) -> ValidationFailure | None:
    if constraints.min_value > constraints.max_value:
        return _range_inverted(constraints.min_value, constraints.max_value, "value")
    return _check_affix(constraints.affix)


def validate_decimal(constraints: DecimalConstraints) -> ValidationFailure | None:
    if constraints.min_value > constraints.max_value:
        return _range_inverted(constraints.min_value, constraints.max_value, "value")
    if constraints.max_value - constraints.min_value > MAX_VALUE_DIFFERENCE:
        return ValidationFailure(
            ValidationErrorKind.VALUE_RANGE_TOO_LARGE,
            f"The range should not exceed {MAX_VALUE_DIFFERENCE:g}.",
        )
    return _check_affix(constraints.affix)


def validate_string(constraints: StringConstraints) -> ValidationFailure | None:
    if constraints.min_length > constraints.max_length:
        return _range_inverted(constraints.min_length, constraints.max_length, "length")
    if constraints.max_length > 0 and not constraints.active_symbol_sets:
        return ValidationFailure(
            ValidationErrorKind.EMPTY_ALPHABET,
            "Select at least one symbol set.",
        )
    alphabet = concatenate(
        constraints.active_symbol_sets,
        exclude_look_alike=constraints.exclude_look_alike_symbols,
    )
    if constraints.max_length > 0 and not alphabet:
        return ValidationFailure(
            ValidationErrorKind.EMPTY_ALPHABET,
            "Active symbol sets should contain at least one non-look-alike symbol.",
        )
    return None


def validate_word(
    constraints: WordConstraints,
    *,
    repository: DictionaryRepository | None = None,
) -> ValidationFailure | None:
    """Check the length range and every active dictionary.

    Dictionaries are loaded through ``repository`` (the process-wide one by
    default).  Load errors are reported as failures rather than raised.
    """

    if constraints.min_length > constraints.max_length:
        return _range_inverted(constraints.min_length, constraints.max_length, "length")

    refs = constraints.active_dictionaries
    if not refs:
        return ValidationFailure(
            ValidationErrorKind.EMPTY_DICTIONARY_SELECTION,
            "Select at least one dictionary.",
        )

    seen: set[tuple[bool, str]] = set()
    for ref in refs:
        key = (ref.bundled, ref.filename)
        if key in seen:
            return ValidationFailure(
                ValidationErrorKind.DUPLICATE_DICTIONARY_NAME,
                f"Dictionary '{ref.filename}' is selected more than once.",
            )
        seen.add(key)

    repo = repository if repository is not None else get_default_repository()
    dictionaries = []
    for ref in refs:
        try:
            dictionary = repo.get(ref)
        except DictionaryEmptyError as exc:
            return ValidationFailure(ValidationErrorKind.DICTIONARY_EMPTY, str(exc))
        except DictionaryError as exc:
            return ValidationFailure(ValidationErrorKind.DICTIONARY_UNREADABLE, str(exc))
        failure = validate_dictionary(dictionary)
        if failure is not None:
            return failure
        dictionaries.append(dictionary)

    combined = combine(dictionaries)
    if not combined.words_with_length_in_range(constraints.min_length, constraints.max_length):
        return ValidationFailure(
            ValidationErrorKind.WORD_RANGE_UNSATISFIABLE,
            f"There are no words with a length between {constraints.min_length} and "
            f"{constraints.max_length}; word lengths range from "
            f"{combined.shortest_word_length()} to {combined.longest_word_length()}.",
        )
    return None


def validate_uuid(constraints: UuidConstraints) -> ValidationFailure | None:
    return None


_VALIDATORS: dict[str, Callable[..., ValidationFailure | None]] = {
    "integer": validate_integer,
    "decimal": validate_decimal,
    "string": validate_string,
    "word": validate_word,
    "uuid": validate_uuid,
}


def validate(
    constraints: GenerationConstraints,
    *,
    repository: DictionaryRepository | None = None,
) -> ValidationFailure | None:
    """Return the first problem with ``constraints``, or ``None``."""

    kwargs: dict[str, Any] = {}
    if constraints.kind == "word":
        kwargs["repository"] = repository
    return _VALIDATORS[constraints.kind](constraints, **kwargs)


__all__ = [
    "validate_integer",
    "validate_decimal",
    "validate_string",
    "validate_word",
    "validate_uuid",
    "validate",
]
