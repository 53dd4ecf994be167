"""Generators producing one textual value per call.

Each generator is a function of a constraints model and a
:class:`~randomness.rng.RandomSource`; no module level random state is used.
Constraints are expected to have passed :func:`randomness.validation.validate`.
The only precondition that is re-checked here is that a word can actually be
drawn, because it depends on dictionary contents that may change after
validation.

Word generation looks dictionaries up through a
:class:`~randomness.dictionary.DictionaryRepository`.  The process-wide
repository is used unless one is passed explicitly.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any

from .capitalization import apply as capitalize
from .config.schema import (
    DecimalConstraints,
    GenerationConstraints,
    IntegerConstraints,
    StringConstraints,
    UuidConstraints,
    WordConstraints,
)
from .decorators import apply_affix, apply_fixed_length
from .dictionary import DictionaryRepository, combine, get_default_repository
from .formatting import format_decimal, format_integer, sample_decimal
from .rng import RandomSource
from .symbols import concatenate
from .utils.errors import GenerationError, NoWordsInRangeError
from .utils.logging import get_logger

LOG = get_logger(__name__)

_UINT64_MAX = 2**64 - 1


def _enclose(text: str, enclosure: str) -> str:
    return f"{enclosure}{text}{enclosure}"


def generate_integer(constraints: IntegerConstraints, rng: RandomSource) -> str:
    """Return a random integer in ``[min_value, max_value]``, formatted and decorated."""

    value = rng.next_uniform_int(constraints.min_value, constraints.max_value)
    text = format_integer(
        value,
        constraints.base,
        constraints.grouping_separator,
        uppercase=constraints.uppercase,
    )
    text = apply_fixed_length(text, constraints.fixed_length)
    return apply_affix(text, constraints.affix)


def generate_decimal(constraints: DecimalConstraints, rng: RandomSource) -> str:
    """Return a random decimal in ``[min_value, max_value]`` before rounding."""

    value = sample_decimal(constraints.min_value, constraints.max_value, rng)
    text = format_decimal(
        value,
        constraints.decimal_count,
        constraints.grouping_separator,
        constraints.decimal_separator,
        show_trailing_zeroes=constraints.show_trailing_zeroes,
    )
    return apply_affix(text, constraints.affix)


def generate_string(constraints: StringConstraints, rng: RandomSource) -> str:
    """Return a random string over the active symbol sets."""

    length = rng.next_uniform_int(constraints.min_length, constraints.max_length)
    alphabet = concatenate(
        constraints.active_symbol_sets,
        exclude_look_alike=constraints.exclude_look_alike_symbols,
    )
    if length > 0 and not alphabet:
        raise GenerationError("Cannot generate a string without any symbols.")

    text = "".join(alphabet[rng.next_uniform_int(0, len(alphabet) - 1)] for _ in range(length))
    return _enclose(capitalize(constraints.capitalization, text, rng=rng), constraints.enclosure)


def generate_word(
    constraints: WordConstraints,
    rng: RandomSource,
    *,
    repository: DictionaryRepository | None = None,
) -> str:
    """Return a random word from the union of the active dictionaries.

    Raises
    ------
    NoWordsInRangeError
        If no word has a length within ``[min_length, max_length]``.
    DictionaryError
        If one of the dictionaries cannot be loaded.
    """

    repo = repository if repository is not None else get_default_repository()
    dictionary = combine(repo.get_all(constraints.active_dictionaries))
    candidates = dictionary.words_with_length_in_range(
        constraints.min_length, constraints.max_length
    )
    if not candidates:
        raise NoWordsInRangeError(constraints.min_length, constraints.max_length)

    # set iteration order depends on hash seeding; sort for reproducible draws
    ordered = sorted(candidates)
    word = ordered[rng.next_uniform_int(0, len(ordered) - 1)]
    return _enclose(capitalize(constraints.capitalization, word, rng=rng), constraints.enclosure)


def generate_uuid(constraints: UuidConstraints, rng: RandomSource) -> str:
    """Return a random version 4 UUID, lowercase and dashed unless configured otherwise."""

    high = rng.next_uniform_int(0, _UINT64_MAX)
    low = rng.next_uniform_int(0, _UINT64_MAX)
    value = uuid.UUID(int=(high << 64) | low, version=4)
    text = str(value) if constraints.add_dashes else value.hex
    if constraints.uppercase:
        text = text.upper()
    return _enclose(text, constraints.enclosure)


_GENERATORS: dict[str, Callable[..., str]] = {
    "integer": generate_integer,
    "decimal": generate_decimal,
    "string": generate_string,
    "word": generate_word,
    "uuid": generate_uuid,
}


def generate(
    constraints: GenerationConstraints,
    rng: RandomSource,
    *,
    repository: DictionaryRepository | None = None,
) -> str:
    """Dispatch to the generator matching ``constraints.kind``."""

    generator = _GENERATORS[constraints.kind]
    kwargs: dict[str, Any] = {}
    if constraints.kind == "word":
        kwargs["repository"] = repository
    try:
        return generator(constraints, rng, **kwargs)
    except GenerationError as exc:
        LOG.warning("Could not generate %s: %s", constraints.kind, exc)
        raise


def generate_many(
    constraints: GenerationConstraints,
    rng: RandomSource,
    count: int,
    *,
    repository: DictionaryRepository | None = None,
) -> list[str]:
    """Return ``count`` independently generated values."""

    return [generate(constraints, rng, repository=repository) for _ in range(count)]


__all__ = [
    "generate_integer",
    "generate_decimal",
    "generate_string",
    "generate_word",
    "generate_uuid",
    "generate",
    "generate_many",
]
