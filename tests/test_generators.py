"""Tests for the per-kind generators."""

from __future__ import annotations

import uuid
from pathlib import Path

import pytest

from randomness.capitalization import CapitalizationMode
from randomness.config.schema import (
    I64_MAX,
    I64_MIN,
    DecimalConstraints,
    DictionaryRef,
    IntegerConstraints,
    StringConstraints,
    UuidConstraints,
    WordConstraints,
)
from randomness.decorators import FixedLengthOptions
from randomness.dictionary import DictionaryRepository
from randomness.generators import (
    generate,
    generate_decimal,
    generate_integer,
    generate_many,
    generate_string,
    generate_uuid,
    generate_word,
)
from randomness.rng import SeededRandomSource, rng_for
from randomness.symbols import SymbolSetId, concatenate
from randomness.utils.errors import NoWordsInRangeError


def test_integer_within_inclusive_bounds(rng: SeededRandomSource) -> None:
    constraints = IntegerConstraints(min_value=-5, max_value=5)
    values = {int(generate_integer(constraints, rng)) for _ in range(1000)}
    assert values <= set(range(-5, 6))
    assert -5 in values and 5 in values


def test_integer_single_value(rng: SeededRandomSource) -> None:
    constraints = IntegerConstraints(min_value=42, max_value=42)
    assert generate_integer(constraints, rng) == "42"


def test_integer_full_range(rng: SeededRandomSource) -> None:
    constraints = IntegerConstraints(min_value=I64_MIN, max_value=I64_MAX)
    for _ in range(100):
        assert I64_MIN <= int(generate_integer(constraints, rng)) <= I64_MAX


def test_integer_base_and_decorators(rng: SeededRandomSource) -> None:
    constraints = IntegerConstraints(
        min_value=255,
        max_value=255,
        base=16,
        uppercase=True,
        fixed_length=FixedLengthOptions(length=4, filler="0"),
        affix="0x@",
    )
    assert generate_integer(constraints, rng) == "0x00FF"


def test_integer_fixed_length_truncates(rng: SeededRandomSource) -> None:
    constraints = IntegerConstraints(
        min_value=123456, max_value=123456, fixed_length=FixedLengthOptions(length=3)
    )
    assert generate_integer(constraints, rng) == "123"


def test_decimal_format(rng: SeededRandomSource) -> None:
    constraints = DecimalConstraints(
        min_value=1234.5, max_value=1234.5, decimal_count=2, grouping_separator=",", affix="'"
    )
    assert generate_decimal(constraints, rng) == "'1,234.50'"


def test_decimal_within_bounds(rng: SeededRandomSource) -> None:
    constraints = DecimalConstraints(min_value=0.0, max_value=10.0, decimal_count=2)
    for _ in range(1000):
        text = generate_decimal(constraints, rng)
        assert 0.0 <= float(text) <= 10.0
        assert len(text.split(".")[1]) == 2


def test_string_zero_length_yields_enclosures(rng: SeededRandomSource) -> None:
    for sets in ([], [SymbolSetId.DIGITS], list(SymbolSetId)):
        constraints = StringConstraints(
            min_length=0, max_length=0, enclosure="'", active_symbol_sets=sets
        )
        assert generate_string(constraints, rng) == "''"


def test_string_length_and_alphabet(rng: SeededRandomSource) -> None:
    sets = [SymbolSetId.DIGITS, SymbolSetId.MINUS]
    constraints = StringConstraints(
        min_length=2, max_length=6, enclosure="", active_symbol_sets=sets
    )
    alphabet = set(concatenate(sets))
    lengths = set()
    for _ in range(500):
        text = generate_string(constraints, rng)
        lengths.add(len(text))
        assert set(text) <= alphabet
    assert lengths == {2, 3, 4, 5, 6}


def test_string_capitalization(rng: SeededRandomSource) -> None:
    constraints = StringConstraints(
        min_length=10,
        max_length=10,
        enclosure="",
        active_symbol_sets=[SymbolSetId.LOWERCASE],
        capitalization=CapitalizationMode.UPPER,
    )
    text = generate_string(constraints, rng)
    assert text == text.upper() and len(text) == 10


def test_string_reproducible() -> None:
    constraints = StringConstraints(min_length=5, max_length=15)
    first = [generate_string(constraints, rng_for("same")) for _ in range(3)]
    second = [generate_string(constraints, rng_for("same")) for _ in range(3)]
    assert first == second


def _word_constraints(path: Path, **kwargs: object) -> WordConstraints:
    return WordConstraints(
        active_dictionaries=[DictionaryRef(bundled=False, filename=str(path))], **kwargs
    )


def test_word_from_range(
    simple_dic: Path, repository: DictionaryRepository, rng: SeededRandomSource
) -> None:
    constraints = _word_constraints(
        simple_dic, min_length=4, max_length=4, enclosure="", capitalization="upper"
    )
    words = {generate_word(constraints, rng, repository=repository) for _ in range(200)}
    assert words == {"WOOF", "MEOW"}


def test_word_enclosure(
    simple_dic: Path, repository: DictionaryRepository, rng: SeededRandomSource
) -> None:
    constraints = _word_constraints(simple_dic, min_length=1, max_length=1, enclosure="`")
    assert generate_word(constraints, rng, repository=repository) == "`a`"


def test_word_no_words_in_range(
    simple_dic: Path, repository: DictionaryRepository, rng: SeededRandomSource
) -> None:
    constraints = _word_constraints(simple_dic, min_length=10, max_length=20)
    with pytest.raises(NoWordsInRangeError):
        generate_word(constraints, rng, repository=repository)


def test_word_reproducible(simple_dic: Path, repository: DictionaryRepository) -> None:
    constraints = _word_constraints(simple_dic, min_length=1, max_length=10)
    first = [generate_word(constraints, rng_for(3), repository=repository) for _ in range(5)]
    second = [generate_word(constraints, rng_for(3), repository=repository) for _ in range(5)]
    assert first == second


def test_word_bundled_default(rng: SeededRandomSource) -> None:
    text = generate_word(WordConstraints(enclosure=""), rng, repository=DictionaryRepository())
    assert 3 <= len(text) <= 8


@pytest.mark.parametrize("enclosure", ["", '"', "'", "``", "<<>>"])
def test_uuid_parses(enclosure: str, rng: SeededRandomSource) -> None:
    for _ in range(20):
        text = generate_uuid(UuidConstraints(enclosure=enclosure), rng)
        assert text.startswith(enclosure) and text.endswith(enclosure)
        inner = text[len(enclosure) : len(text) - len(enclosure)]
        parsed = uuid.UUID(inner)
        assert parsed.version == 4
        assert str(parsed) == inner


def test_generate_dispatch(rng: SeededRandomSource) -> None:
    assert generate(IntegerConstraints(min_value=3, max_value=3), rng) == "3"
    assert generate(UuidConstraints(enclosure=""), rng).count("-") == 4


def test_generate_many(rng: SeededRandomSource) -> None:
    values = generate_many(IntegerConstraints(min_value=1, max_value=9), rng, 7)
    assert len(values) == 7


def test_string_excludes_look_alike_symbols(rng: SeededRandomSource) -> None:
    constraints = StringConstraints(
        min_length=20,
        max_length=20,
        enclosure="",
        active_symbol_sets=[SymbolSetId.UPPERCASE, SymbolSetId.DIGITS],
        exclude_look_alike_symbols=True,
    )
    for _ in range(200):
        assert not set(generate_string(constraints, rng)) & set("01IO")


@pytest.mark.parametrize(
    ("uppercase", "add_dashes", "length"),
    [(False, True, 36), (True, True, 36), (False, False, 32), (True, False, 32)],
)
def test_uuid_case_and_dashes(
    uppercase: bool, add_dashes: bool, length: int, rng: SeededRandomSource
) -> None:
    constraints = UuidConstraints(enclosure="", uppercase=uppercase, add_dashes=add_dashes)
    for _ in range(20):
        text = generate_uuid(constraints, rng)
        assert len(text) == length
        assert ("-" in text) is add_dashes
        letters = [c for c in text if c.isalpha()]
        assert all(c.isupper() for c in letters) if uppercase else all(c.islower() for c in letters)
        assert uuid.UUID(text).version == 4
