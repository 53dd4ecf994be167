from __future__ import annotations

from pathlib import Path

import pytest

from randomness.dictionary import DictionaryRepository
from randomness.rng import SeededRandomSource, rng_for

SIMPLE_WORDS = ["a", "the", "dog", "woof", "cat", "meow"]


def write_dictionary(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def simple_dic(tmp_path: Path) -> Path:
    return write_dictionary(tmp_path / "simple.dic", SIMPLE_WORDS)


@pytest.fixture
def repository() -> DictionaryRepository:
    return DictionaryRepository()


@pytest.fixture
def rng() -> SeededRandomSource:
    return rng_for("unit-test")
