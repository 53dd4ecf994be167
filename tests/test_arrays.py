from __future__ import annotations

from randomness.arrays import arrayify
from randomness.config.schema import ArrayConstraints


def test_empty_values_keep_brackets() -> None:
    constraints = ArrayConstraints(brackets=("[", "]"), separator=",", space_after_separator=True)
    assert arrayify([], constraints) == "[]"


def test_custom_brackets_and_separator() -> None:
    constraints = ArrayConstraints(brackets=("@", "#"), separator=";;", space_after_separator=True)
    values = ["Garhwali", "Pattypan", "Troll"]
    assert arrayify(values, constraints) == "@Garhwali;; Pattypan;; Troll#"


def test_without_brackets() -> None:
    constraints = ArrayConstraints(brackets=None, separator=",", space_after_separator=False)
    assert arrayify(["1", "2"], constraints) == "1,2"
    assert arrayify([], constraints) == ""


def test_newline_separator_gets_no_space() -> None:
    constraints = ArrayConstraints(brackets=None, separator="\n", space_after_separator=True)
    assert arrayify(["a", "b"], constraints) == "a\nb"
