"""Joining several generated values into one array-like string."""

from __future__ import annotations

from collections.abc import Sequence

from .config.schema import ArrayConstraints

NEWLINE_SEPARATOR = "\n"


def arrayify(values: Sequence[str], constraints: ArrayConstraints) -> str:
    """Join ``values`` and wrap the result in the configured brackets.

    A space follows each separator if ``space_after_separator`` is set, except
    for the newline separator.  Without brackets nothing is wrapped around the
    joined values.

    >>> arrayify(["a", "b"], ArrayConstraints(brackets=("[", "]"), separator=","))
    '[a, b]'
    """

    separator = constraints.separator
    if constraints.space_after_separator and separator != NEWLINE_SEPARATOR:
        separator += " "
    joined = separator.join(values)
    if constraints.brackets is None:
        return joined
    opening, closing = constraints.brackets
    return f"{opening}{joined}{closing}"


__all__ = ["NEWLINE_SEPARATOR", "arrayify"]
