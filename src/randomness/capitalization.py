"""Capitalization transforms applied to generated strings and words.

Each :class:`CapitalizationMode` is a plain tag; the behaviour lives in a
dispatch table mapping a mode to a pure ``(text, rng) -> text`` function.  The
helpers are deterministic except for :attr:`CapitalizationMode.RANDOM`, which
draws one boolean per character from the caller-supplied
:class:`~randomness.rng.RandomSource` so that results are reproducible under a
fixed seed.  No module-level random state is ever consulted.

Case folding relies on :meth:`str.upper` / :meth:`str.lower`, which are locale
independent in Python.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from .utils.errors import UnknownCapitalizationModeError

if TYPE_CHECKING:  # pragma: no cover
    from .rng import RandomSource


class CapitalizationMode(str, Enum):
    """Ways in which a generated string can be capitalized."""

    RETAIN = "retain"
    SENTENCE = "sentence"
    UPPER = "upper"
    LOWER = "lower"
    FIRST_LETTER = "first letter"
    RANDOM = "random"

    def __str__(self) -> str:
        return self.value


def to_sentence_case(text: str) -> str:
    """Uppercase the first character and lowercase the remainder."""

    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


def to_first_letter_case(text: str) -> str:
    """Apply :func:`to_sentence_case` to each single-space separated token."""

    return " ".join(to_sentence_case(token) for token in text.split(" "))


def to_random_case(text: str, rng: RandomSource) -> str:
    """Uppercase or lowercase each character with probability one half."""

    return "".join(ch.lower() if rng.next_bool() else ch.upper() for ch in text)


def _requires_rng(text: str, rng: RandomSource | None) -> str:
    if rng is None:
        raise ValueError("Random capitalization requires a random source")
    return to_random_case(text, rng)


_TRANSFORMS: dict[CapitalizationMode, Callable[[str, RandomSource | None], str]] = {
    CapitalizationMode.RETAIN: lambda text, _rng: text,
    CapitalizationMode.SENTENCE: lambda text, _rng: to_sentence_case(text),
    CapitalizationMode.UPPER: lambda text, _rng: text.upper(),
    CapitalizationMode.LOWER: lambda text, _rng: text.lower(),
    CapitalizationMode.FIRST_LETTER: lambda text, _rng: to_first_letter_case(text),
    CapitalizationMode.RANDOM: _requires_rng,
}


def apply(mode: CapitalizationMode, text: str, *, rng: RandomSource | None = None) -> str:
    """Return ``text`` capitalized according to ``mode``.

    ``rng`` is only consulted by :attr:`CapitalizationMode.RANDOM`, for which it
    is mandatory.
    """

    return _TRANSFORMS[CapitalizationMode(mode)](text, rng)


def get_mode(name: str) -> CapitalizationMode:
    """Return the capitalization mode whose name is ``name``.

    Both the descriptor (``"first letter"``) and the member name
    (``"FIRST_LETTER"``) are accepted.
    """

    for mode in CapitalizationMode:
        if name in (mode.value, mode.name):
            return mode
    raise UnknownCapitalizationModeError(
        f"There does not exist a capitalization mode with name `{name}`."
    )


__all__ = [
    "CapitalizationMode",
    "to_sentence_case",
    "to_first_letter_case",
    "to_random_case",
    "apply",
    "get_mode",
]
