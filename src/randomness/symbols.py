"""Registry of named symbol sets used as sampling alphabets.

Each :class:`SymbolSet` is an immutable, named collection of characters that is
defined at import time.  String generation samples from the concatenation of
the active sets.  Concatenation follows registry declaration order regardless
of the order in which identifiers are supplied, and symbols shared between
sets are *not* deduplicated: a character that appears in two active sets is
twice as likely to be drawn.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .utils.errors import UnknownSymbolSetError

LOOK_ALIKE_CHARACTERS = "01IOl|"


class SymbolSetId(str, Enum):
    """Identifiers of the built-in symbol sets, in declaration order."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGITS = "digits"
    HEXADECIMAL = "hexadecimal"
    MINUS = "minus"
    UNDERSCORE = "underscore"
    SPACE = "space"
    SPECIAL = "special"
    BRACKETS = "brackets"


@dataclass(slots=True, frozen=True)
class SymbolSet:
    """A named collection of symbols."""

    id: SymbolSetId
    display_name: str
    symbols: str

    def __str__(self) -> str:
        return self.display_name


_REGISTRY: dict[SymbolSetId, SymbolSet] = {
    s.id: s
    for s in (
        SymbolSet(SymbolSetId.UPPERCASE, "Uppercase (A, B, C, ...)", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
        SymbolSet(SymbolSetId.LOWERCASE, "Lowercase (a, b, c, ...)", "abcdefghijklmnopqrstuvwxyz"),
        SymbolSet(SymbolSetId.DIGITS, "Digits (0, 1, 2, ...)", "0123456789"),
        SymbolSet(
            SymbolSetId.HEXADECIMAL, "Hexadecimal (0, 1, 2, ..., d, e, f)", "0123456789abcdef"
        ),
        SymbolSet(SymbolSetId.MINUS, "Minus (-)", "-"),
        SymbolSet(SymbolSetId.UNDERSCORE, "Underscore (_)", "_"),
        SymbolSet(SymbolSetId.SPACE, "Space ( )", " "),
        SymbolSet(SymbolSetId.SPECIAL, "Special (!, @, #, $, %, ^, &, *)", "!@#$%^&*"),
        SymbolSet(SymbolSetId.BRACKETS, "Brackets ((, ), [, ], {, }, <, >)", "()[]{}<>"),
    )
}


def all_symbol_sets() -> tuple[SymbolSet, ...]:
    """Return every registered symbol set in declaration order."""

    return tuple(_REGISTRY.values())


def get_symbol_set(set_id: SymbolSetId | str) -> SymbolSet:
    """Return the symbol set registered under ``set_id``.

    Raises
    ------
    UnknownSymbolSetError
        If ``set_id`` is not a registered identifier.
    """

    try:
        return _REGISTRY[SymbolSetId(set_id)]
    except ValueError:
        raise UnknownSymbolSetError(f"Unknown symbol set '{set_id}'") from None


def get_symbol_set_by_name(display_name: str) -> SymbolSet:
    """Return the symbol set with the given display name."""

    for symbol_set in _REGISTRY.values():
        if symbol_set.display_name == display_name:
            return symbol_set
    raise UnknownSymbolSetError(f"Unknown symbol set '{display_name}'")


def concatenate(
    set_ids: Iterable[SymbolSetId | str], *, exclude_look_alike: bool = False
) -> str:
    """Return the sampling alphabet for ``set_ids``.

    Symbols are concatenated in registry order.  Each identifier contributes at
    most once, but characters shared by different sets are kept so that
    sampling is weighted by multiplicity.  With ``exclude_look_alike`` the
    characters in :data:`LOOK_ALIKE_CHARACTERS` are removed afterwards.
    """

    wanted = {get_symbol_set(set_id).id for set_id in set_ids}
    alphabet = "".join(s.symbols for s in _REGISTRY.values() if s.id in wanted)
    if exclude_look_alike:
        alphabet = "".join(c for c in alphabet if c not in LOOK_ALIKE_CHARACTERS)
    return alphabet


__all__ = [
    "LOOK_ALIKE_CHARACTERS",
    "SymbolSetId",
    "SymbolSet",
    "all_symbol_sets",
    "get_symbol_set",
    "get_symbol_set_by_name",
    "concatenate",
]
