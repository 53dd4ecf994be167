"""Post-processing applied to generated numbers.

Affix descriptors
-----------------
An affix descriptor describes the text placed around a value.  Every unescaped
``@`` is replaced by the value; ``\\`` escapes the following character, so
``\\@`` is a literal ``@`` and ``\\\\`` a literal backslash.  A descriptor
without an unescaped ``@`` is used both as prefix and as suffix, so ``'`` wraps
a value in single quotes.  A descriptor ending in a lone ``\\`` is invalid.

Fixed length
------------
A value is truncated to ``length`` characters and then left-padded with a
single filler character up to ``length``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, conint, constr

_ESCAPE = "\\"
_PLACEHOLDER = "@"


class FixedLengthOptions(BaseModel):
    """Options for forcing a value to an exact number of characters."""

    length: conint(ge=1) = 3
    filler: constr(min_length=1, max_length=1) = "0"

    model_config = ConfigDict(extra="forbid")


def has_trailing_escape(descriptor: str) -> bool:
    """Return ``True`` if ``descriptor`` ends in an unpaired escape character."""

    escaped = False
    for ch in descriptor:
        escaped = not escaped if ch == _ESCAPE else False
    return escaped


def parse_affix(descriptor: str) -> list[str]:
    """Split ``descriptor`` into the literal parts between placeholders.

    The result always has at least two elements; joining it with a value
    yields the decorated value.

    >>> parse_affix("'")
    ["'", "'"]
    >>> parse_affix("(@)")
    ['(', ')']
    >>> parse_affix("\\\\@@")
    ['@', '']
    """

    if has_trailing_escape(descriptor):
        raise ValueError(f"Affix descriptor '{descriptor}' ends in an unpaired escape")

    parts = [""]
    escaped = False
    for ch in descriptor:
        if escaped:
            parts[-1] += ch
            escaped = False
        elif ch == _ESCAPE:
            escaped = True
        elif ch == _PLACEHOLDER:
            parts.append("")
        else:
            parts[-1] += ch

    if len(parts) == 1:
        return [parts[0], parts[0]]
    return parts


def apply_affix(value: str, descriptor: str) -> str:
    """Return ``value`` decorated with the affix ``descriptor``."""

    if not descriptor:
        return value
    return value.join(parse_affix(descriptor))


def apply_fixed_length(value: str, options: FixedLengthOptions | None) -> str:
    """Truncate and left-pad ``value`` to ``options.length`` characters."""

    if options is None:
        return value
    return value[: options.length].rjust(options.length, options.filler)


__all__ = [
    "FixedLengthOptions",
    "has_trailing_escape",
    "parse_affix",
    "apply_affix",
    "apply_fixed_length",
]
