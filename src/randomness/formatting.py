"""Exact textual rendering of integers and decimals.

Integers can be rendered in any base between 2 and 36 using the digit
alphabet ``0-9a-z``.  Digit grouping is a base-10 concept only: a grouping
separator passed together with another base is ignored.

Decimals are rounded with :data:`decimal.ROUND_HALF_UP` (ties away from zero)
on the shortest decimal representation of the float, which is the value the
user sees when they type or print it.  Rounding is done with
:mod:`decimal` rather than :func:`round` because the latter uses banker's
rounding and operates on the binary value.

Separators are single characters; ``None``, ``""`` and ``"\\0"`` disable them.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from .utils.constants import (
    DECIMAL_BASE,
    DIGIT_ALPHABET,
    GROUP_SIZE,
    MAX_BASE,
    MIN_BASE,
    separator_or_none,
)

if TYPE_CHECKING:  # pragma: no cover
    from .rng import RandomSource

# Enough significant digits to quantize any finite double without rounding
# before the requested position.
_BASE_PRECISION = 400


def group_digits(digits: str, separator: str | None) -> str:
    """Insert ``separator`` between groups of three digits, counted from the right.

    ``digits`` must not carry a sign.
    """

    separator = separator_or_none(separator)
    if separator is None or len(digits) <= GROUP_SIZE:
        return digits
    head = len(digits) % GROUP_SIZE or GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(digits[i : i + GROUP_SIZE] for i in range(head, len(digits), GROUP_SIZE))
    return separator.join(groups)


def to_base(value: int, base: int) -> str:
    """Render ``value`` in ``base`` with lowercase digits and a leading ``-`` if negative."""

    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    if value == 0:
        return "0"
    magnitude = abs(value)
    digits: list[str] = []
    while magnitude:
        magnitude, remainder = divmod(magnitude, base)
        digits.append(DIGIT_ALPHABET[remainder])
    if value < 0:
        digits.append("-")
    return "".join(reversed(digits))


def format_integer(
    value: int,
    base: int = DECIMAL_BASE,
    grouping_separator: str | None = None,
    *,
    uppercase: bool = False,
) -> str:
    """Return the textual representation of ``value``.

    Examples
    --------
    >>> format_integer(33360, grouping_separator=".")
    '33.360'
    >>> format_integer(48345, base=11, grouping_separator=".")
    '33360'
    >>> format_integer(255, base=16, uppercase=True)
    'FF'
    """

    if base != DECIMAL_BASE:
        text = to_base(value, base)
        return text.upper() if uppercase else text

    sign = "-" if value < 0 else ""
    return sign + group_digits(str(abs(value)), grouping_separator)


def round_half_up(value: float, decimal_count: int) -> Decimal:
    """Round ``value`` to ``decimal_count`` fractional digits, ties away from zero.

    Negative zero results are normalized to positive zero.
    """

    if decimal_count < 0:
        raise ValueError("decimal_count must be non-negative")
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")
    with localcontext() as ctx:
        ctx.prec = _BASE_PRECISION + decimal_count
        quantum = Decimal(1).scaleb(-decimal_count)
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = rounded.copy_abs()
    return rounded


def format_decimal(
    value: float,
    decimal_count: int = 2,
    grouping_separator: str | None = None,
    decimal_separator: str | None = ".",
    *,
    show_trailing_zeroes: bool = True,
) -> str:
    """Return ``value`` rounded and rendered with the given separators.

    The fractional part always has exactly ``decimal_count`` digits unless
    ``show_trailing_zeroes`` is false, in which case trailing zeros are removed
    together with the decimal separator if no digits remain.

    Examples
    --------
    >>> format_decimal(4.2, 2, ".", ",")
    '4,20'
    >>> format_decimal(67575.845, 3, ".", ",")
    '67.575,845'
    >>> format_decimal(-85.71, 0)
    '-86'
    """

    rounded = round_half_up(value, decimal_count)
    text = format(rounded, "f")
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]
    integer_part, _, fraction = text.partition(".")

    if not show_trailing_zeroes:
        fraction = fraction.rstrip("0")

    rendered = sign + group_digits(integer_part, grouping_separator)
    if fraction:
        rendered += separator_or_none(decimal_separator) or ""
        rendered += fraction
    return rendered


def sample_decimal(min_value: float, max_value: float, rng: RandomSource) -> float:
    """Sample uniformly from ``[min_value, nextUp(max_value))``.

    Extending the half-open interval to the next representable float makes
    ``max_value`` itself reachable.
    """

    if min_value > max_value:
        raise ValueError(f"Empty range [{min_value}, {max_value}]")
    upper = math.nextafter(max_value, math.inf)
    sample = min_value + rng.next_uniform_float() * (upper - min_value)
    if sample >= upper:
        # floating point error in the affine map can land on the open bound
        sample = max_value
    return sample


__all__ = [
    "group_digits",
    "to_base",
    "format_integer",
    "round_half_up",
    "format_decimal",
    "sample_decimal",
]
