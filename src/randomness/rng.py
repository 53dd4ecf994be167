"""Random sources consumed by the generators.

Generators never touch module level random state.  Instead they receive a
:class:`RandomSource`, which keeps generation reproducible in tests and lets
callers decide between a seeded stream and operating system entropy.

Seeds are turned into :class:`random.Random` instances through a SHA-256
digest with a fixed domain separation prefix.  String seeds are canonicalized
first so that incidental whitespace or Unicode composition differences do not
change the stream.  Seeds are never logged.
"""

from __future__ import annotations

import hashlib
import random
import re
import unicodedata
from typing import Final, Protocol, runtime_checkable

_NS_RNG: Final = b"randomness/v1/rng"


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniformly distributed values."""

    def next_uniform_int(self, lo: int, hi: int) -> int:
        """Return an integer in ``[lo, hi]``; both bounds are inclusive."""

    def next_uniform_float(self) -> float:
        """Return a float in ``[0, 1)``."""

    def next_bool(self) -> bool:
        """Return ``True`` or ``False`` with equal probability."""


class SeededRandomSource:
    """:class:`RandomSource` backed by a :class:`random.Random` instance."""

    def __init__(self, rnd: random.Random | None = None) -> None:
        self._rnd = rnd if rnd is not None else random.Random()

    @classmethod
    def system(cls) -> SeededRandomSource:
        """Return a source drawing from the operating system's entropy pool."""

        return cls(random.SystemRandom())

    def next_uniform_int(self, lo: int, hi: int) -> int:
        if lo > hi:
            raise ValueError(f"Empty range [{lo}, {hi}]")
        # randint works on arbitrary precision ints, so [-2**63, 2**63 - 1] is safe
        return self._rnd.randint(lo, hi)

    def next_uniform_float(self) -> float:
        return self._rnd.random()

    def next_bool(self) -> bool:
        return self._rnd.getrandbits(1) == 1


def canonicalize_seed(seed: str) -> str:
    """Normalize a textual seed.

    The normalization steps are:

    - strip leading/trailing whitespace
    - collapse internal whitespace runs to a single space
    - NFC normalize

    Case is kept, so ``"Seed"`` and ``"seed"`` give different streams.
    """

    normalized = unicodedata.normalize("NFC", seed.strip())
    return re.sub(r"\s+", " ", normalized)


def rng_for(seed: str | int, *, namespace: str = "default") -> SeededRandomSource:
    """Derive a reproducible random source from ``seed``.

    The underlying generator is seeded with ``SHA256(_NS_RNG || namespace ||
    0x00 || seed)`` so that the same seed used under different namespaces
    yields independent streams.
    """

    if isinstance(seed, int):
        seed_bytes = str(seed).encode("ascii")
    else:
        seed_bytes = canonicalize_seed(seed).encode("utf-8")
    data = _NS_RNG + namespace.encode("utf-8") + b"\x00" + seed_bytes
    digest = hashlib.sha256(data).digest()
    return SeededRandomSource(random.Random(int.from_bytes(digest, "big")))


__all__ = ["RandomSource", "SeededRandomSource", "canonicalize_seed", "rng_for"]
