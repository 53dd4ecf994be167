"""Word dictionaries: loading, caching, combination and length queries.

A :class:`Dictionary` is an immutable set of words identified by a ``uid``.
Two dictionaries compare equal iff their ``uid`` values are equal; the words
themselves are only used functionally.

Sources
-------
Words are read through a :class:`DictionarySource`.  Two implementations are
provided: :class:`BundledDictionarySource` reads a resource shipped in
:mod:`randomness.dictionaries` and :class:`FileDictionarySource` reads a file
from disk.  Blank lines and lines starting with ``#`` are skipped, and
duplicate lines collapse into a single word.

Caching
-------
:class:`DictionaryCache` maps a ``uid`` to a loaded dictionary.  Lookups with
``use_cache=True`` reuse a cached instance.  Lookups with ``use_cache=False``
always load afresh but still store the result, so that a forced reload is
picked up by every later cached lookup.  Load-and-insert and clearing are
serialized by a single lock.

:class:`DictionaryRepository` bundles one cache for bundled dictionaries and
one for user dictionaries and resolves references against them.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from importlib import resources as importlib_resources
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .utils.errors import (
    DictionaryEmptyError,
    DictionaryError,
    DictionaryUnreadableError,
    ValidationErrorKind,
    ValidationFailure,
)
from .utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from .config.schema import DictionaryRef

LOG = get_logger(__name__)

BUNDLED_PACKAGE = "randomness.dictionaries"
SIMPLE_DICTIONARY = "english.dic"

_COMMENT_PREFIX = "#"


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


@runtime_checkable
class DictionarySource(Protocol):
    """Provides the raw lines of a dictionary."""

    @property
    def uid(self) -> str:
        """Identity of the source, used as cache key and dictionary identity."""

    def read_lines(self) -> list[str]:
        """Return the lines of the source; raise :class:`OSError` on failure."""


@dataclass(slots=True, frozen=True)
class BundledDictionarySource:
    """A dictionary resource shipped inside the package."""

    filename: str

    @property
    def uid(self) -> str:
        return self.filename

    def exists(self) -> bool:
        return importlib_resources.files(BUNDLED_PACKAGE).joinpath(self.filename).is_file()

    def read_lines(self) -> list[str]:
        resource = importlib_resources.files(BUNDLED_PACKAGE).joinpath(self.filename)
        if not resource.is_file():
            raise FileNotFoundError(f"No bundled dictionary named '{self.filename}'")
        with resource.open("r", encoding="utf-8") as f:
            return f.read().splitlines()


@dataclass(slots=True, frozen=True)
class FileDictionarySource:
    """A dictionary stored as a plain-text file on disk.

    The file is decoded as UTF-8; a leading byte-order mark is ignored.
    """

    path: str

    @property
    def uid(self) -> str:
        return self.path

    def exists(self) -> bool:
        return Path(self.path).is_file()

    def read_lines(self) -> list[str]:
        with open(self.path, "r", encoding="utf-8-sig") as f:
            return f.read().splitlines()


# ---------------------------------------------------------------------------
# Dictionary
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Dictionary:
    """An immutable, named set of words."""

    uid: str
    words: frozenset[str] = field(compare=False, repr=False)
    source: DictionarySource | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.words, frozenset):
            object.__setattr__(self, "words", frozenset(self.words))

    def __len__(self) -> int:
        return len(self.words)

    def __str__(self) -> str:
        return self.uid

    @property
    def is_file_backed(self) -> bool:
        return isinstance(self.source, FileDictionarySource)

    def words_with_length_in_range(self, min_length: int, max_length: int) -> frozenset[str]:
        """Return the words whose length lies in ``[min_length, max_length]``.

        An inverted or otherwise unsatisfiable range yields an empty set.
        """

        if min_length > max_length or max_length < 0:
            return frozenset()
        return frozenset(w for w in self.words if min_length <= len(w) <= max_length)

    def longest_word_length(self) -> int:
        """Length of the longest word, or ``0`` for an empty dictionary."""

        return max((len(w) for w in self.words), default=0)

    def shortest_word_length(self) -> int:
        """Length of the shortest word, or ``0`` for an empty dictionary."""

        return min((len(w) for w in self.words), default=0)


def parse_words(lines: Iterable[str]) -> frozenset[str]:
    """Return the set of words in ``lines``, skipping blanks and ``#`` comments."""

    return frozenset(
        line for line in lines if line.strip() and not line.startswith(_COMMENT_PREFIX)
    )


def load(source: DictionarySource) -> Dictionary:
    """Read ``source`` into a :class:`Dictionary`.

    Raises
    ------
    DictionaryUnreadableError
        If the source cannot be read.  The ``OSError`` is chained.
    DictionaryEmptyError
        If the source contains no words.
    """

    try:
        lines = source.read_lines()
    except (OSError, UnicodeDecodeError) as exc:
        LOG.warning("Could not read dictionary '%s': %s", source.uid, exc)
        raise DictionaryUnreadableError(source.uid, exc) from exc

    words = parse_words(lines)
    if not words:
        raise DictionaryEmptyError(source.uid)
    LOG.debug("Loaded dictionary '%s' with %d words", source.uid, len(words))
    return Dictionary(source.uid, words, source)


def combine(dictionaries: Sequence[Dictionary]) -> Dictionary:
    """Return a dictionary holding the union of all words in ``dictionaries``.

    The result has a synthetic ``uid`` that never equals the ``uid`` of a
    loaded dictionary, and it is never stored in a cache.
    """

    uids: list[str] = []
    for dictionary in dictionaries:
        if dictionary.uid not in uids:
            uids.append(dictionary.uid)
    words = frozenset().union(*(d.words for d in dictionaries))
    return Dictionary(f"<combined:{'|'.join(uids)}>", words)


def validate(dictionary: Dictionary) -> ValidationFailure | None:
    """Return a failure if ``dictionary`` cannot be used for generation."""

    source = dictionary.source
    if isinstance(source, FileDictionarySource) and not source.exists():
        return ValidationFailure(
            ValidationErrorKind.DICTIONARY_UNREADABLE,
            f"Dictionary '{dictionary.uid}' does not exist.",
        )
    if not dictionary.words:
        return ValidationFailure(
            ValidationErrorKind.DICTIONARY_EMPTY,
            f"Dictionary '{dictionary.uid}' is empty.",
        )
    return None


# ---------------------------------------------------------------------------
# Cache
# ---------------------------------------------------------------------------


class DictionaryCache:
    """Thread-safe map from ``uid`` to loaded :class:`Dictionary`."""

    def __init__(self, loader: Callable[[str], Dictionary], *, name: str = "dictionaries") -> None:
        self._loader = loader
        self._name = name
        self._lock = threading.RLock()
        self._entries: dict[str, Dictionary] = {}

    def get_or_load(self, uid: str, use_cache: bool = True) -> Dictionary:
        """Return the dictionary for ``uid``.

        With ``use_cache`` true a cached instance is returned when present.
        Otherwise the dictionary is loaded and stored, replacing any cached
        instance.  Failed loads leave the cache untouched.
        """

        with self._lock:
            if use_cache:
                cached = self._entries.get(uid)
                if cached is not None:
                    LOG.debug("Cache hit for '%s' in %s", uid, self._name)
                    return cached
            LOG.debug("Loading '%s' into %s", uid, self._name)
            dictionary = self._loader(uid)
            self._entries[uid] = dictionary
            return dictionary

    def clear(self) -> None:
        """Remove every cached dictionary."""

        with self._lock:
            self._entries.clear()
        LOG.info("Cleared %s cache", self._name)

    def __contains__(self, uid: object) -> bool:
        with self._lock:
            return uid in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class DictionaryRepository:
    """Resolves dictionary references through a bundled and a user cache."""

    def __init__(
        self,
        *,
        bundled: DictionaryCache | None = None,
        user: DictionaryCache | None = None,
    ) -> None:
        if bundled is None:
            bundled = DictionaryCache(
                lambda uid: load(BundledDictionarySource(uid)), name="bundled dictionaries"
            )
        if user is None:
            user = DictionaryCache(
                lambda uid: load(FileDictionarySource(uid)), name="user dictionaries"
            )
        self.bundled = bundled
        self.user = user

    def get(self, ref: DictionaryRef, *, use_cache: bool = True) -> Dictionary:
        """Return the dictionary referenced by ``ref``.

        Raises
        ------
        DictionaryError
            If the dictionary cannot be loaded.
        """

        cache = self.bundled if ref.bundled else self.user
        return cache.get_or_load(ref.filename, use_cache)

    def get_all(self, refs: Iterable[DictionaryRef], *, use_cache: bool = True) -> list[Dictionary]:
        return [self.get(ref, use_cache=use_cache) for ref in refs]

    def clear(self) -> None:
        """Clear both caches."""

        self.bundled.clear()
        self.user.clear()


_default_repository: DictionaryRepository | None = None
_default_lock = threading.Lock()


def get_default_repository() -> DictionaryRepository:
    """Return the process-wide repository, creating it on first use."""

    global _default_repository
    with _default_lock:
        if _default_repository is None:
            _default_repository = DictionaryRepository()
        return _default_repository


__all__ = [
    "BUNDLED_PACKAGE",
    "SIMPLE_DICTIONARY",
    "DictionarySource",
    "BundledDictionarySource",
    "FileDictionarySource",
    "Dictionary",
    "DictionaryError",
    "parse_words",
    "load",
    "combine",
    "validate",
    "DictionaryCache",
    "DictionaryRepository",
    "get_default_repository",
]
