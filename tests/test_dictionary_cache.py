"""Tests for dictionary cache identity and reload behaviour."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from randomness.config.schema import DictionaryRef
from randomness.dictionary import (
    Dictionary,
    DictionaryCache,
    DictionaryRepository,
    get_default_repository,
)
from randomness.utils.errors import DictionaryUnreadableError


def _counting_cache() -> tuple[DictionaryCache, list[str]]:
    calls: list[str] = []

    def loader(uid: str) -> Dictionary:
        calls.append(uid)
        return Dictionary(uid, frozenset({f"word{len(calls)}"}))

    return DictionaryCache(loader), calls


def test_cached_lookup_returns_same_instance() -> None:
    cache, calls = _counting_cache()
    first = cache.get_or_load("a")
    second = cache.get_or_load("a")
    assert first is second
    assert calls == ["a"]


def test_uncached_lookup_reloads_and_stores() -> None:
    # reloading without reading the cache still replaces the cached entry
    cache, calls = _counting_cache()
    original = cache.get_or_load("a")
    fresh = cache.get_or_load("a", use_cache=False)
    assert fresh is not original
    assert fresh == original
    assert cache.get_or_load("a") is fresh
    assert calls == ["a", "a"]


def test_uncached_lookup_populates_empty_cache() -> None:
    cache, calls = _counting_cache()
    fresh = cache.get_or_load("b", use_cache=False)
    assert "b" in cache
    assert cache.get_or_load("b") is fresh
    assert calls == ["b"]


def test_clear() -> None:
    cache, calls = _counting_cache()
    first = cache.get_or_load("a")
    cache.clear()
    assert len(cache) == 0
    second = cache.get_or_load("a")
    assert second is not first
    assert calls == ["a", "a"]


def test_failed_load_is_not_cached() -> None:
    def loader(uid: str) -> Dictionary:
        raise DictionaryUnreadableError(uid, FileNotFoundError(uid))

    cache = DictionaryCache(loader)
    with pytest.raises(DictionaryUnreadableError):
        cache.get_or_load("missing")
    assert "missing" not in cache


def test_concurrent_lookups_share_one_instance() -> None:
    cache, calls = _counting_cache()
    results: list[Dictionary] = []
    lock = threading.Lock()

    def worker() -> None:
        dictionary = cache.get_or_load("shared")
        with lock:
            results.append(dictionary)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert calls == ["shared"]
    assert all(r is results[0] for r in results)


def test_repository_separates_bundled_and_user(simple_dic: Path) -> None:
    repo = DictionaryRepository()
    user = repo.get(DictionaryRef(bundled=False, filename=str(simple_dic)))
    bundled = repo.get(DictionaryRef(bundled=True, filename="english.dic"))
    assert str(simple_dic) in repo.user
    assert "english.dic" in repo.bundled
    assert str(simple_dic) not in repo.bundled
    assert user.words != bundled.words


def test_repository_picks_up_changes_after_clear(simple_dic: Path) -> None:
    repo = DictionaryRepository()
    ref = DictionaryRef(bundled=False, filename=str(simple_dic))
    before = repo.get(ref)
    simple_dic.write_text("zebra\n", encoding="utf-8")
    assert repo.get(ref) is before
    repo.clear()
    assert repo.get(ref).words == {"zebra"}


def test_repository_reload_without_cache(simple_dic: Path) -> None:
    repo = DictionaryRepository()
    ref = DictionaryRef(bundled=False, filename=str(simple_dic))
    repo.get(ref)
    simple_dic.write_text("zebra\n", encoding="utf-8")
    reloaded = repo.get(ref, use_cache=False)
    assert reloaded.words == {"zebra"}
    assert repo.get(ref) is reloaded


def test_default_repository_is_shared() -> None:
    assert get_default_repository() is get_default_repository()
