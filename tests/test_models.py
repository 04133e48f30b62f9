import dataclasses

import pytest

from cache_directives import Cachability, CacheDirectives


def test_defaults():
    directives = CacheDirectives()

    assert directives.cachability is None
    assert directives.max_age is None
    assert directives.s_max_age is None
    assert directives.max_stale is None
    assert directives.min_fresh is None
    assert directives.stale_while_revalidate is None
    assert directives.stale_if_error is None
    assert directives.must_revalidate is False
    assert directives.proxy_revalidate is False
    assert directives.immutable is False
    assert directives.no_store is False
    assert directives.no_transform is False


def test_frozen():
    directives = CacheDirectives(max_age=10)

    with pytest.raises(dataclasses.FrozenInstanceError):
        directives.max_age = 20  # type: ignore[misc]


def test_hashable():
    assert {CacheDirectives(no_store=True), CacheDirectives(no_store=True)} == {CacheDirectives(no_store=True)}


def test_cachability_values():
    assert Cachability("no-cache") is Cachability.NO_CACHE
    assert [member.value for member in Cachability] == ["public", "private", "no-cache", "only-if-cached"]
