"""Integration tests for store behaviour through the public SDK."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest

from propdb import MemoryEntity, MemoryWorld, PropDBConfig, get_or_create_store, release_store


@pytest.fixture
def world() -> Iterator[MemoryWorld]:
    scope = MemoryWorld()
    yield scope
    release_store(scope)


def test_same_scope_returns_shared_store(world: MemoryWorld) -> None:
    """Two lookups for the global scope should share one store and cache."""
    store1 = get_or_create_store(world, PropDBConfig())
    store2 = get_or_create_store(world)
    assert list(store2.keys()) == []

    store1.set("score", 42)

    assert store1 is store2
    assert store2.get("score") == 42


def test_large_profile_is_split_into_two_chunks(world: MemoryWorld) -> None:
    """A 40000 character value should use two physical entries."""
    store = get_or_create_store(world, PropDBConfig())
    profile = {"name": "a", "tags": ["x", "y", "z"], "note": ""}
    overhead = len(json.dumps(profile))
    profile["note"] = "n" * (40000 - overhead)

    store.set("profile", profile)

    assert len(json.dumps(profile)) == 40000
    assert world.property_ids() == ["WORLD_db_profile_0", "WORLD_db_profile_1"]
    assert store.get("profile") == profile
    assert store.size == 1


def test_missing_key_operations_are_not_errors(world: MemoryWorld) -> None:
    """Absent keys should report False and leave size unchanged."""
    store = get_or_create_store(world, PropDBConfig())
    store.set("present", True)

    assert store.delete("missing") is False
    assert store.has("missing") is False
    assert store.size == 1


def test_clear_then_reuse_scope(world: MemoryWorld) -> None:
    """A cleared store should accept new values and forget old ones."""
    store = get_or_create_store(world, PropDBConfig())
    store.set("a", [1, 2, 3]).set("b", {"x": 1, "y": 2, "z": 3})

    store.clear()
    store.set("c", "fresh")

    assert list(store.entries()) == [("c", "fresh")]


def test_entity_and_world_stores_are_independent(world: MemoryWorld) -> None:
    """Entity scopes should not leak into the world scope."""
    entity = MemoryEntity("-8589934591")
    try:
        world_store = get_or_create_store(world, PropDBConfig())
        entity_store = get_or_create_store(entity, PropDBConfig())
        entity_store.set("hp", 20)
        world_store.set("hp", 100)

        assert entity_store.get("hp") == 20
        assert world_store.get("hp") == 100
    finally:
        release_store(entity)
