"""Unit tests for the in-memory property substrate."""

from __future__ import annotations

import pytest

from core.errors import PropDBSubstrateError
from core.types import Vector3
from substrate.memory_source import MemoryEntity, MemoryWorld


def test_set_property_none_deletes_entry() -> None:
    """Writing None should remove the key."""
    world = MemoryWorld()
    world.set_property("k", 1)

    world.set_property("k")

    assert world.get_property("k") is None
    assert world.property_ids() == []


def test_set_property_accepts_native_values() -> None:
    """Numbers, booleans, vectors, and text should be stored."""
    entity = MemoryEntity("3")

    entity.set_property("n", 1.5)
    entity.set_property("b", False)
    entity.set_property("v", Vector3(x=1, y=2, z=3))
    entity.set_property("s", "text")

    assert entity.property_ids() == ["n", "b", "v", "s"]
    assert entity.get_property("b") is False


def test_set_property_rejects_long_text() -> None:
    """Text above the length limit should be refused."""
    world = MemoryWorld(max_value_length=4)

    with pytest.raises(PropDBSubstrateError):
        world.set_property("k", "12345")

    assert world.property_ids() == []


def test_set_property_rejects_unsupported_types() -> None:
    """Composite values must be encoded before reaching the substrate."""
    world = MemoryWorld()

    with pytest.raises(PropDBSubstrateError):
        world.set_property("k", [1, 2])  # type: ignore[arg-type]

    assert world.get_property("k") is None


def test_property_ids_counts_enumerations() -> None:
    """Enumerations should be observable for cache assertions."""
    world = MemoryWorld()

    world.property_ids()
    world.property_ids()

    assert world.enumeration_count == 2
