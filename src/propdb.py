"""Public SDK surface for propdb.

This module provides a stable import path for store users.
It re-exports the store entry points and typed models.
"""

from __future__ import annotations

from core.config import PropDBConfig
from core.errors import (
    PropDBCapacityError,
    PropDBConfigError,
    PropDBDecodeError,
    PropDBEncodeError,
    PropDBError,
    PropDBKeyError,
    PropDBNamespaceError,
    PropDBSubstrateError,
)
from core.types import Vector3
from store.namespace import StoreRegistry, get_or_create_store, release_store
from store.property_store import PropertyStore
from substrate.memory_source import MemoryEntity, MemoryWorld

__all__ = [
    "MemoryEntity",
    "MemoryWorld",
    "PropDBCapacityError",
    "PropDBConfig",
    "PropDBConfigError",
    "PropDBDecodeError",
    "PropDBEncodeError",
    "PropDBError",
    "PropDBKeyError",
    "PropDBNamespaceError",
    "PropDBSubstrateError",
    "PropertyStore",
    "StoreRegistry",
    "Vector3",
    "get_or_create_store",
    "release_store",
]
