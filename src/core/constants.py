"""Core constants used across propdb modules.

This module centralizes substrate limits and key naming rules.
Keeping values here avoids magic literals in store logic.
"""

from __future__ import annotations

MAX_PROPERTY_LENGTH = 2**15 - 1
DEFAULT_GLOBAL_PREFIX = "WORLD_db_"
SCOPE_PREFIX_SUFFIX = "_db_"
CHUNK_INDEX_SEPARATOR = "_"
VECTOR_FIELDS = ("x", "y", "z")
MAX_CHUNK_LENGTH_ENV = "PROPDB_MAX_CHUNK_LENGTH"
GLOBAL_PREFIX_ENV = "PROPDB_GLOBAL_PREFIX"
