"""In-memory property substrate.

This module provides dict-backed world and entity scopes that enforce
the same value types and length limit as a host property substrate.
"""

from __future__ import annotations

from core.constants import MAX_PROPERTY_LENGTH
from core.errors import PropDBSubstrateError
from core.types import RawPropertyValue, Vector3


class MemoryPropertySource:
    """Insertion-ordered property storage kept in a dict.

    The base class has no scope identity; use ``MemoryWorld`` or
    ``MemoryEntity`` as scope handles.
    """

    def __init__(self, max_value_length: int = MAX_PROPERTY_LENGTH) -> None:
        self._values: dict[str, RawPropertyValue] = {}
        self._max_value_length = max_value_length
        self.enumeration_count = 0

    def property_ids(self) -> list[str]:
        """Return every stored key in insertion order.

        Returns:
            Snapshot list of physical keys.
        """
        self.enumeration_count += 1
        return list(self._values)

    def get_property(self, key: str) -> RawPropertyValue | None:
        """Return the stored value for a key.

        Args:
            key: Physical key.

        Returns:
            Stored value, or None when absent.
        """
        return self._values.get(key)

    def set_property(self, key: str, value: RawPropertyValue | None = None) -> None:
        """Store or delete a value.

        Args:
            key: Physical key.
            value: Value to store; None deletes the key.

        Raises:
            PropDBSubstrateError: If the value type or length is unsupported.
        """
        if value is None:
            self._values.pop(key, None)
            return
        _validate_value(key, value, self._max_value_length)
        self._values[key] = value

    def __len__(self) -> int:
        return len(self._values)


class MemoryWorld(MemoryPropertySource):
    """Global scope backed by its own in-memory storage."""

    scope_id = "world"
    is_global = True


class MemoryEntity(MemoryPropertySource):
    """Per-entity scope identified by a host entity id."""

    is_global = False

    def __init__(self, entity_id: str, max_value_length: int = MAX_PROPERTY_LENGTH) -> None:
        super().__init__(max_value_length)
        self.scope_id = entity_id


def _validate_value(key: str, value: object, max_value_length: int) -> None:
    """Reject values a host property substrate cannot hold.

    Args:
        key: Physical key being written.
        value: Candidate value.
        max_value_length: Maximum text length.

    Raises:
        PropDBSubstrateError: If the value is unsupported.
    """
    if isinstance(value, (bool, int, float, Vector3)):
        return
    if not isinstance(value, str):
        raise PropDBSubstrateError(
            f"Unsupported property value for '{key}': {type(value).__name__}. "
            "Store numbers, booleans, Vector3 records, or text."
        )
    if len(value) > max_value_length:
        raise PropDBSubstrateError(
            f"Property '{key}' value has {len(value)} characters, "
            f"exceeding the {max_value_length} character limit."
        )
