"""Property substrate protocols.

These protocols describe the flat key/value substrate consumed by
the store and the scope handles that namespace it.
"""

from __future__ import annotations

from typing import Protocol

from core.types import RawPropertyValue


class PropertySource(Protocol):
    """Flat property storage with scalar, vector, and short text values."""

    def property_ids(self) -> list[str]:
        """Return every physical key currently stored."""
        ...

    def get_property(self, key: str) -> RawPropertyValue | None:
        """Return the raw value for a physical key, or None when absent."""
        ...

    def set_property(self, key: str, value: RawPropertyValue | None = None) -> None:
        """Write a raw value; writing None deletes the entry."""
        ...


class ScopeHandle(PropertySource, Protocol):
    """Property source that identifies one storage scope.

    Attributes:
        scope_id: Stable host identifier for non-global scopes.
        is_global: Whether this is the distinguished global scope.
    """

    scope_id: str
    is_global: bool
