"""Map-like store over a flat property substrate.

This module composes the chunk codec and key index cache into the
get/set/delete/clear/has/size and iteration surface. Every mutation
invalidates the key index so the next read sees the substrate.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from core.config import PropDBConfig
from core.errors import PropDBDecodeError, PropDBKeyError
from core.logging_config import get_logger
from store.chunk_codec import decode_chunks, encode_value
from store.key_index import (
    KeyIndexCache,
    filter_by_logical_key,
    physical_key,
    split_physical_key,
)
from substrate.property_source import PropertySource

_LOGGER = get_logger(__name__)


class PropertyStore:
    """Logical key/value store bound to one scope prefix.

    Instances are normally obtained through ``get_or_create_store`` so
    every call site for one scope shares a single key index cache.
    """

    def __init__(self, source: PropertySource, prefix: str, config: PropDBConfig) -> None:
        """Initialize a store for one scope.

        Args:
            source: Property substrate holding the physical entries.
            prefix: Scope prefix for every physical key.
            config: Runtime configuration.
        """
        self._source = source
        self._prefix = prefix
        self._config = config
        self._key_index = KeyIndexCache(source, prefix)

    @property
    def prefix(self) -> str:
        """Scope prefix shared by every physical key of this store."""
        return self._prefix

    @property
    def key_index(self) -> KeyIndexCache:
        """Key index cache owned by this store."""
        return self._key_index

    def get(self, key: str, default: Any = None) -> Any:
        """Read a logical value.

        Args:
            key: Logical key.
            default: Value returned when the key is absent.

        Returns:
            Decoded value, or ``default`` when absent. Values stored as
            an x/y/z mapping come back as ``Vector3`` records, since the
            substrate holds them natively.

        Raises:
            PropDBDecodeError: If the stored chunks are corrupted.
        """
        chunk_keys = self._chunk_keys(key)
        if not chunk_keys:
            return default
        contents = [self._source.get_property(chunk_key) for chunk_key in chunk_keys]
        try:
            return decode_chunks(contents)  # type: ignore[arg-type]
        except PropDBDecodeError:
            _LOGGER.error(
                "chunk_decode_failed",
                prefix=self._prefix,
                key=key,
                chunk_count=len(chunk_keys),
            )
            raise

    def set(self, key: str, value: Any) -> "PropertyStore":
        """Write a logical value, replacing any previous chunk group.

        Args:
            key: Logical key.
            value: JSON-compatible value, number, boolean, or vector.

        Returns:
            This store, for chaining.
        """
        chunks = encode_value(value, self._config.max_chunk_length)
        stale_keys = self._chunk_keys(key)
        try:
            for chunk_key in stale_keys:
                self._source.set_property(chunk_key)
            for chunk in chunks:
                self._source.set_property(
                    physical_key(self._prefix, key, chunk.index), chunk.content
                )
        finally:
            self._key_index.invalidate()
        _LOGGER.debug("property_set", prefix=self._prefix, key=key, chunk_count=len(chunks))
        return self

    def delete(self, key: str) -> bool:
        """Delete a logical key.

        Args:
            key: Logical key.

        Returns:
            True when entries were removed, False when the key was absent.
        """
        chunk_keys = self._chunk_keys(key)
        if not chunk_keys:
            return False
        try:
            for chunk_key in chunk_keys:
                self._source.set_property(chunk_key)
        finally:
            self._key_index.invalidate()
        _LOGGER.debug("property_deleted", prefix=self._prefix, key=key, chunk_count=len(chunk_keys))
        return True

    def clear(self) -> None:
        """Delete every physical entry under this scope."""
        physical_keys = list(self._key_index.ensure_fresh())
        try:
            for chunk_key in physical_keys:
                self._source.set_property(chunk_key)
        finally:
            self._key_index.invalidate()
        _LOGGER.info("store_cleared", prefix=self._prefix, removed_count=len(physical_keys))

    def has(self, key: str) -> bool:
        """Return whether any physical entry exists for a key."""
        return bool(self._chunk_keys(key))

    @property
    def size(self) -> int:
        """Number of distinct logical keys in this scope."""
        return sum(1 for _ in self._logical_keys())

    def keys(self) -> Iterator[str]:
        """Yield logical keys without decoding values."""
        yield from self._logical_keys()

    def values(self) -> Iterator[Any]:
        """Yield decoded values in key order."""
        for _, value in self.entries():
            yield value

    def entries(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs from one fresh key index pass."""
        for key in self._logical_keys():
            yield key, self.get(key)

    def for_each(self, callback: Callable[[Any, str, "PropertyStore"], object]) -> None:
        """Call ``callback(value, key, store)`` for every entry.

        Args:
            callback: Function invoked once per logical key.
        """
        for key, value in self.entries():
            callback(value, key, self)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return self.entries()

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(prefix={self._prefix!r})"

    def _chunk_keys(self, key: str) -> list[str]:
        """Return the chunk keys of one logical key in index order.

        Args:
            key: Logical key.

        Returns:
            Physical keys sorted by chunk index.

        Raises:
            PropDBKeyError: If the key is not a string.
        """
        if not isinstance(key, str):
            raise PropDBKeyError(
                f"Logical keys must be strings, got {type(key).__name__}. "
                "Convert the key with str() before storing."
            )
        matches = filter_by_logical_key(self._key_index.ensure_fresh(), self._prefix, key)
        return sorted(matches, key=_chunk_index)

    def _logical_keys(self) -> Iterator[str]:
        """Yield distinct logical keys in first-seen enumeration order."""
        seen: set[str] = set()
        for chunk_key in self._key_index.ensure_fresh():
            parts = split_physical_key(chunk_key)
            if parts is None:
                continue
            logical_key = parts[0][len(self._prefix) :]
            if logical_key in seen:
                continue
            seen.add(logical_key)
            yield logical_key


def _chunk_index(chunk_key: str) -> int:
    parts = split_physical_key(chunk_key)
    return parts[1] if parts else 0
