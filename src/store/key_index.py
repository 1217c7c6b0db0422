"""Physical key naming and the per-scope key index cache.

This module builds and parses chunk keys of the form
``prefix + logical_key + "_" + index`` and caches the physical keys
of one scope between mutations.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.constants import CHUNK_INDEX_SEPARATOR
from core.logging_config import get_logger
from substrate.property_source import PropertySource

_LOGGER = get_logger(__name__)


def physical_key(prefix: str, logical_key: str, index: int) -> str:
    """Build the physical key for one chunk.

    Args:
        prefix: Scope prefix.
        logical_key: User-facing key.
        index: Zero-based chunk index.

    Returns:
        Physical key string.
    """
    return f"{prefix}{logical_key}{CHUNK_INDEX_SEPARATOR}{index}"


def split_physical_key(key: str) -> tuple[str, int] | None:
    """Split a physical key into its stem and chunk index.

    Args:
        key: Physical key string.

    Returns:
        Pair of stem and index, or None when the key has no
        canonical chunk index suffix.
    """
    stem, separator, suffix = key.rpartition(CHUNK_INDEX_SEPARATOR)
    if not separator or not _is_chunk_index(suffix):
        return None
    return stem, int(suffix)


def filter_by_logical_key(
    keys: Iterable[str],
    prefix: str,
    logical_key: str | None = None,
) -> list[str]:
    """Keep physical keys belonging to a scope or one of its logical keys.

    A logical key only matches its own chunk group: the text after
    ``prefix + logical_key + "_"`` must be a chunk index, so ``"a"``
    never matches chunks of ``"ab"`` or ``"a_b"``.

    Args:
        keys: Physical keys to filter.
        prefix: Scope prefix.
        logical_key: Optional logical key to narrow to.

    Returns:
        Matching keys in input order.
    """
    if logical_key is None:
        return [key for key in keys if key.startswith(prefix)]
    stem = f"{prefix}{logical_key}{CHUNK_INDEX_SEPARATOR}"
    return [
        key
        for key in keys
        if key.startswith(stem) and _is_chunk_index(key[len(stem) :])
    ]


class KeyIndexCache:
    """Last known physical key listing for one scope.

    The listing is built by one full substrate enumeration and is
    discarded, never patched, after every mutation.
    """

    def __init__(self, source: PropertySource, prefix: str) -> None:
        self._source = source
        self._prefix = prefix
        self._keys: list[str] | None = None

    @property
    def is_fresh(self) -> bool:
        """Whether a listing is currently held."""
        return self._keys is not None

    def ensure_fresh(self) -> list[str]:
        """Return the cached listing, rebuilding it when absent.

        Returns:
            Physical keys under the scope prefix, in enumeration order.
        """
        if self._keys is None:
            self._keys = filter_by_logical_key(self._source.property_ids(), self._prefix)
            _LOGGER.debug("key_index_rebuilt", prefix=self._prefix, key_count=len(self._keys))
        return self._keys

    def invalidate(self) -> None:
        """Drop the cached listing so the next read rebuilds it."""
        self._keys = None
        _LOGGER.debug("key_index_invalidated", prefix=self._prefix)


def _is_chunk_index(text: str) -> bool:
    if not text.isascii() or not text.isdigit():
        return False
    return text == "0" or not text.startswith("0")
