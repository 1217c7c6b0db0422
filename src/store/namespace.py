"""Scope prefixes and the per-scope store registry.

This module derives the key prefix of a scope and guarantees one
store per scope handle, keyed on handle identity rather than on the
derived prefix string.
"""

from __future__ import annotations

from core.config import PropDBConfig
from core.constants import SCOPE_PREFIX_SUFFIX
from core.errors import PropDBNamespaceError
from core.logging_config import get_logger
from store.property_store import PropertyStore
from substrate.property_source import ScopeHandle

_LOGGER = get_logger(__name__)


def resolve_prefix(scope: ScopeHandle, config: PropDBConfig) -> str:
    """Return the physical key prefix of a scope.

    Args:
        scope: Scope handle.
        config: Runtime configuration.

    Returns:
        Global prefix for the global scope, else ``scope_id + "_db_"``.

    Raises:
        PropDBNamespaceError: If a non-global scope has an empty id.
    """
    if scope.is_global:
        return config.global_prefix
    if not scope.scope_id:
        raise PropDBNamespaceError(
            "Scope handle has an empty scope_id, which would share the bare "
            f"'{SCOPE_PREFIX_SUFFIX}' prefix. Give every non-global scope a stable id."
        )
    return f"{scope.scope_id}{SCOPE_PREFIX_SUFFIX}"


class StoreRegistry:
    """Identity-keyed registry holding one store per scope handle.

    Entries live until ``release`` is called, which hosts use when
    they are notified that a scope was destroyed.
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[ScopeHandle, PropertyStore]] = {}
        self._prefix_owners: dict[str, int] = {}

    def get_or_create(self, scope: ScopeHandle, config: PropDBConfig) -> PropertyStore:
        """Return the store for a scope, creating it on first use.

        Args:
            scope: Scope handle.
            config: Configuration used when a store is created.

        Returns:
            The single store bound to this scope handle.

        Raises:
            PropDBNamespaceError: If another live handle owns the same prefix.
        """
        entry = self._entries.get(id(scope))
        if entry is not None:
            return entry[1]
        prefix = resolve_prefix(scope, config)
        if prefix in self._prefix_owners:
            raise PropDBNamespaceError(
                f"Scope prefix '{prefix}' is already owned by another scope handle. "
                "Host scope ids must be unique; release the previous scope first."
            )
        store = PropertyStore(scope, prefix, config)
        self._entries[id(scope)] = (scope, store)
        self._prefix_owners[prefix] = id(scope)
        _LOGGER.info("store_created", prefix=prefix)
        return store

    def release(self, scope: ScopeHandle) -> bool:
        """Forget the store registered for a scope.

        Args:
            scope: Scope handle that is going away.

        Returns:
            True when a store was registered for the handle.
        """
        entry = self._entries.pop(id(scope), None)
        if entry is None:
            return False
        store = entry[1]
        del self._prefix_owners[store.prefix]
        _LOGGER.info("store_released", prefix=store.prefix)
        return True

    def __contains__(self, scope: object) -> bool:
        entry = self._entries.get(id(scope))
        return entry is not None and entry[0] is scope

    def __len__(self) -> int:
        return len(self._entries)


_DEFAULT_REGISTRY = StoreRegistry()


def get_or_create_store(
    scope: ScopeHandle,
    config: PropDBConfig | None = None,
) -> PropertyStore:
    """Return the process-wide store for a scope.

    Args:
        scope: Scope handle.
        config: Optional config; read from the environment when omitted.

    Returns:
        The single store bound to this scope handle.
    """
    return _DEFAULT_REGISTRY.get_or_create(scope, config or PropDBConfig.from_env())


def release_store(scope: ScopeHandle) -> bool:
    """Drop the process-wide store registered for a scope."""
    return _DEFAULT_REGISTRY.release(scope)
