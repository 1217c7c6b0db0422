"""propdb exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class PropDBError(Exception):
    """Base exception for all propdb failures."""


class PropDBConfigError(PropDBError):
    """Raised for invalid runtime configuration."""


class PropDBKeyError(PropDBError):
    """Raised when a logical key cannot be mapped onto physical keys."""


class PropDBEncodeError(PropDBError):
    """Raised when a value cannot be serialized for storage."""


class PropDBDecodeError(PropDBError):
    """Raised when a stored chunk group cannot be reconstructed."""


class PropDBCapacityError(PropDBError):
    """Raised when a chunk exceeds the substrate value length limit."""


class PropDBNamespaceError(PropDBError):
    """Raised when two scope handles resolve to the same key prefix."""


class PropDBSubstrateError(PropDBError):
    """Raised by property substrates for values they cannot hold."""
