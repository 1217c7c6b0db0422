"""Runtime configuration model for propdb.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_GLOBAL_PREFIX,
    GLOBAL_PREFIX_ENV,
    MAX_CHUNK_LENGTH_ENV,
    MAX_PROPERTY_LENGTH,
)
from core.errors import PropDBConfigError


@dataclass(frozen=True)
class PropDBConfig:
    """Validated runtime configuration.

    Attributes:
        max_chunk_length: Maximum characters written to one physical entry.
        global_prefix: Key prefix used by the distinguished global scope.
    """

    max_chunk_length: int = MAX_PROPERTY_LENGTH
    global_prefix: str = DEFAULT_GLOBAL_PREFIX

    @classmethod
    def from_env(cls) -> "PropDBConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PropDBConfigError: If environment values are invalid.
        """
        chunk_length_value = os.getenv(MAX_CHUNK_LENGTH_ENV, str(MAX_PROPERTY_LENGTH))
        global_prefix = os.getenv(GLOBAL_PREFIX_ENV, DEFAULT_GLOBAL_PREFIX)
        if not global_prefix:
            raise PropDBConfigError(
                f"Invalid {GLOBAL_PREFIX_ENV} value: expected a non-empty string. "
                f"Unset it to use the default '{DEFAULT_GLOBAL_PREFIX}'."
            )
        return cls(
            max_chunk_length=_parse_max_chunk_length(chunk_length_value),
            global_prefix=global_prefix,
        )


def _parse_max_chunk_length(raw_value: str) -> int:
    """Parse the chunk length environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed chunk length within substrate limits.

    Raises:
        PropDBConfigError: If value is not an integer in range.
    """
    try:
        chunk_length = int(raw_value)
    except ValueError as error:
        raise PropDBConfigError(
            f"Invalid {MAX_CHUNK_LENGTH_ENV} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {MAX_CHUNK_LENGTH_ENV} to a numeric value."
        ) from error
    if not 1 <= chunk_length <= MAX_PROPERTY_LENGTH:
        raise PropDBConfigError(
            f"Invalid {MAX_CHUNK_LENGTH_ENV} value: {chunk_length} is outside "
            f"1..{MAX_PROPERTY_LENGTH}. The substrate rejects longer values."
        )
    return chunk_length
