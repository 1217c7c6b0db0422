"""Shared typed models.

This module defines immutable data models used by the codec, store,
and substrate layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Vector3:
    """Native three-axis vector record held by the substrate.

    Attributes:
        x: First axis component.
        y: Second axis component.
        z: Third axis component.
    """

    x: float
    y: float
    z: float


RawPropertyValue = Union[bool, int, float, Vector3, str]


class ValueShape(Enum):
    """Storage representation chosen for a logical value."""

    NATIVE_SCALAR = "native_scalar"
    NATIVE_VECTOR = "native_vector"
    JSON_TEXT = "json_text"


@dataclass(frozen=True)
class EncodedChunk:
    """One physical entry produced by encoding a logical value.

    Attributes:
        index: Zero-based position within the chunk group.
        content: Raw value written to the substrate.
    """

    index: int
    content: RawPropertyValue
