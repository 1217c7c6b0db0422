"""Chunked value codec.

This module maps logical values onto ordered physical chunk contents.
Numbers, booleans, and vector records stay native; everything else is
JSON text split into substrate-sized fragments.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from core.constants import MAX_PROPERTY_LENGTH, VECTOR_FIELDS
from core.errors import PropDBCapacityError, PropDBDecodeError, PropDBEncodeError
from core.types import EncodedChunk, RawPropertyValue, ValueShape, Vector3


def classify_value(value: Any) -> ValueShape:
    """Select the storage representation for a value.

    Predicates run in a fixed order and the first match wins.

    Args:
        value: Logical value to store.

    Returns:
        Storage shape for the value.
    """
    if isinstance(value, (bool, int, float)):
        return ValueShape.NATIVE_SCALAR
    if isinstance(value, Vector3) or _is_vector_mapping(value):
        return ValueShape.NATIVE_VECTOR
    return ValueShape.JSON_TEXT


def encode_value(
    value: Any,
    max_chunk_length: int = MAX_PROPERTY_LENGTH,
) -> list[EncodedChunk]:
    """Encode a logical value into ordered chunks.

    Args:
        value: Logical value to store.
        max_chunk_length: Maximum characters per text chunk.

    Returns:
        Chunks ordered by index, starting at 0.

    Raises:
        PropDBEncodeError: If the value is not JSON serializable.
        PropDBCapacityError: If a chunk exceeds the length limit.
    """
    shape = classify_value(value)
    if shape is ValueShape.NATIVE_SCALAR:
        return [EncodedChunk(index=0, content=value)]
    if shape is ValueShape.NATIVE_VECTOR:
        return [EncodedChunk(index=0, content=_to_vector(value))]
    try:
        data = json.dumps(value)
    except (TypeError, ValueError) as error:
        raise PropDBEncodeError(
            f"Cannot serialize value of type {type(value).__name__}: {error}. "
            "Store JSON-compatible values only."
        ) from error
    chunks = [
        EncodedChunk(index=index, content=data[offset : offset + max_chunk_length])
        for index, offset in enumerate(range(0, len(data), max_chunk_length))
    ]
    for chunk in chunks:
        _check_capacity(chunk, max_chunk_length)
    return chunks


def decode_chunks(contents: Sequence[RawPropertyValue]) -> Any:
    """Reconstruct a logical value from index-ordered chunk contents.

    An empty sequence decodes to None; callers check presence first
    when None is a meaningful stored value.

    Args:
        contents: Raw chunk contents in index order.

    Returns:
        Decoded logical value.

    Raises:
        PropDBDecodeError: If the chunks do not form valid JSON text.
    """
    if not contents:
        return None
    if len(contents) == 1 and not isinstance(contents[0], str):
        return contents[0]
    for position, content in enumerate(contents):
        if not isinstance(content, str):
            raise PropDBDecodeError(
                f"Chunk {position} holds a native {type(content).__name__} inside a "
                f"{len(contents)}-chunk text group. Delete and rewrite the key."
            )
    text = "".join(contents)  # type: ignore[arg-type]
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise PropDBDecodeError(
            f"Stored chunks do not form valid JSON: {error.msg} at position {error.pos}. "
            "The chunk group is corrupted; delete and rewrite the key."
        ) from error


def _is_vector_mapping(value: Any) -> bool:
    if not isinstance(value, Mapping) or len(value) != len(VECTOR_FIELDS):
        return False
    return all(
        field in value
        and isinstance(value[field], (int, float))
        and not isinstance(value[field], bool)
        for field in VECTOR_FIELDS
    )


def _to_vector(value: Vector3 | Mapping[str, float]) -> Vector3:
    if isinstance(value, Vector3):
        return value
    return Vector3(x=value["x"], y=value["y"], z=value["z"])


def _check_capacity(chunk: EncodedChunk, max_chunk_length: int) -> None:
    """Guard the splitting invariant.

    Args:
        chunk: Encoded text chunk.
        max_chunk_length: Maximum characters per chunk.

    Raises:
        PropDBCapacityError: If the chunk is too long.
    """
    content = chunk.content
    if isinstance(content, str) and len(content) > max_chunk_length:
        raise PropDBCapacityError(
            f"Chunk {chunk.index} has {len(content)} characters, "
            f"exceeding the {max_chunk_length} character limit."
        )
