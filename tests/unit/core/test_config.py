"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import PropDBConfig
from core.errors import PropDBConfigError


def test_from_env_uses_substrate_limit_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to the full substrate value length."""
    monkeypatch.delenv("PROPDB_MAX_CHUNK_LENGTH", raising=False)

    config = PropDBConfig.from_env()

    assert config.max_chunk_length == 32767


def test_from_env_reads_global_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the global prefix from environment."""
    monkeypatch.setenv("PROPDB_GLOBAL_PREFIX", "GLOBAL_db_")

    config = PropDBConfig.from_env()

    assert config.global_prefix == "GLOBAL_db_"


def test_from_env_raises_for_invalid_chunk_length(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric chunk length."""
    monkeypatch.setenv("PROPDB_MAX_CHUNK_LENGTH", "not-a-number")

    with pytest.raises(PropDBConfigError):
        PropDBConfig.from_env()

    assert os.getenv("PROPDB_MAX_CHUNK_LENGTH") == "not-a-number"


def test_from_env_rejects_chunk_length_above_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should refuse chunks longer than the substrate accepts."""
    monkeypatch.setenv("PROPDB_MAX_CHUNK_LENGTH", "32768")

    with pytest.raises(PropDBConfigError, match="outside"):
        PropDBConfig.from_env()


def test_from_env_rejects_empty_global_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should refuse an empty global prefix."""
    monkeypatch.setenv("PROPDB_GLOBAL_PREFIX", "")

    with pytest.raises(PropDBConfigError):
        PropDBConfig.from_env()
