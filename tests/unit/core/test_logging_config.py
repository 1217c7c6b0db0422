"""Unit tests for structured logging configuration."""

from __future__ import annotations

from structlog.testing import capture_logs

from core.logging_config import get_logger


def test_get_logger_filters_debug_events() -> None:
    """Debug events should be dropped while info events are emitted."""
    logger = get_logger("tests.logging_config")

    with capture_logs() as captured:
        logger.debug("dropped", key="a")
        logger.info("kept", key="b")

    assert [entry["event"] for entry in captured] == ["kept"]
