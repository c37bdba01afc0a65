"""
Tests for logging configuration module.
"""

import logging
from io import StringIO

import pytest

from rimsdb.core.logging_config import setup_logging, get_logger
from rimsdb.io.document import decode_document


def test_setup_logging_default():
    """Test setting up logging with default parameters."""
    stream = StringIO()
    setup_logging(level="INFO", stream=stream)

    get_logger("test").info("Test message")

    output = stream.getvalue()
    assert "Test message" in output
    assert "rimsdb.test - INFO" in output


def test_setup_logging_level_filters():
    """Test that messages below the level are dropped."""
    stream = StringIO()
    setup_logging(level="WARNING", stream=stream)

    logger = get_logger("test")
    logger.info("hidden")
    logger.warning("shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output


def test_setup_logging_custom_format():
    """Test setting up logging with custom format."""
    stream = StringIO()
    setup_logging(level="DEBUG", format_string="%(levelname)s - %(message)s", stream=stream)

    get_logger("test").debug("Debug message")

    assert "DEBUG - Debug message" in stream.getvalue()


def test_get_logger():
    """Test getting a logger instance."""
    logger = get_logger("io.document")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "rimsdb.io.document"
    assert get_logger("io.document.child").parent is logger


def test_skipped_entries_are_logged(caplog):
    """Test that tolerated import problems leave a warning."""
    data = {
        "scheme": {"element": "Fe", "lasers": "Dye", "unit": "nm"},
        "references": [{"authors": "Nobody"}],
        "saturation_curves": [{"data": {"x": [1], "y": [1]}}],
    }
    with caplog.at_level(logging.WARNING, logger="rimsdb"):
        decode_document(data)

    messages = [record.getMessage() for record in caplog.records]
    assert any("Skipping reference without id" in m for m in messages)
    assert any("Skipping saturation curve without title" in m for m in messages)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
