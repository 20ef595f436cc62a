"""Unit tests for loguru sink setup."""

import io
import sys

import pytest
from loguru import logger

from versa.utils.logger import setup_logger


@pytest.fixture
def restore_sinks():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_setup_logger_writes_file_and_console(tmp_path, restore_sinks):
    """Test the file gets debug records while the console stream only gets info."""
    console = io.StringIO()

    log_file = setup_logger("intake", tmp_path / "logs", {"Source": "data"}, console=console)
    logger.debug("debug detail")
    logger.info("info line")
    logger.remove()

    assert log_file == tmp_path / "logs" / "intake.log"
    file_text = log_file.read_text(encoding="utf-8")
    assert "debug detail" in file_text
    assert "Source: data" in file_text
    assert "info line" in console.getvalue()
    assert "debug detail" not in console.getvalue()
