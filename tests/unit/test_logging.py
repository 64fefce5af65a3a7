"""Tests for logging setup."""

import sys

import pytest
from loguru import logger

from settings.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    def test_file_sink_under_log_dir(self, tmp_path):
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(level="warning", to_file=True, log_dir=log_dir)
        logger.debug("vote trace {}", 42)
        logger.remove()  # flushes the enqueued file sink

        files = list(log_dir.glob("roundest_*.log"))
        assert len(files) == 1
        assert "vote trace 42" in files[0].read_text()

    def test_console_only(self, tmp_path):
        setup_logging(level="INFO", to_file=False, log_dir=tmp_path / "logs")
        assert not (tmp_path / "logs").exists()
