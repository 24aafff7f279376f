"""Tests for logging setup and parse statistics."""

import logging
from unittest.mock import Mock

import pytest

from vectorpath.utils import ParseLogger, ParseStats, configure_logging


@pytest.fixture
def restore_root_handlers():
    """Put the root logger's handlers back after a test."""
    root = logging.getLogger()
    saved = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in saved:
            root.removeHandler(handler)
            handler.close()


class TestParseStats:
    """Tests for ParseStats."""

    def test_duration(self):
        """Test duration needs both timestamps."""
        stats = ParseStats()
        assert stats.duration_seconds == 0.0
        stats.start_time = 10.0
        assert stats.duration_seconds == 0.0
        stats.end_time = 12.5
        assert stats.duration_seconds == 2.5

    def test_path_count(self):
        """Test every outcome counts as a seen path."""
        stats = ParseStats(processed_count=3, skipped_count=1, error_count=2)
        assert stats.path_count == 6


class TestParseLogger:
    """Tests for ParseLogger."""

    def test_counts(self):
        """Test events update the statistics."""
        bound = Mock()
        parse_logger = ParseLogger(bound)

        parse_logger.log_path_start("a")
        parse_logger.log_path_complete("a", primitive_count=4, duration_ms=1.234)
        parse_logger.log_path_complete("b", primitive_count=2, duration_ms=0.5)
        parse_logger.log_path_skipped("c", "empty path data")
        parse_logger.log_path_error("d", ValueError("bad"), traceback="tb")

        stats = parse_logger.stats
        assert stats.processed_count == 2
        assert stats.primitive_count == 6
        assert stats.skipped_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("d", "bad")]

        bound.info.assert_any_call("Path parsed", path="a", primitives=4, duration_ms=1.23)
        bound.error.assert_called_once()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_writes_log_file(self, tmp_path, restore_root_handlers):
        """Test the log file is created."""
        log_file = tmp_path / "run.log"
        configure_logging(log_file=log_file, quiet=True)
        logging.getLogger("vectorpath.test").warning("hello")
        assert log_file.exists()

    def test_does_not_stack_handlers(self, tmp_path, restore_root_handlers):
        """Test repeated setup replaces its own handlers."""
        root = logging.getLogger()
        configure_logging(log_file=tmp_path / "one.log")
        count = len(root.handlers)
        configure_logging(log_file=tmp_path / "two.log")
        assert len(root.handlers) == count

    def test_quiet_drops_console(self, tmp_path, restore_root_handlers):
        """Test quiet mode removes the console handler."""
        root = logging.getLogger()
        configure_logging(log_file=tmp_path / "one.log")
        (console,) = [h for h in root.handlers if h.get_name() == "vectorpath-console"]
        console.close = Mock(wraps=console.close)

        configure_logging(log_file=tmp_path / "two.log", quiet=True)

        assert console not in root.handlers
        console.close.assert_called_once()

    def test_unknown_level(self, tmp_path, restore_root_handlers):
        """Test an invalid level name."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(log_file=tmp_path / "run.log", console_level="LOUD")
