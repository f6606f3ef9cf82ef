"""Tests for logging setup."""

import logging

import pytest

from petitionkit.utils.logger import LOG_FORMAT, get_logger, setup_logging


@pytest.fixture
def bare_root():
    """Give a test a root logger without handlers and restore it afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_adds_stdout_handler(self, bare_root) -> None:
        setup_logging("DEBUG")
        assert len(bare_root.handlers) == 1
        assert bare_root.handlers[0].formatter._fmt == LOG_FORMAT
        assert bare_root.level == logging.DEBUG

    def test_level_name_is_case_insensitive(self, bare_root) -> None:
        setup_logging("warning")
        assert bare_root.level == logging.WARNING

    def test_existing_handlers_left_alone(self, bare_root) -> None:
        setup_logging("INFO")
        setup_logging("ERROR")
        assert len(bare_root.handlers) == 1
        assert bare_root.level == logging.INFO

    @pytest.mark.parametrize("level", ["VERBOSE", "basic_format"])
    def test_unknown_level_falls_back_to_info(self, bare_root, level) -> None:
        setup_logging(level)
        assert bare_root.level == logging.INFO


class TestGetLogger:
    def test_module_logger_is_under_package(self) -> None:
        logger = get_logger("petitionkit.rendering.generator")
        assert logger.name == "petitionkit.rendering.generator"
        assert logger.parent.name in {"petitionkit.rendering", "petitionkit", "root"}

    def test_same_name_same_logger(self) -> None:
        assert get_logger("petitionkit.cli") is get_logger("petitionkit.cli")
