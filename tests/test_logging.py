"""Tests for logging helpers."""

import io
import logging

import pytest
from file_normalize import Normalizer
from file_normalize.config import NormalizeConfig
from file_normalize.logging import (
    PACKAGE_LOGGER,
    get_logger,
    setup_logging,
    setup_logging_from_config,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_single_handler(self, package_logger):
        setup_logging(level="DEBUG")
        setup_logging(level="INFO")

        ours = [h for h in package_logger.handlers if getattr(h, "_file_normalize", False)]
        assert len(ours) == 1
        assert package_logger.level == logging.INFO

    def test_root_logger_untouched(self, package_logger):
        root_handlers = list(logging.getLogger().handlers)
        setup_logging()
        assert logging.getLogger().handlers == root_handlers

    def test_debug_records_from_normalizer(self, package_logger):
        stream = io.StringIO()
        setup_logging(level="DEBUG", format="simple", stream=stream)

        Normalizer(eol="\n")

        output = stream.getvalue()
        assert "DEBUG" in output
        assert "file_normalize.normalizer" in output
        assert "Normalizer created" in output

    def test_warning_level_hides_debug(self, package_logger):
        stream = io.StringIO()
        setup_logging(level="WARNING", stream=stream)

        Normalizer(eol="\n")

        assert stream.getvalue() == ""

    def test_detailed_format(self, package_logger):
        stream = io.StringIO()
        setup_logging(level="INFO", format="detailed", stream=stream)

        get_logger("file_normalize.test").info("hello")

        assert "file_normalize.test:test_detailed_format:" in stream.getvalue()

    def test_from_config(self, package_logger):
        handler = setup_logging_from_config(NormalizeConfig(logging={"level": "error"}))

        assert package_logger.level == logging.ERROR
        assert handler in package_logger.handlers
