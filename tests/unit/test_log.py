"""Unit tests for logging helpers."""

import io
import logging

import pytest

from awsmodels.log import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def package_logger():
    """Restore the package logger after a test configures it."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


class TestGetLogger:
    def test_names_are_nested_under_package(self):
        assert get_logger("tests.helper").name == "awsmodels.tests.helper"
        assert get_logger("awsmodels.client").name == "awsmodels.client"
        assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


class TestConfigureLogging:
    """Test handler installation."""

    def test_messages_reach_stream(self, package_logger):
        stream = io.StringIO()
        package_logger.handlers[:] = []

        configure_logging("DEBUG", fmt="%(levelname)s %(name)s %(message)s", stream=stream)
        get_logger("awsmodels.client").debug("sent %d bytes", 12)

        assert stream.getvalue() == "DEBUG awsmodels.client sent 12 bytes\n"

    def test_repeated_calls_reuse_handler(self, package_logger):
        package_logger.handlers[:] = []

        configure_logging("INFO", stream=io.StringIO())
        configure_logging("ERROR", stream=io.StringIO())

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self, package_logger):
        package_logger.handlers[:] = []

        configure_logging("chatty", stream=io.StringIO())

        assert package_logger.level == logging.INFO
