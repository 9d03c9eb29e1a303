"""Tests for the split-stream logging setup."""

from __future__ import annotations

import logging

import pytest

from runtime_validation import ValidatorConfig
from runtime_validation.utils.logging_utils import LOGGER_NAME, configure_split_stream_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_levels_are_split_between_streams(capsys) -> None:
    configure_split_stream_logging(level=logging.INFO)
    logger = logging.getLogger(f"{LOGGER_NAME}.validator.engine")

    logger.debug("hidden")
    logger.info("progress")
    logger.warning("careful")

    captured = capsys.readouterr()
    assert "hidden" not in captured.out + captured.err
    assert "runtime_validation.validator.engine - INFO - progress" in captured.out
    assert "careful" not in captured.out
    assert "runtime_validation.validator.engine - WARNING - careful" in captured.err


def test_root_logger_is_left_alone() -> None:
    root = logging.getLogger()
    before = list(root.handlers)

    configure_split_stream_logging()

    assert root.handlers == before
    assert logging.getLogger(LOGGER_NAME).propagate is False


def test_reconfiguring_replaces_own_handlers_only() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    foreign = logging.NullHandler()
    logger.addHandler(foreign)

    configure_split_stream_logging()
    configure_split_stream_logging()

    assert foreign in logger.handlers
    assert len(logger.handlers) == 3


def test_config_set_logging_returns_package_logger() -> None:
    logger = ValidatorConfig(log_level="DEBUG").set_logging()

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
