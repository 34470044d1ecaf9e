"""Tests for niceaxes logging helpers."""

from __future__ import annotations

import logging
import sys

import pytest

import niceaxes
from niceaxes.utils.logging import (
    LOG_LEVEL_ENV,
    ROOT_LOGGER_NAME,
    configure_logging,
    debug_logging,
    get_logger,
)


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    for h in saved_handlers:
        logger.addHandler(h)
    logger.setLevel(saved_level)


def test_package_logger_has_null_handler() -> None:
    """Importing niceaxes installs a NullHandler on the package logger."""
    assert niceaxes.__version__
    handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger_names() -> None:
    """get_logger() defaults to the package logger and accepts module names."""
    assert get_logger().name == ROOT_LOGGER_NAME
    assert get_logger("niceaxes.axis.ticks").name == "niceaxes.axis.ticks"
    assert get_logger("ticks").name == "niceaxes.ticks"


def test_configure_logging_adds_single_stderr_handler(clean_logger) -> None:
    """Repeated configure_logging() calls do not stack stderr handlers."""
    first = configure_logging(level="INFO", force=True)
    second = configure_logging(level="DEBUG")
    assert second is first
    assert first.level == logging.DEBUG
    stderr_handlers = [
        h for h in clean_logger.handlers
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]
    assert len(stderr_handlers) == 1
    assert clean_logger.level == logging.DEBUG


def test_configure_logging_reads_env(clean_logger, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit level the environment variable is used."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    configure_logging(force=True)
    assert clean_logger.level == logging.WARNING


def test_debug_messages_from_library_code(clean_logger, caplog: pytest.LogCaptureFixture) -> None:
    """Tick generation logs its chosen step at DEBUG."""
    from niceaxes.axis import compute_ticks

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        compute_ticks(0.0, 10.0)
    assert any("linear ticks" in r.getMessage() for r in caplog.records)


def test_debug_logging_restores_state(clean_logger) -> None:
    """debug_logging() adds a temporary handler and restores the level."""
    clean_logger.setLevel(logging.WARNING)
    before = clean_logger.handlers[:]
    with debug_logging() as handler:
        assert handler in clean_logger.handlers
        assert clean_logger.level == logging.DEBUG
    assert clean_logger.handlers == before
    assert clean_logger.level == logging.WARNING
