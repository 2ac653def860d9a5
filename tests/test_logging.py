"""Tests for logging utilities."""

import logging
from io import StringIO

from optstop import (
    GradientMaxAbsStopStrategy,
    GradientNormStopStrategy,
    ObjectiveDeltaStopStrategy,
    verbose_context,
)
from optstop.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_namespaced_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "optstop.test_module"


def test_get_logger_keeps_package_names():
    logger = get_logger("optstop.stop.gradient_norm")
    assert logger.name == "optstop.stop.gradient_norm"
    assert get_logger(None).name == "optstop"


def test_get_logger_caching():
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_string():
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_redirects_stream():
    stream = StringIO()
    logger = get_logger("test_module")
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
        assert "[DEBUG] optstop.test_module: Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_applies_to_later_loggers():
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=stream, format_string="%(message)s")
        get_logger("created_after_configure").info("late message")
        assert stream.getvalue().strip() == "late message"
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_verbose_strategy_without_sink_logs_at_info():
    stream = StringIO()
    strategy = GradientNormStopStrategy(1e-6).be_verbose()
    try:
        configure_logging(level=logging.INFO, stream=stream)
        assert strategy.should_continue(None, 2.0, [3.0, 4.0])
    finally:
        configure_logging(level=logging.WARNING)
    output = stream.getvalue()
    assert "optstop.stop.gradient_norm" in output
    assert "iteration: 0   objective: 2   gradient norm: 5" in output


def test_verbose_strategy_heard_at_default_level():
    stream = StringIO()
    strategy = ObjectiveDeltaStopStrategy(0.01).be_verbose()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        strategy.should_continue(None, 10.0, None)
        strategy.should_continue(None, 9.5, None)
    finally:
        configure_logging(level=logging.WARNING)
    output = stream.getvalue()
    assert "iteration: 0   objective: 10" in output
    assert "iteration: 1   objective: 9.5" in output


def test_global_verbose_mode_heard_at_default_level():
    stream = StringIO()
    strategy = GradientMaxAbsStopStrategy(1e-4)
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        with verbose_context(True):
            strategy.should_continue(None, 1.0, [0.5])
    finally:
        configure_logging(level=logging.WARNING)
    assert "max abs gradient: 0.5" in stream.getvalue()


def test_quiet_strategy_leaves_logger_level_alone():
    stream = StringIO()
    strategy = GradientNormStopStrategy(1e-6)
    logger = get_logger("optstop.stop.gradient_norm")
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        strategy.should_continue(None, 2.0, [3.0, 4.0])
        assert not logger.isEnabledFor(logging.INFO)
    finally:
        configure_logging(level=logging.WARNING)
    assert stream.getvalue() == ""
