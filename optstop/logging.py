"""Logging helpers for optstop.

Every module logs through ``get_logger(__name__)`` so that the whole package
sits under one ``optstop`` namespace and can be tuned from a single place.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_ROOT_NAME = "optstop"

_format = _DEFAULT_FORMAT
_stream: Optional[TextIO] = None

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _qualified_name(name: Optional[str]) -> str:
    if name is None or name == _ROOT_NAME:
        return _ROOT_NAME
    if name.startswith(_ROOT_NAME + "."):
        return name
    return f"{_ROOT_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for ``name`` inside the optstop namespace.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            package are prefixed with ``optstop.``.

    Returns:
        A logger writing ``[LEVEL] name: message`` lines to stderr.

    Example:
        >>> from optstop.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("bootstrap call recorded")
    """
    logger_name = _qualified_name(name)
    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_format))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every optstop logger, including ones created later.

    Args:
        level: A ``logging`` constant or a level name such as ``"INFO"``.
    """
    global _DEFAULT_LEVEL
    level = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of all optstop loggers.

    Typically called once at application startup, e.g. with ``level="INFO"``
    to see the per-iteration lines of verbose stop strategies.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL, _format, _stream
    level = _resolve_level(level)
    _format = format_string or _DEFAULT_FORMAT
    _stream = stream
    if stream is None:
        stream = sys.stderr
    formatter = logging.Formatter(_format)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level


__all__ = ["configure_logging", "get_logger", "set_log_level"]
