"""Package-wide configuration for optstop.

Holds the default convergence tolerances and the global verbose switch.
The defaults suit problems with objective and gradient values of order one;
rescale them for badly scaled problems rather than relying on them blindly.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

DEFAULT_MIN_DELTA = 1e-7
DEFAULT_MIN_NORM = 1e-7
DEFAULT_MIN_GRADIENT_ABS_VAL = 1e-4

_VERBOSE_ENV_VAR = "OPTSTOP_VERBOSE"
_verbose_enabled: bool = os.getenv(_VERBOSE_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_verbose_enabled() -> bool:
    """
    Return whether global verbose mode is on.

    When on, every stop strategy emits its per-iteration diagnostic line,
    whether or not ``be_verbose()`` was called on it. Global verbose mode can
    be toggled via set_verbose_enabled(...) or the OPTSTOP_VERBOSE
    environment variable.
    """
    return _verbose_enabled


def set_verbose_enabled(enabled: bool) -> None:
    """
    Globally enable or disable verbose mode.

    Parameters
    ----------
    enabled:
        Whether stop strategies should emit diagnostics.
    """
    global _verbose_enabled
    _verbose_enabled = bool(enabled)


@contextmanager
def verbose_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch global verbose mode.

    Example
    -------
    >>> from optstop import GradientNormStopStrategy
    >>> strategy = GradientNormStopStrategy(1e-6, sink=print)
    >>> with verbose_context(True):
    ...     strategy.should_continue(None, 1.0, [3.0, 4.0])
    iteration: 0   objective: 1   gradient norm: 5
    True
    """
    global _verbose_enabled
    prev = _verbose_enabled
    _verbose_enabled = bool(enabled)
    try:
        yield
    finally:
        _verbose_enabled = prev


__all__ = [
    "DEFAULT_MIN_DELTA",
    "DEFAULT_MIN_GRADIENT_ABS_VAL",
    "DEFAULT_MIN_NORM",
    "is_verbose_enabled",
    "set_verbose_enabled",
    "verbose_context",
]
