"""Core interfaces shared by the stop strategies."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from ..config import is_verbose_enabled
from ..logging import get_logger

S = TypeVar("S", bound="StopStrategy")


class ConfigurationError(ValueError):
    """Raised when a stop strategy is constructed with invalid settings."""


class DiagnosticSink(Protocol):
    """Destination for the one-line diagnostics of verbose strategies."""

    def __call__(self, message: str) -> None:
        ...


@runtime_checkable
class StopStrategy(Protocol):
    """
    Protocol for optimizer stop strategies.

    A stop strategy is driven once per optimizer iteration with the current
    point, objective value and derivative, and answers whether another
    iteration should be performed. Implementations keep their own counters,
    so an instance belongs to exactly one optimization run.
    """

    def should_continue(self, point: Any, objective_value: float, derivative: Any) -> bool:
        """
        Decide whether the optimizer should take another step.

        Parameters
        ----------
        point:
            Current iterate. Accepted for interface uniformity.
        objective_value:
            Objective value at ``point``. Must be finite.
        derivative:
            Gradient at ``point``, anything ``as_vector`` accepts.

        Returns
        -------
        bool
            True to keep iterating, False to stop.
        """
        ...

    def be_verbose(self: S) -> S:
        """Turn on per-iteration diagnostics and return the same instance."""
        ...

    def current_iteration(self) -> int:
        """Return the number of completed ``should_continue`` calls."""
        ...

    @property
    def last_metric(self) -> float:
        """Most recently computed criterion value, NaN if none yet."""
        ...


def validate_tolerance(name: str, value: float) -> float:
    """Return ``value`` as a float, rejecting negative and NaN tolerances."""
    try:
        tol = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a real number, got {value!r}.") from exc
    if math.isnan(tol) or tol < 0:
        raise ConfigurationError(f"{name} can't be negative or NaN, got {value!r}.")
    return tol


def validate_max_iterations(value: Optional[int]) -> int:
    """
    Normalise an iteration cap.

    ``None`` means uncapped and maps to the sentinel 0. An explicitly
    supplied cap must be a positive integer.
    """
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"max_iterations must be an integer, got {value!r}.")
    if value <= 0:
        raise ConfigurationError(f"max_iterations can't be 0 or negative, got {value!r}.")
    return int(value)


def iteration_cap_exceeded(current_iteration: int, max_iterations: int) -> bool:
    """Return True if an enabled cap (non-zero) has been passed."""
    return max_iterations != 0 and current_iteration > max_iterations


class DiagnosticEmitter:
    """Routes diagnostic lines to an injected sink or a module logger."""

    def __init__(self, module: str, sink: Optional[DiagnosticSink]) -> None:
        self._sink = sink
        self._logger = get_logger(module)

    def active(self, verbose: bool) -> bool:
        return verbose or is_verbose_enabled()

    def emit(self, message: str) -> None:
        if self._sink is not None:
            self._sink(message)
            return
        # verbose lines bypass the default WARNING level
        if not self._logger.isEnabledFor(logging.INFO):
            self._logger.setLevel(logging.INFO)
        for handler in self._logger.handlers:
            if handler.level > logging.INFO:
                handler.setLevel(logging.INFO)
        self._logger.info(message)


def format_diagnostic(iteration: int, objective_value: float, **metrics: float) -> str:
    """Build ``iteration: 3   objective: 0.5   gradient norm: 0.01``-style lines."""
    parts = [f"iteration: {iteration}", f"objective: {objective_value:g}"]
    parts.extend(f"{label.replace('_', ' ')}: {value:g}" for label, value in metrics.items())
    return "   ".join(parts)


__all__ = [
    "ConfigurationError",
    "DiagnosticEmitter",
    "DiagnosticSink",
    "StopStrategy",
    "format_diagnostic",
    "iteration_cap_exceeded",
    "validate_max_iterations",
    "validate_tolerance",
]
