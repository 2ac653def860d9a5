"""Stop when successive objective values stop changing."""

from __future__ import annotations

import math
from typing import Any, Optional

from ..config import DEFAULT_MIN_DELTA
from ..logging import get_logger
from .core import (
    DiagnosticEmitter,
    DiagnosticSink,
    format_diagnostic,
    iteration_cap_exceeded,
    validate_max_iterations,
    validate_tolerance,
)

logger = get_logger(__name__)


class ObjectiveDeltaStopStrategy:
    """
    Stop once ``|f_k - f_{k-1}|`` drops below ``min_delta``.

    The first call only records the objective value and always continues,
    since there is nothing to compare against yet. From the second call on,
    the search stops when the iteration cap is exceeded or when the change
    in objective value is smaller than ``min_delta``.

    Parameters
    ----------
    min_delta:
        Smallest change in objective value still counted as progress. Zero
        disables the criterion so that only the cap can stop the search.
    max_iterations:
        Optional hard cap on the number of calls. ``None`` means uncapped.
    verbose:
        Emit one diagnostic line per call. Equivalent to ``be_verbose()``.
    sink:
        Callable receiving diagnostic lines. Defaults to this module's logger
        at INFO level.

    Example
    -------
    >>> strategy = ObjectiveDeltaStopStrategy(min_delta=0.01)
    >>> strategy.should_continue(None, 10.0, None)
    True
    >>> strategy.should_continue(None, 9.9999, None)
    False
    """

    def __init__(
        self,
        min_delta: float = DEFAULT_MIN_DELTA,
        max_iterations: Optional[int] = None,
        *,
        verbose: bool = False,
        sink: Optional[DiagnosticSink] = None,
    ) -> None:
        self._min_delta = validate_tolerance("min_delta", min_delta)
        self._max_iterations = validate_max_iterations(max_iterations)
        self._verbose = bool(verbose)
        self._emitter = DiagnosticEmitter(__name__, sink)
        self._cur_iter = 0
        self._previous_objective: Optional[float] = None
        self._last_delta = math.nan
        logger.debug(
            "Created objective delta stop strategy (min_delta=%g, max_iterations=%d)",
            self._min_delta,
            self._max_iterations,
        )

    @property
    def min_delta(self) -> float:
        return self._min_delta

    @property
    def max_iterations(self) -> int:
        """Iteration cap, 0 when uncapped."""
        return self._max_iterations

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def previous_objective(self) -> Optional[float]:
        """Objective value from the last continuing call, None before the first."""
        return self._previous_objective

    @property
    def last_metric(self) -> float:
        return self._last_delta

    def be_verbose(self) -> "ObjectiveDeltaStopStrategy":
        """Enable diagnostics and return ``self`` for chaining."""
        self._verbose = True
        return self

    def should_continue(self, point: Any, objective_value: float, derivative: Any) -> bool:
        """Return False once the objective has converged or the cap is hit.

        ``point`` and ``derivative`` are ignored.
        """
        del point, derivative
        objective_value = float(objective_value)
        if self._emitter.active(self._verbose):
            self._emitter.emit(format_diagnostic(self._cur_iter, objective_value))

        self._cur_iter += 1
        if self._previous_objective is not None:
            if iteration_cap_exceeded(self._cur_iter, self._max_iterations):
                return False

            self._last_delta = objective_value - self._previous_objective
            if abs(self._last_delta) < self._min_delta:
                return False

        self._previous_objective = objective_value
        return True

    def current_change_in_function_value(self) -> float:
        """Signed change computed by the last non-bootstrap call."""
        return self._last_delta

    def current_iteration(self) -> int:
        return self._cur_iter

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(min_delta={self._min_delta!r}, "
            f"max_iterations={self._max_iterations or None!r})"
        )


__all__ = ["ObjectiveDeltaStopStrategy"]
