"""Stop when every gradient component is small in magnitude."""

from __future__ import annotations

import math
from typing import Any, Optional

from ..config import DEFAULT_MIN_GRADIENT_ABS_VAL
from ..logging import get_logger
from .core import (
    DiagnosticEmitter,
    DiagnosticSink,
    format_diagnostic,
    iteration_cap_exceeded,
    validate_max_iterations,
    validate_tolerance,
)
from .utils import gradient_max_abs

logger = get_logger(__name__)


class GradientMaxAbsStopStrategy:
    """
    Stop once ``max_i |grad_i|`` drops below ``min_gradient_abs_val``.

    Same shape as GradientNormStopStrategy but measured in the infinity
    norm, which does not grow with the problem dimension. The derivative
    must have at least one component.

    Example
    -------
    >>> strategy = GradientMaxAbsStopStrategy(1e-4)
    >>> strategy.should_continue(None, 0.0, [0.00001, -0.5, 0.2])
    True
    >>> strategy.current_gradient_max_abs_val()
    0.5
    """

    def __init__(
        self,
        min_gradient_abs_val: float = DEFAULT_MIN_GRADIENT_ABS_VAL,
        max_iterations: Optional[int] = None,
        *,
        verbose: bool = False,
        sink: Optional[DiagnosticSink] = None,
    ) -> None:
        self._min_gradient_abs_val = validate_tolerance(
            "min_gradient_abs_val", min_gradient_abs_val
        )
        self._max_iterations = validate_max_iterations(max_iterations)
        self._verbose = bool(verbose)
        self._emitter = DiagnosticEmitter(__name__, sink)
        self._cur_iter = 0
        self._current_max_abs = math.nan
        logger.debug(
            "Created gradient max-abs stop strategy (min_gradient_abs_val=%g, max_iterations=%d)",
            self._min_gradient_abs_val,
            self._max_iterations,
        )

    @property
    def min_gradient_abs_val(self) -> float:
        return self._min_gradient_abs_val

    @property
    def max_iterations(self) -> int:
        """Iteration cap, 0 when uncapped."""
        return self._max_iterations

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def last_metric(self) -> float:
        return self._current_max_abs

    def be_verbose(self) -> "GradientMaxAbsStopStrategy":
        """Enable diagnostics and return ``self`` for chaining."""
        self._verbose = True
        return self

    def should_continue(self, point: Any, objective_value: float, derivative: Any) -> bool:
        """Return False once every component is below tolerance or the cap is hit."""
        del point
        max_abs: Optional[float] = None
        if self._emitter.active(self._verbose):
            max_abs = gradient_max_abs(derivative)
            self._emitter.emit(
                format_diagnostic(self._cur_iter, float(objective_value), max_abs_gradient=max_abs)
            )

        self._cur_iter += 1
        if iteration_cap_exceeded(self._cur_iter, self._max_iterations):
            return False

        if max_abs is None:
            max_abs = gradient_max_abs(derivative)
        self._current_max_abs = max_abs
        return not self._current_max_abs < self._min_gradient_abs_val

    def current_gradient_max_abs_val(self) -> float:
        """Largest absolute gradient component seen by the last measuring call."""
        return self._current_max_abs

    def current_iteration(self) -> int:
        return self._cur_iter

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(min_gradient_abs_val={self._min_gradient_abs_val!r}, "
            f"max_iterations={self._max_iterations or None!r})"
        )


__all__ = ["GradientMaxAbsStopStrategy"]
