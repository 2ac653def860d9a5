"""Stop when the Euclidean norm of the gradient is small."""

from __future__ import annotations

import math
from typing import Any, Optional

from ..config import DEFAULT_MIN_NORM
from ..logging import get_logger
from .core import (
    DiagnosticEmitter,
    DiagnosticSink,
    format_diagnostic,
    iteration_cap_exceeded,
    validate_max_iterations,
    validate_tolerance,
)
from .utils import gradient_norm

logger = get_logger(__name__)


class GradientNormStopStrategy:
    """
    Stop once ``||grad f(x)||_2`` drops below ``min_norm``.

    Unlike the objective delta criterion this one is meaningful from the
    very first call, so there is no bootstrap phase.

    Parameters
    ----------
    min_norm:
        Gradient norm below which the search is considered converged.
    max_iterations:
        Optional hard cap on the number of calls. ``None`` means uncapped.
    verbose:
        Emit one diagnostic line per call. Equivalent to ``be_verbose()``.
    sink:
        Callable receiving diagnostic lines. Defaults to this module's logger
        at INFO level.
    """

    def __init__(
        self,
        min_norm: float = DEFAULT_MIN_NORM,
        max_iterations: Optional[int] = None,
        *,
        verbose: bool = False,
        sink: Optional[DiagnosticSink] = None,
    ) -> None:
        self._min_norm = validate_tolerance("min_norm", min_norm)
        self._max_iterations = validate_max_iterations(max_iterations)
        self._verbose = bool(verbose)
        self._emitter = DiagnosticEmitter(__name__, sink)
        self._cur_iter = 0
        self._current_norm = math.nan
        logger.debug(
            "Created gradient norm stop strategy (min_norm=%g, max_iterations=%d)",
            self._min_norm,
            self._max_iterations,
        )

    @property
    def min_norm(self) -> float:
        return self._min_norm

    @property
    def max_iterations(self) -> int:
        """Iteration cap, 0 when uncapped."""
        return self._max_iterations

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def last_metric(self) -> float:
        return self._current_norm

    def be_verbose(self) -> "GradientNormStopStrategy":
        """Enable diagnostics and return ``self`` for chaining."""
        self._verbose = True
        return self

    def should_continue(self, point: Any, objective_value: float, derivative: Any) -> bool:
        """Return False once the gradient norm is below tolerance or the cap is hit."""
        del point
        norm: Optional[float] = None
        if self._emitter.active(self._verbose):
            norm = gradient_norm(derivative)
            self._emitter.emit(
                format_diagnostic(self._cur_iter, float(objective_value), gradient_norm=norm)
            )

        self._cur_iter += 1
        if iteration_cap_exceeded(self._cur_iter, self._max_iterations):
            return False

        if norm is None:
            norm = gradient_norm(derivative)
        self._current_norm = norm
        return not self._current_norm < self._min_norm

    def current_gradient_norm(self) -> float:
        """Euclidean gradient norm seen by the last measuring call."""
        return self._current_norm

    def current_iteration(self) -> int:
        return self._cur_iter

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(min_norm={self._min_norm!r}, "
            f"max_iterations={self._max_iterations or None!r})"
        )


__all__ = ["GradientNormStopStrategy"]
