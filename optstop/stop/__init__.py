"""Stop strategies deciding when an iterative optimizer is done.

Example
-------
>>> import numpy as np
>>> from optstop.stop import GradientNormStopStrategy
>>> def grad(x):
...     return 2 * x
>>> x = np.array([1.0, -2.0])
>>> stop = GradientNormStopStrategy(min_norm=1e-8, max_iterations=1000)
>>> while stop.should_continue(x, float(x @ x), grad(x)):
...     x = x - 0.25 * grad(x)
>>> stop.current_gradient_norm() < 1e-8
True
"""

from .core import (
    ConfigurationError,
    DiagnosticSink,
    StopStrategy,
    iteration_cap_exceeded,
    validate_max_iterations,
    validate_tolerance,
)
from .gradient_max_abs import GradientMaxAbsStopStrategy
from .gradient_norm import GradientNormStopStrategy
from .objective_delta import ObjectiveDeltaStopStrategy
from .utils import as_vector, gradient_max_abs, gradient_norm

__all__ = [
    "ConfigurationError",
    "DiagnosticSink",
    "GradientMaxAbsStopStrategy",
    "GradientNormStopStrategy",
    "ObjectiveDeltaStopStrategy",
    "StopStrategy",
    "as_vector",
    "gradient_max_abs",
    "gradient_norm",
    "iteration_cap_exceeded",
    "validate_max_iterations",
    "validate_tolerance",
]
