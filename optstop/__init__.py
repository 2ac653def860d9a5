"""optstop - convergence and stop policies for iterative numerical optimizers."""

__version__ = "0.1.0"

# Configuration
from .config import (
    DEFAULT_MIN_DELTA,
    DEFAULT_MIN_GRADIENT_ABS_VAL,
    DEFAULT_MIN_NORM,
    is_verbose_enabled,
    set_verbose_enabled,
    verbose_context,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Stop strategies
from .stop import (
    ConfigurationError,
    DiagnosticSink,
    GradientMaxAbsStopStrategy,
    GradientNormStopStrategy,
    ObjectiveDeltaStopStrategy,
    StopStrategy,
    as_vector,
    gradient_max_abs,
    gradient_norm,
)

__all__ = [
    "__version__",
    "DEFAULT_MIN_DELTA",
    "DEFAULT_MIN_GRADIENT_ABS_VAL",
    "DEFAULT_MIN_NORM",
    "ConfigurationError",
    "DiagnosticSink",
    "GradientMaxAbsStopStrategy",
    "GradientNormStopStrategy",
    "ObjectiveDeltaStopStrategy",
    "StopStrategy",
    "as_vector",
    "configure_logging",
    "get_logger",
    "gradient_max_abs",
    "gradient_norm",
    "is_verbose_enabled",
    "set_log_level",
    "set_verbose_enabled",
    "verbose_context",
]
