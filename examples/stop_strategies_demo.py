"""
Example: Stopping gradient descent with optstop

Runs plain gradient descent on the Rosenbrock function three times, once per
stop strategy, and prints why and when each run ended. The descent loop lives
here, in the caller; the strategies only decide whether to keep going.
"""

import numpy as np

from optstop import (
    GradientMaxAbsStopStrategy,
    GradientNormStopStrategy,
    ObjectiveDeltaStopStrategy,
)


def rosenbrock(x):
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def rosenbrock_grad(x):
    return np.array(
        [
            -2 * (1 - x[0]) - 400 * x[0] * (x[1] - x[0] ** 2),
            200 * (x[1] - x[0] ** 2),
        ]
    )


def descend(strategy, x0, lr=1e-3):
    x = np.asarray(x0, dtype=float).copy()
    while strategy.should_continue(x, rosenbrock(x), rosenbrock_grad(x)):
        x = x - lr * rosenbrock_grad(x)
    return x


def main():
    x0 = np.array([0.0, 0.0])
    runs = [
        ("objective delta", ObjectiveDeltaStopStrategy(1e-10, 20_000),
         lambda s: s.current_change_in_function_value()),
        ("gradient norm", GradientNormStopStrategy(1e-4, 20_000),
         lambda s: s.current_gradient_norm()),
        ("max abs gradient", GradientMaxAbsStopStrategy(1e-4, 20_000),
         lambda s: s.current_gradient_max_abs_val()),
    ]
    for label, strategy, metric in runs:
        print("=" * 60)
        print(f"Stop strategy: {label}")
        print("=" * 60)
        x = descend(strategy, x0)
        capped = strategy.current_iteration() > strategy.max_iterations
        print(f"Final point: {x}")
        print(f"Objective: {rosenbrock(x):.3e}")
        print(f"Iterations: {strategy.current_iteration()}")
        print(f"Last criterion value: {metric(strategy):.3e}")
        print(f"Stopped by: {'iteration cap' if capped else 'convergence'}")
        print()

    # Verbose strategies print one line per call; here only the first few.
    print("Verbose trace of the first iterations:")
    traced = GradientNormStopStrategy(1e-4, 5, sink=print).be_verbose()
    descend(traced, x0)


if __name__ == "__main__":
    main()
