"""Vector helpers for reducing derivatives to scalar criteria.

Derivatives may arrive as NumPy arrays, plain Python sequences or PyTorch
tensors (for example ``param.grad`` inside a torch training loop). They are
flattened to 1D float64 arrays before any reduction. Finiteness is not
checked here; a NaN gradient simply yields a NaN metric.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import torch

Array = np.ndarray


def as_vector(derivative: Any) -> Array:
    """Return ``derivative`` as a flat float64 NumPy array."""
    if isinstance(derivative, torch.Tensor):
        derivative = derivative.detach().to(device="cpu", dtype=torch.float64).numpy()
    return np.asarray(derivative, dtype=np.float64).reshape(-1)


def gradient_norm(derivative: Any) -> float:
    """Euclidean (L2) norm of the derivative."""
    return float(np.linalg.norm(as_vector(derivative)))


def gradient_max_abs(derivative: Any) -> float:
    """
    Largest absolute component of the derivative (the infinity norm).

    An empty derivative has no defined maximum; NumPy raises ``ValueError``
    and the error is left to propagate to the caller.
    """
    return float(np.max(np.abs(as_vector(derivative))))


__all__ = ["Array", "as_vector", "gradient_max_abs", "gradient_norm"]
