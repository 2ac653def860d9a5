import numpy as np
import pytest
import torch

from optstop.stop.utils import as_vector, gradient_max_abs, gradient_norm


def test_as_vector_flattens_to_float64():
    vec = as_vector([[1, 2], [3, 4]])
    assert vec.dtype == np.float64
    assert vec.shape == (4,)


def test_as_vector_accepts_scalar():
    assert as_vector(2.5).shape == (1,)


def test_as_vector_detaches_torch_tensor():
    t = torch.tensor([1.0, -2.0], requires_grad=True)
    vec = as_vector(t * 2)
    assert isinstance(vec, np.ndarray)
    assert np.allclose(vec, [2.0, -4.0])


def test_gradient_norm_exact():
    assert gradient_norm([3, 4]) == 5.0
    assert gradient_norm(np.zeros(5)) == 0.0


def test_gradient_norm_matches_numpy(rng):
    grad = rng.normal(size=50)
    assert gradient_norm(grad) == pytest.approx(np.sqrt(np.sum(grad**2)))


def test_gradient_max_abs_picks_largest_magnitude():
    assert gradient_max_abs([0.1, -3.0, 2.0]) == 3.0
    assert isinstance(gradient_max_abs(np.array([1.0])), float)


def test_gradient_max_abs_empty_raises():
    with pytest.raises(ValueError):
        gradient_max_abs([])


def test_nan_gradient_propagates():
    assert np.isnan(gradient_norm([np.nan, 1.0]))
    assert np.isnan(gradient_max_abs([np.nan, 1.0]))
