"""Pytest configuration and shared fixtures for optstop tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Reset of the global verbose switch between tests
"""

import os

import numpy as np
import pytest
import torch

from optstop.config import set_verbose_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG, seeded from TEST_RNG_SEED (default: 0)."""
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG, seeded from TEST_RNG_SEED."""
    generator = torch.Generator(device="cpu")
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Set global numpy and torch seeds so every test is reproducible."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture(scope="function", autouse=True)
def quiet_strategies():
    """Make sure no test leaks global verbose mode into the next one."""
    set_verbose_enabled(False)
    yield
    set_verbose_enabled(False)
