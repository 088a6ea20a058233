"""Pytest configuration and shared fixtures for dsprim tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Random test sequences built from those generators
"""

import os

import numpy as np
import pytest
import torch


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests.

    Returns:
        A seeded torch.Generator instance.
    """
    generator = torch.Generator(device="cpu")
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def real_signal(rng: np.random.Generator) -> np.ndarray:
    """A 64-sample real test sequence."""
    return rng.standard_normal(64)


@pytest.fixture
def complex_signal(rng: np.random.Generator) -> np.ndarray:
    """A 32-sample complex test sequence."""
    return rng.standard_normal(32) + 1j * rng.standard_normal(32)
