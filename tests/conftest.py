"""Pytest configuration and fixtures for dirichlet-sampler tests."""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a fixed-seed generator for reproducible tests."""
    return np.random.default_rng(42)
