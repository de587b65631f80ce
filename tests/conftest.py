"""
pytest configuration and shared fixtures.
"""

import json
from pathlib import Path

import pytest
import numpy as np

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def quadratic_data():
    """Noise-free samples of y = 1 + x + x² at x = 0..4."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    y = np.array([1.0, 3.0, 7.0, 13.0, 21.0])
    return x, y


@pytest.fixture
def noisy_cubic_data(rng):
    """Cubic signal with small Gaussian noise on [-1, 1]."""
    n = 60
    x = np.linspace(-1.0, 1.0, n)
    beta_true = np.array([0.5, -1.0, 2.0, 1.5])
    y = np.vander(x, 4, increasing=True) @ beta_true + rng.standard_normal(n) * 0.05
    return x, y, beta_true


@pytest.fixture(scope="session")
def demo_observations():
    """
    The demo dataset shipped with the original degree-selection tool.

    Rows are stored as [y, x]; returns (x, y).
    """
    with open(FIXTURES_DIR / "degree_selection_demo.json") as f:
        rows = np.array(json.load(f)["rows"], dtype=np.float64)
    return rows[:, 1].copy(), rows[:, 0].copy()
