"""Pytest helpers for the parallel_primer library."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def bs_params() -> dict:
    """The benchmark's canonical Black-Scholes scalars."""
    return {
        "spot": 42.0,
        "rate": 0.5,
        "sigma": 0.2,
        "tau": 0.5,
    }


@pytest.fixture
def make_strikes():
    """Factory fixture for strike vectors ``base + i/n``."""

    def _make(n: int, base: float = 40.0) -> np.ndarray:
        return base + np.arange(n, dtype=np.float64) / max(n, 1)

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng
