"""Shared fixtures for operator tests."""

from datetime import date

import numpy as np
import polars as pl
import pytest


@pytest.fixture
def matrix() -> np.ndarray:
    """2x3 integer matrix with descending values."""
    return np.array([[6, 5, 4], [3, 2, 1]])


@pytest.fixture
def matrix_with_nans() -> np.ndarray:
    """2x3 float matrix with two NaN entries."""
    return np.array([[6.0, 5.0, np.nan], [3.0, np.nan, 1.0]])


@pytest.fixture
def random_values() -> np.ndarray:
    """Random 3D float array with ties and NaNs."""
    rng = np.random.default_rng(seed=7)
    values = rng.integers(0, 12, size=(4, 5, 6)).astype(np.float64)
    values[rng.random(values.shape) < 0.1] = np.nan
    return values


@pytest.fixture
def wide_df() -> pl.DataFrame:
    """Create sample wide DataFrame."""
    return pl.DataFrame({
        "Date": pl.date_range(date(2024, 1, 1), date(2024, 1, 4), eager=True),
        "AAPL": [100.0, 102.0, None, 103.0],
        "MSFT": [200.0, 102.0, 201.0, float("nan")],
        "GOOGL": [150.0, 90.0, 151.0, float("inf")],
        "TSLA": [50.0, 102.0, 10.0, 1.0],
    })
