"""Performance benchmark fixtures for ndrank operators.

Data dimensions: 1000 rows x 2000 columns (about four years of daily data for
2000 stocks).
"""

from datetime import date, timedelta

import numpy as np
import polars as pl
import pytest


@pytest.fixture(scope="session")
def benchmark_values() -> np.ndarray:
    """Create production-scale numpy array for benchmarking.

    Data characteristics:
    - Random float values rounded to 2 decimals so ties occur
    - ~5% NaN values to simulate missing data

    Returns:
        (1000, 2000) float64 array
    """
    rng = np.random.default_rng(42)
    data = np.round(rng.standard_normal((1000, 2000)), 2)
    data[rng.random(data.shape) < 0.05] = np.nan
    return data


@pytest.fixture(scope="session")
def benchmark_df(benchmark_values: np.ndarray) -> pl.DataFrame:
    """Wide DataFrame with a date column followed by one column per symbol."""
    start_date = date(2020, 1, 1)
    dates = [start_date + timedelta(days=i) for i in range(benchmark_values.shape[0])]

    df_dict = {"timestamp": dates}
    for i in range(benchmark_values.shape[1]):
        df_dict[f"S{i:04d}"] = benchmark_values[:, i]

    return pl.DataFrame(df_dict)
