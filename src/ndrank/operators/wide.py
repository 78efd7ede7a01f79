"""Cross-sectional operators for wide tables.

All operators work row-wise across symbols at each date:
- First column (date) is unchanged
- Operations applied across symbol columns within each row

Nulls are read as NaN, so they rank as 0 and count as non-finite.
"""

import numpy as np
import polars as pl

from ndrank.operators.finite import count_finite_axis, count_non_finite_axis, fill_non_finite
from ndrank.operators.ranking import discretize_axis, rank_axis
from ndrank.types import RankMethod


def _get_value_cols(df: pl.DataFrame) -> list[str]:
    """Get value columns (all except first which is date)."""
    return df.columns[1:]


def _extract_values(df: pl.DataFrame, keep_integers: bool = False) -> np.ndarray:
    """Value columns as a (rows × symbols) array.

    Float64 by default. With ``keep_integers``, all-integer columns without
    nulls keep their numpy dtype so values above 2**53 stay distinct.
    """
    value_cols = _get_value_cols(df)
    if not value_cols:
        return np.empty((df.height, 0), dtype=np.float64)
    values = df.select(value_cols).to_numpy()
    if keep_integers and values.dtype.kind in "iub":
        return values
    return values.astype(np.float64)


def _rebuild_dataframe(result: np.ndarray, x: pl.DataFrame, dtype: pl.DataType) -> pl.DataFrame:
    """Rebuild DataFrame from numpy result array."""
    date_col = x.columns[0]
    return pl.DataFrame([
        x[date_col],
        *[pl.Series(col, result[:, j], dtype=dtype) for j, col in enumerate(_get_value_cols(x))],
    ])


def _counts_frame(counts: np.ndarray, x: pl.DataFrame) -> pl.DataFrame:
    date_col = x.columns[0]
    return pl.DataFrame([x[date_col], pl.Series("count", counts, dtype=pl.UInt64)])


def rank_rows(x: pl.DataFrame, method: RankMethod | str = RankMethod.MINIMUM) -> pl.DataFrame:
    """Cross-sectional integer rank within each row (date).

    Args:
        x: Wide DataFrame with date + symbol columns
        method: Tie-breaking method (default: minimum)

    Returns:
        Wide DataFrame with UInt64 ranks starting at 1; 0 for NaN/null

    Examples:
        >>> # X = (4,3,6,10,2) => rank_rows(x) = (3,2,4,5,1)
    """
    result = rank_axis(_extract_values(x, keep_integers=True), 0, method)
    return _rebuild_dataframe(result, x, pl.UInt64)


def discretize_rows(
    x: pl.DataFrame,
    buckets: int,
    method: RankMethod | str = RankMethod.MINIMUM,
) -> pl.DataFrame:
    """Cross-sectional equal-count buckets within each row (date).

    Args:
        x: Wide DataFrame with date + symbol columns
        buckets: Number of buckets per row (>= 1)
        method: Tie-breaking method for the underlying ranks (default: minimum)

    Returns:
        Wide DataFrame with UInt64 bucket ids in [1, buckets]; 0 for NaN/null

    Examples:
        >>> # Quintiles of close prices per date
        >>> discretize_rows(close, buckets=5)
    """
    result = discretize_axis(_extract_values(x, keep_integers=True), 0, method, buckets)
    return _rebuild_dataframe(result, x, pl.UInt64)


def count_finite_rows(x: pl.DataFrame) -> pl.DataFrame:
    """Number of finite symbol values per row.

    Returns:
        DataFrame with the date column and a UInt64 ``count`` column
    """
    return _counts_frame(count_finite_axis(_extract_values(x), 0), x)


def count_non_finite_rows(x: pl.DataFrame) -> pl.DataFrame:
    """Number of NaN / null / infinite symbol values per row.

    Returns:
        DataFrame with the date column and a UInt64 ``count`` column
    """
    return _counts_frame(count_non_finite_axis(_extract_values(x), 0), x)


def fill_non_finite_frame(x: pl.DataFrame, replacement: float) -> pl.DataFrame:
    """Replace NaN, null and infinite symbol values with ``replacement``.

    Returns:
        Wide DataFrame with Float64 value columns
    """
    result = fill_non_finite(_extract_values(x), replacement)
    return _rebuild_dataframe(result, x, pl.Float64)
