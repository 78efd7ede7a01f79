"""ndrank - ranking, discretization and finite-value operators for numpy arrays."""

from ndrank.config import Settings, get_settings, reset_settings
from ndrank.exceptions import (
    AxisOutOfRangeError,
    ConfigurationError,
    InvalidBucketCountError,
    NdRankError,
    NotWriteableError,
    ShapeMismatchError,
    UnknownRankMethodError,
    ValidationError,
)
from ndrank.operators import (
    count_finite,
    count_finite_axis,
    count_finite_rows,
    count_non_finite,
    count_non_finite_axis,
    count_non_finite_rows,
    discretize,
    discretize_axis,
    discretize_rows,
    fill_non_finite,
    fill_non_finite_frame,
    fill_non_finite_inplace,
    maximum_with,
    maximum_with_inplace,
    minimum_with,
    minimum_with_inplace,
    rank,
    rank_axis,
    rank_rows,
)
from ndrank.profiler import profile
from ndrank.types import RankMethod
from ndrank.utils.logger import setup_logger

__version__ = "0.1.0"

__all__ = [
    "RankMethod",
    # Operators
    "count_finite",
    "count_non_finite",
    "count_finite_axis",
    "count_non_finite_axis",
    "fill_non_finite_inplace",
    "fill_non_finite",
    "maximum_with",
    "minimum_with",
    "maximum_with_inplace",
    "minimum_with_inplace",
    "rank",
    "rank_axis",
    "discretize",
    "discretize_axis",
    "rank_rows",
    "discretize_rows",
    "count_finite_rows",
    "count_non_finite_rows",
    "fill_non_finite_frame",
    # Infrastructure
    "profile",
    "Settings",
    "get_settings",
    "reset_settings",
    "setup_logger",
    # Exceptions
    "NdRankError",
    "ValidationError",
    "ShapeMismatchError",
    "AxisOutOfRangeError",
    "InvalidBucketCountError",
    "UnknownRankMethodError",
    "NotWriteableError",
    "ConfigurationError",
]
