"""Array operators.

Array operators take numpy arrays (or array-likes) of any shape. Wide-table
operators take polars DataFrames where:
- First column is the date/timestamp
- Remaining columns are symbol values
"""

from ndrank.profiler import profiled

# Import raw operators with underscore prefix
from ndrank.operators.finite import (
    count_finite as _count_finite,
    count_finite_axis as _count_finite_axis,
    count_non_finite as _count_non_finite,
    count_non_finite_axis as _count_non_finite_axis,
    fill_non_finite as _fill_non_finite,
    fill_non_finite_inplace as _fill_non_finite_inplace,
)
from ndrank.operators.pairwise import (
    maximum_with as _maximum_with,
    maximum_with_inplace as _maximum_with_inplace,
    minimum_with as _minimum_with,
    minimum_with_inplace as _minimum_with_inplace,
)
from ndrank.operators.ranking import (
    discretize as _discretize,
    discretize_axis as _discretize_axis,
    rank as _rank,
    rank_axis as _rank_axis,
)
from ndrank.operators.wide import (
    count_finite_rows as _count_finite_rows,
    count_non_finite_rows as _count_non_finite_rows,
    discretize_rows as _discretize_rows,
    fill_non_finite_frame as _fill_non_finite_frame,
    rank_rows as _rank_rows,
)

# Wrap all operators with profiler
# Finite values
count_finite = profiled(_count_finite)
count_finite_axis = profiled(_count_finite_axis)
count_non_finite = profiled(_count_non_finite)
count_non_finite_axis = profiled(_count_non_finite_axis)
fill_non_finite = profiled(_fill_non_finite)
fill_non_finite_inplace = profiled(_fill_non_finite_inplace)

# Pairwise
maximum_with = profiled(_maximum_with)
maximum_with_inplace = profiled(_maximum_with_inplace)
minimum_with = profiled(_minimum_with)
minimum_with_inplace = profiled(_minimum_with_inplace)

# Rank
discretize = profiled(_discretize)
discretize_axis = profiled(_discretize_axis)
rank = profiled(_rank)
rank_axis = profiled(_rank_axis)

# Wide tables
count_finite_rows = profiled(_count_finite_rows)
count_non_finite_rows = profiled(_count_non_finite_rows)
discretize_rows = profiled(_discretize_rows)
fill_non_finite_frame = profiled(_fill_non_finite_frame)
rank_rows = profiled(_rank_rows)

__all__ = [
    # Finite-value operators
    "count_finite",
    "count_non_finite",
    "count_finite_axis",
    "count_non_finite_axis",
    "fill_non_finite_inplace",
    "fill_non_finite",
    # Pairwise operators
    "maximum_with",
    "minimum_with",
    "maximum_with_inplace",
    "minimum_with_inplace",
    # Rank operators
    "rank",
    "rank_axis",
    "discretize",
    "discretize_axis",
    # Wide-table operators
    "rank_rows",
    "discretize_rows",
    "count_finite_rows",
    "count_non_finite_rows",
    "fill_non_finite_frame",
]
