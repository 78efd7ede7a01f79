"""Rank and discretize operators for N-dimensional arrays.

Ranks are 1-based unsigned integers. Zero is reserved for elements that do
not order against the rest (NaN in float arrays, NaT in datetime arrays) and
propagates unchanged through ``discretize``.

Ties share a rank chosen by ``RankMethod``:
- MINIMUM: lowest rank of the tie-group
- MAXIMUM: highest rank of the tie-group
- AVERAGE: floor of the mean of the two

Examples:
    >>> rank([4, 2, 2, 1], RankMethod.MAXIMUM)
    array([4, 3, 3, 1], dtype=uint64)
    >>> discretize([[6, 5, 4], [3, 2, 1]], "minimum", 3)
    array([[3, 3, 2],
           [2, 1, 1]], dtype=uint64)
"""

import logging

import numpy as np

from ndrank.operators._axis import map_over_axis
from ndrank.operators._numba_kernels import bucket_cut_points, tie_group_ranks
from ndrank.operators._validation import as_array, check_buckets
from ndrank.types import RANK_DTYPE, RankMethod, as_rank_method

logger = logging.getLogger(__name__)

# Integer and boolean values always order against each other
_ALWAYS_COMPARABLE_KINDS = "biu"


def _comparable_mask(flat: np.ndarray) -> np.ndarray:
    """Elements that order against the dtype's zero value.

    NaN and NaT fail both ``<=`` and ``>``, which is what marks them.
    """
    if flat.dtype.kind in _ALWAYS_COMPARABLE_KINDS:
        return np.ones(flat.shape, dtype=np.bool_)
    reference = np.zeros((), dtype=flat.dtype)
    return np.asarray((flat <= reference) | (flat > reference), dtype=np.bool_)


def rank(a, method: RankMethod | str) -> np.ndarray:
    """Rank every element of ``a`` against all others.

    Args:
        a: Array or array-like of any shape
        method: Tie-breaking method

    Returns:
        uint64 array shaped like ``a``; 0 where the element is not comparable

    Raises:
        UnknownRankMethodError: If ``method`` cannot be resolved
    """
    method = as_rank_method(method)
    values = as_array(a)

    flat = values.reshape(-1)
    flat_ranks = np.zeros(flat.size, dtype=RANK_DTYPE)

    positions = np.flatnonzero(_comparable_mask(flat))
    if positions.size == 0:
        return flat_ranks.reshape(values.shape)

    comparable = flat[positions]
    order = np.argsort(comparable, kind="stable")
    sorted_values = comparable[order]

    group_starts = np.empty(sorted_values.size, dtype=np.bool_)
    group_starts[0] = True
    group_starts[1:] = sorted_values[1:] != sorted_values[:-1]

    flat_ranks[positions[order]] = tie_group_ranks(group_starts, method.code)
    return flat_ranks.reshape(values.shape)


def _bucketize(ranks: np.ndarray, buckets: int) -> np.ndarray:
    """Map ranks onto near-equal-count buckets; rank 0 stays 0."""
    if ranks.size == 0:
        return ranks
    max_rank = int(ranks.max())
    if max_rank == 0:
        return ranks

    # More buckets than ranks collapses to one bucket per rank
    cuts = bucket_cut_points(max_rank, min(buckets, max_rank))
    if len(cuts) < buckets:
        logger.debug("Only %d ranks for %d buckets, using %d buckets", max_rank, buckets, len(cuts))

    # Bucket id is the number of cut points at or below the rank
    flat = ranks.reshape(-1)
    bucket_ids = np.searchsorted(cuts, flat.astype(np.int64), side="right").astype(RANK_DTYPE)
    bucket_ids[flat == 0] = 0
    return bucket_ids.reshape(ranks.shape)


def discretize(a, method: RankMethod | str, buckets: int) -> np.ndarray:
    """Split the ranks of ``a`` into ``buckets`` ordered, near-equal-count groups.

    When the highest rank does not divide evenly, the lowest buckets take one
    extra rank each. With fewer ranks than buckets, each rank gets its own
    bucket and no bucket is left empty.

    Args:
        a: Array or array-like of any shape
        method: Tie-breaking method used for the underlying ranks
        buckets: Requested number of buckets (>= 1)

    Returns:
        uint64 array shaped like ``a`` with bucket ids in [1, buckets];
        0 where the element is not comparable

    Raises:
        InvalidBucketCountError: If ``buckets`` is not a positive integer
        UnknownRankMethodError: If ``method`` cannot be resolved
    """
    buckets = check_buckets(buckets)
    return _bucketize(rank(a, method), buckets)


def rank_axis(a, axis: int, method: RankMethod | str) -> np.ndarray:
    """Rank each slice along ``axis`` independently.

    For a matrix, ``axis=0`` ranks within rows and ``axis=1`` within columns.

    Raises:
        AxisOutOfRangeError: If ``axis`` is not a dimension of ``a``
        UnknownRankMethodError: If ``method`` cannot be resolved
    """
    method = as_rank_method(method)
    return map_over_axis(lambda s: rank(s, method), as_array(a), axis, RANK_DTYPE)


def discretize_axis(a, axis: int, method: RankMethod | str, buckets: int) -> np.ndarray:
    """Discretize each slice along ``axis`` independently.

    Bucket boundaries are computed per slice; nothing aligns them across
    slices.

    Raises:
        AxisOutOfRangeError: If ``axis`` is not a dimension of ``a``
        InvalidBucketCountError: If ``buckets`` is not a positive integer
        UnknownRankMethodError: If ``method`` cannot be resolved
    """
    method = as_rank_method(method)
    buckets = check_buckets(buckets)
    return map_over_axis(
        lambda s: _bucketize(rank(s, method), buckets), as_array(a), axis, RANK_DTYPE
    )
