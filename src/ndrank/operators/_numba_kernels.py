"""Numba-optimized kernels for the rank and discretize operators.

Kernels only see integer and boolean arrays so the operators stay generic
over the input dtype: comparisons of the actual values happen in numpy.
"""

import numpy as np
from numba import njit


@njit(cache=True, nogil=True)
def tie_group_ranks(group_starts: np.ndarray, method: int) -> np.ndarray:
    """Assign ranks to sorted values given the boundaries of their tie-groups.

    Args:
        group_starts: Boolean array in sorted order, True where a new run of
            equal values begins (always True at position 0)
        method: 0=minimum, 1=maximum, 2=average (floor)

    Returns:
        Rank of each sorted position, starting at 1
    """
    n = len(group_starts)
    result = np.empty(n, dtype=np.int64)

    rank = 1
    start = 0
    while start < n:
        end = start + 1
        while end < n and not group_starts[end]:
            end += 1
        size = end - start

        if method == 0:
            assigned = rank
        elif method == 1:
            assigned = rank + size - 1
        else:
            assigned = rank + (size - 1) // 2

        for k in range(start, end):
            result[k] = assigned

        rank += size
        start = end

    return result


@njit(cache=True, nogil=True)
def bucket_cut_points(max_rank: int, buckets: int) -> np.ndarray:
    """Lowest rank of each bucket when splitting ranks 1..max_rank.

    Buckets get max_rank // buckets ranks each and the first
    max_rank % buckets buckets take one extra. With fewer ranks than
    buckets, the bucket count drops to max_rank with one rank per bucket.

    Args:
        max_rank: Highest rank present, at least 1
        buckets: Requested bucket count, at least 1

    Returns:
        Ascending cut points; cut[0] == 1
    """
    ranks_per_bucket = max_rank // buckets
    if ranks_per_bucket == 0:
        buckets = max_rank
        ranks_per_bucket = 1

    remainder = max_rank % buckets

    cuts = np.empty(buckets, dtype=np.int64)
    low_rank = 1
    for b in range(buckets):
        cuts[b] = low_rank
        if b < remainder:
            low_rank += ranks_per_bucket + 1
        else:
            low_rank += ranks_per_bucket

    return cuts
