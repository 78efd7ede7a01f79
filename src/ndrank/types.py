"""Shared types for ndrank operators."""

from __future__ import annotations

from enum import Enum

import numpy as np

from ndrank.exceptions import UnknownRankMethodError

# Element type of every rank, bucket and count output
RANK_DTYPE = np.uint64
COUNT_DTYPE = np.uint64


class RankMethod(str, Enum):
    """Method for breaking ties among ranks.

    Members of a tie-group all receive the lowest, the highest, or the
    floor-average rank of the group.
    """

    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    AVERAGE = "average"

    @property
    def code(self) -> int:
        """Integer encoding understood by the numba kernels."""
        return _METHOD_CODES[self]


# method encoding: 0=minimum, 1=maximum, 2=average
_METHOD_CODES = {
    RankMethod.MINIMUM: 0,
    RankMethod.MAXIMUM: 1,
    RankMethod.AVERAGE: 2,
}

_METHOD_ALIASES = {
    "min": RankMethod.MINIMUM,
    "max": RankMethod.MAXIMUM,
    "avg": RankMethod.AVERAGE,
    "mean": RankMethod.AVERAGE,
}


def as_rank_method(method: RankMethod | str) -> RankMethod:
    """Resolve a RankMethod from an enum member, its value, or a short alias.

    Raises:
        UnknownRankMethodError: If the method cannot be resolved
    """
    if isinstance(method, RankMethod):
        return method
    if isinstance(method, str):
        key = method.strip().lower()
        if key in _METHOD_ALIASES:
            return _METHOD_ALIASES[key]
        try:
            return RankMethod(key)
        except ValueError:
            pass
    raise UnknownRankMethodError(method)
