"""Finite-value counting and replacement.

Finite means not NaN and not +/-inf for floating point and complex arrays
(and not NaT for datetime/timedelta arrays). Every element of any other
dtype is finite.
"""

import numpy as np

from ndrank.operators._axis import reduce_over_axis
from ndrank.operators._validation import as_array, require_writeable
from ndrank.types import COUNT_DTYPE

_CHECKED_KINDS = "fcmM"


def _finite_mask(values: np.ndarray) -> np.ndarray:
    if values.dtype.kind in _CHECKED_KINDS:
        return np.isfinite(values)
    return np.ones(values.shape, dtype=np.bool_)


def count_finite(a) -> int:
    """Number of finite elements."""
    return int(np.count_nonzero(_finite_mask(as_array(a))))


def count_non_finite(a) -> int:
    """Number of NaN / infinite elements."""
    values = as_array(a)
    return int(values.size - np.count_nonzero(_finite_mask(values)))


def count_finite_axis(a, axis: int) -> np.ndarray:
    """Number of finite elements in each slice along ``axis``.

    For a matrix, ``axis=0`` counts per row and ``axis=1`` per column.

    Returns:
        uint64 array of length ``a.shape[axis]``
    """
    return reduce_over_axis(count_finite, as_array(a), axis, COUNT_DTYPE)


def count_non_finite_axis(a, axis: int) -> np.ndarray:
    """Number of non-finite elements in each slice along ``axis``.

    Returns:
        uint64 array of length ``a.shape[axis]``
    """
    return reduce_over_axis(count_non_finite, as_array(a), axis, COUNT_DTYPE)


def fill_non_finite_inplace(a: np.ndarray, replacement) -> None:
    """Replace NaN, inf and -inf in ``a`` with ``replacement``.

    Raises:
        NotWriteableError: If ``a`` is not a writeable ndarray
    """
    require_writeable(a, "fill_non_finite_inplace")
    if a.dtype.kind not in _CHECKED_KINDS:
        return
    a[~np.isfinite(a)] = replacement


def fill_non_finite(a, replacement) -> np.ndarray:
    """Copy of ``a`` with NaN, inf and -inf replaced by ``replacement``."""
    result = np.array(a, copy=True)
    fill_non_finite_inplace(result, replacement)
    return result
