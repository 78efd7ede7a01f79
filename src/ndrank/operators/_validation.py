"""Argument checks shared by the operators.

Every check raises an ``ndrank.exceptions`` error; none of them coerce
silently beyond ``np.asarray``.
"""

import numpy as np

from ndrank.exceptions import (
    AxisOutOfRangeError,
    InvalidBucketCountError,
    NotWriteableError,
    ShapeMismatchError,
    ValidationError,
)


def as_array(a) -> np.ndarray:
    """View array-likes as ndarrays without copying ndarrays."""
    return np.asarray(a)


def require_writeable(a, operator: str) -> np.ndarray:
    """Ensure an in-place target is a writeable ndarray."""
    if not isinstance(a, np.ndarray):
        raise NotWriteableError(
            f"{operator} needs a numpy.ndarray target, got: {type(a).__name__}"
        )
    if not a.flags.writeable:
        raise NotWriteableError(f"{operator} target array is read-only")
    return a


def check_same_shape(left: np.ndarray, right: np.ndarray) -> None:
    if left.shape != right.shape:
        raise ShapeMismatchError(left.shape, right.shape)


def normalize_axis(axis, ndim: int) -> int:
    """Resolve a possibly negative axis index against ``ndim`` dimensions."""
    if isinstance(axis, bool) or not isinstance(axis, (int, np.integer)):
        raise ValidationError(f"axis must be an integer, got: {axis!r}")
    axis = int(axis)
    if not -ndim <= axis < ndim:
        raise AxisOutOfRangeError(axis, ndim)
    return axis % ndim


def check_buckets(buckets) -> int:
    if isinstance(buckets, bool) or not isinstance(buckets, (int, np.integer)):
        raise InvalidBucketCountError(buckets)
    if buckets < 1:
        raise InvalidBucketCountError(buckets)
    return int(buckets)
