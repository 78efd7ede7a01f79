"""Elementwise maximum / minimum against another array of the same shape.

Replacement happens only where the comparison holds, so a NaN already in the
target stays and a NaN in the other array never replaces anything.
"""

import numpy as np

from ndrank.operators._validation import as_array, check_same_shape, require_writeable


def maximum_with_inplace(a: np.ndarray, other) -> None:
    """Set ``a[i] = other[i]`` wherever ``a[i] < other[i]``.

    Raises:
        NotWriteableError: If ``a`` is not a writeable ndarray
        ShapeMismatchError: If the shapes differ
    """
    require_writeable(a, "maximum_with_inplace")
    other = as_array(other)
    check_same_shape(a, other)
    np.copyto(a, other, where=a < other)


def minimum_with_inplace(a: np.ndarray, other) -> None:
    """Set ``a[i] = other[i]`` wherever ``a[i] > other[i]``.

    Raises:
        NotWriteableError: If ``a`` is not a writeable ndarray
        ShapeMismatchError: If the shapes differ
    """
    require_writeable(a, "minimum_with_inplace")
    other = as_array(other)
    check_same_shape(a, other)
    np.copyto(a, other, where=a > other)


def maximum_with(a, other) -> np.ndarray:
    """Elementwise maximum of ``a`` and ``other`` as a new array.

    Examples:
        >>> maximum_with([1, 2, 3], [-1, 2, 5])
        array([1, 2, 5])
    """
    result = np.array(a, copy=True)
    maximum_with_inplace(result, other)
    return result


def minimum_with(a, other) -> np.ndarray:
    """Elementwise minimum of ``a`` and ``other`` as a new array.

    Examples:
        >>> minimum_with([1, 2, 3], [-1, 2, 5])
        array([-1, 2, 3])
    """
    result = np.array(a, copy=True)
    minimum_with_inplace(result, other)
    return result
