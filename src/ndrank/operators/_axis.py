"""Axis-wise application of whole-array operators.

A slice along ``axis`` is the (N-1)-dimensional view obtained by fixing that
coordinate. Each slice is processed independently and writes a disjoint
region of the output, so slices fan out to a thread pool once there are
enough of them.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

import numpy as np

from ndrank.config import get_settings
from ndrank.operators._validation import normalize_axis

logger = logging.getLogger(__name__)


def _slice_index(axis: int, i: int) -> tuple:
    return (slice(None),) * axis + (i,)


def _run_slices(apply: Callable[[int], None], n_slices: int) -> None:
    """Call ``apply`` for every slice index, in parallel when worthwhile."""
    settings = get_settings()
    if settings.parallel and n_slices >= settings.parallel_min_slices:
        workers = min(settings.max_workers, n_slices)
        logger.debug("Dispatching %d slices to %d workers", n_slices, workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # Consume the iterator so worker exceptions propagate
            list(executor.map(apply, range(n_slices)))
    else:
        for i in range(n_slices):
            apply(i)


def map_over_axis(
    func: Callable[[np.ndarray], np.ndarray],
    values: np.ndarray,
    axis: int,
    dtype,
) -> np.ndarray:
    """Apply ``func`` to each slice along ``axis`` and reassemble the results.

    Args:
        func: Whole-array operator returning an array shaped like its input
        values: Input array
        axis: Axis whose coordinate is fixed per slice
        dtype: Element type of the output

    Returns:
        Array shaped like ``values``
    """
    axis = normalize_axis(axis, values.ndim)
    out = np.zeros(values.shape, dtype=dtype)

    def apply(i: int) -> None:
        index = _slice_index(axis, i)
        out[index] = func(values[index])

    _run_slices(apply, values.shape[axis])
    return out


def reduce_over_axis(
    func: Callable[[np.ndarray], int],
    values: np.ndarray,
    axis: int,
    dtype,
) -> np.ndarray:
    """Reduce each slice along ``axis`` to a scalar.

    Returns:
        1D array of length ``values.shape[axis]``
    """
    axis = normalize_axis(axis, values.ndim)
    out = np.zeros(values.shape[axis], dtype=dtype)

    def apply(i: int) -> None:
        out[i] = func(values[_slice_index(axis, i)])

    _run_slices(apply, values.shape[axis])
    return out
