"""Tests for finite-value operators."""

import numpy as np
import pytest

from ndrank.exceptions import AxisOutOfRangeError, NotWriteableError
from ndrank.operators import (
    count_finite,
    count_finite_axis,
    count_non_finite,
    count_non_finite_axis,
    fill_non_finite,
    fill_non_finite_inplace,
)
from ndrank.types import COUNT_DTYPE


class TestCountAndFill:
    """Whole-array counting and filling."""

    def test_count_and_fill(self) -> None:
        vals = np.array([1.0, 2.0, np.nan, 3.0])
        assert count_finite(vals) == 3
        assert count_non_finite(vals) == 1

        fill_non_finite_inplace(vals, 42.0)
        np.testing.assert_array_equal(vals, [1.0, 2.0, 42.0, 3.0])
        assert count_finite(vals) == 4
        assert count_non_finite(vals) == 0

    def test_infinities_are_not_finite(self) -> None:
        vals = np.array([np.inf, -np.inf, 0.0, np.nan])
        assert count_finite(vals) == 1
        assert count_non_finite(vals) == 3

    def test_fill_replaces_infinities(self) -> None:
        vals = np.array([np.inf, -1.0, -np.inf])
        fill_non_finite_inplace(vals, 0.0)
        np.testing.assert_array_equal(vals, [0.0, -1.0, 0.0])

    def test_counts_sum_to_size(self, random_values: np.ndarray) -> None:
        assert count_finite(random_values) + count_non_finite(random_values) == random_values.size

    def test_fill_keeps_finite_values(self, random_values: np.ndarray) -> None:
        original = random_values.copy()
        fill_non_finite_inplace(random_values, -1.0)
        finite = np.isfinite(original)
        np.testing.assert_array_equal(random_values[finite], original[finite])
        assert count_non_finite(random_values) == 0

    def test_fill_is_idempotent(self, random_values: np.ndarray) -> None:
        once = fill_non_finite(random_values, 7.0)
        twice = fill_non_finite(once, 7.0)
        np.testing.assert_array_equal(once, twice)

    def test_fill_copy_leaves_input(self) -> None:
        vals = np.array([np.nan, 1.0])
        result = fill_non_finite(vals, 0.0)
        np.testing.assert_array_equal(result, [0.0, 1.0])
        assert np.isnan(vals[0])

    def test_integers_always_finite(self) -> None:
        vals = np.array([[1, 2], [3, 4]])
        assert count_finite(vals) == 4
        assert count_non_finite(vals) == 0
        fill_non_finite_inplace(vals, 0)
        np.testing.assert_array_equal(vals, [[1, 2], [3, 4]])

    def test_float32(self) -> None:
        vals = np.array([np.nan, 1.5], dtype=np.float32)
        fill_non_finite_inplace(vals, 0.5)
        assert vals.dtype == np.float32
        np.testing.assert_array_equal(vals, [0.5, 1.5])

    def test_empty(self) -> None:
        assert count_finite(np.array([])) == 0
        assert count_non_finite(np.array([])) == 0

    def test_accepts_lists(self) -> None:
        assert count_finite([1.0, float("nan")]) == 1

    def test_inplace_rejects_lists(self) -> None:
        with pytest.raises(NotWriteableError, match="list"):
            fill_non_finite_inplace([1.0, float("nan")], 0.0)

    def test_inplace_rejects_read_only(self) -> None:
        vals = np.array([np.nan, 1.0])
        vals.setflags(write=False)
        with pytest.raises(NotWriteableError, match="read-only"):
            fill_non_finite_inplace(vals, 0.0)

    def test_inplace_on_view(self) -> None:
        """Filling a view writes through to the base array."""
        vals = np.array([[np.nan, 1.0], [2.0, np.nan]])
        fill_non_finite_inplace(vals[:, 1], 9.0)
        assert np.isnan(vals[0, 0])
        assert vals[1, 1] == 9.0


class TestCountAxis:
    """Per-slice counting."""

    @pytest.fixture
    def vals(self) -> np.ndarray:
        return np.array([[1.0, 2.0, np.nan, 3.0], [np.nan, 4.0, 5.0, np.nan]])

    def test_count_matrix(self, vals: np.ndarray) -> None:
        assert count_finite(vals) == 5
        np.testing.assert_array_equal(count_finite_axis(vals, 0), [3, 2])
        np.testing.assert_array_equal(count_non_finite_axis(vals, 0), [1, 2])
        np.testing.assert_array_equal(count_finite_axis(vals, 1), [1, 2, 1, 1])
        np.testing.assert_array_equal(count_non_finite_axis(vals, 1), [1, 0, 1, 1])

    def test_count_dtype(self, vals: np.ndarray) -> None:
        assert count_finite_axis(vals, 0).dtype == COUNT_DTYPE

    def test_axis_sums_match_total(self, random_values: np.ndarray) -> None:
        for axis in range(random_values.ndim):
            finite = count_finite_axis(random_values, axis)
            non_finite = count_non_finite_axis(random_values, axis)
            assert finite.shape == (random_values.shape[axis],)
            assert finite.sum() == count_finite(random_values)
            np.testing.assert_array_equal(
                finite + non_finite,
                random_values.size // random_values.shape[axis],
            )

    def test_zero_length_axis(self) -> None:
        vals = np.empty((0, 3))
        assert count_finite_axis(vals, 0).shape == (0,)
        np.testing.assert_array_equal(count_finite_axis(vals, 1), [0, 0, 0])

    def test_axis_out_of_range(self, vals: np.ndarray) -> None:
        with pytest.raises(AxisOutOfRangeError):
            count_finite_axis(vals, 5)
