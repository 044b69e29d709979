"""Tests for decomposition/labels.py"""

import numpy as np
import pytest

from decomposition import NO_LABEL, InvalidDimension, LabelGrid
from localtypes import Coord


class TestLabelGrid:
    def test_initialized_to_no_label(self):
        labels = LabelGrid(2, 3)
        assert labels.shape == (2, 3)
        assert all(
            labels.get(row, col) is NO_LABEL for row in range(2) for col in range(3)
        )
        assert not labels.is_labeled(1, 2)

    @pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (0, 0), (-1, 5)])
    def test_invalid_dimensions(self, rows, cols):
        with pytest.raises(InvalidDimension, match="Invalid grid dimensions"):
            LabelGrid(rows, cols)

    def test_invalid_dimension_is_value_error(self):
        with pytest.raises(ValueError):
            LabelGrid(0, 3)

    def test_set_and_get(self):
        labels = LabelGrid(2, 2)
        labels.set(1, 0, 0)
        assert labels.get(1, 0) == 0
        assert labels.is_labeled(1, 0)
        assert not labels.is_labeled(0, 1)

    def test_label_zero_is_not_no_label(self):
        labels = LabelGrid(1, 1)
        labels.set(0, 0, 0)
        assert labels.get(0, 0) is not NO_LABEL

    def test_never_reset(self):
        labels = LabelGrid(1, 2)
        labels.set(0, 1, 3)
        with pytest.raises(ValueError, match="already labeled"):
            labels.set(0, 1, 4)
        assert labels.get(0, 1) == 3

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (2, 0), (0, 3)])
    def test_bounds_checked(self, row, col):
        labels = LabelGrid(2, 3)
        with pytest.raises(IndexError, match="outside"):
            labels.get(row, col)
        with pytest.raises(IndexError):
            labels.set(row, col, 0)

    def test_labeled_row_major(self):
        labels = LabelGrid(2, 2)
        labels.set(1, 1, 1)
        labels.set(0, 1, 0)
        assert list(labels.labeled()) == [(Coord(0, 1), 0), (Coord(1, 1), 1)]

    def test_to_array(self):
        labels = LabelGrid(2, 3)
        labels.set(0, 0, 0)
        labels.set(1, 2, 1)
        expected = np.array([[0, -1, -1], [-1, -1, 1]], dtype=np.int32)
        np.testing.assert_array_equal(labels.to_array(), expected)
        assert labels.to_array().dtype == np.int32

    def test_to_array_custom_background(self):
        labels = LabelGrid(1, 2)
        labels.set(0, 1, 0)
        np.testing.assert_array_equal(labels.to_array(background=9), [[9, 0]])
