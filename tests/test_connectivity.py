"""Tests for decomposition/connectivity.py"""

import numpy as np
import pytest

from decomposition import (
    EIGHT_DELTAS,
    FOUR_DELTAS,
    Connectivity,
    eight_neighbors,
    four_neighbors,
    make_grid_neighbors,
    neighbors_for,
)
from localtypes import Coord


class TestFourNeighbors:
    def test_exactly_four_axis_aligned(self):
        result = four_neighbors(Coord(5, 5))
        assert len(result) == 4
        assert set(result) == {(6, 5), (5, 6), (4, 5), (5, 4)}

    def test_fixed_order(self):
        """Down, right, up, left."""
        assert four_neighbors(Coord(2, 3)) == [(3, 3), (2, 4), (1, 3), (2, 2)]

    def test_out_of_grid_candidates_kept(self):
        result = four_neighbors(Coord(0, 0))
        assert Coord(-1, 0) in result
        assert Coord(0, -1) in result

    def test_returns_coords(self):
        assert all(isinstance(coord, Coord) for coord in four_neighbors(Coord(1, 1)))


class TestEightNeighbors:
    def test_exactly_eight_without_center(self):
        result = eight_neighbors(Coord(1, 1))
        assert len(result) == 8
        assert Coord(1, 1) not in result
        assert set(result) == {
            (row, col) for row in range(3) for col in range(3) if (row, col) != (1, 1)
        }

    def test_fixed_order(self):
        """Row offset outer, column offset inner, both from -1 to 1."""
        assert eight_neighbors(Coord(0, 0)) == [
            (-1, -1), (-1, 0), (-1, 1),
            (0, -1), (0, 1),
            (1, -1), (1, 0), (1, 1),
        ]

    def test_superset_of_four(self):
        pos = Coord(4, 7)
        assert set(four_neighbors(pos)) < set(eight_neighbors(pos))


class TestDeltas:
    def test_no_zero_offset(self):
        assert Coord(0, 0) not in FOUR_DELTAS
        assert Coord(0, 0) not in EIGHT_DELTAS

    def test_custom_deltas(self):
        diagonal = make_grid_neighbors([Coord(1, 1), Coord(-1, -1)])
        assert diagonal(Coord(2, 2)) == [(3, 3), (1, 1)]


class TestNeighborsFor:
    @pytest.mark.parametrize(
        "connectivity, expected",
        [
            (4, four_neighbors),
            (8, eight_neighbors),
            (Connectivity.FOUR, four_neighbors),
            (Connectivity.EIGHT, eight_neighbors),
        ],
    )
    def test_resolves(self, connectivity, expected):
        assert neighbors_for(connectivity) is expected

    @pytest.mark.parametrize(
        "connectivity, expected",
        [
            (np.int64(4), four_neighbors),
            (np.int32(8), eight_neighbors),
            (np.uint8(8), eight_neighbors),
        ],
    )
    def test_resolves_numpy_integers(self, connectivity, expected):
        assert neighbors_for(connectivity) is expected

    def test_unsupported_numpy_integer(self):
        with pytest.raises(ValueError, match="Unsupported connectivity"):
            neighbors_for(np.int64(6))

    def test_callable_passthrough(self):
        def custom(pos):
            return []

        assert neighbors_for(custom) is custom

    @pytest.mark.parametrize("connectivity", [0, 6, -4])
    def test_unsupported_int(self, connectivity):
        with pytest.raises(ValueError, match="Unsupported connectivity"):
            neighbors_for(connectivity)

    def test_unsupported_object(self):
        with pytest.raises(ValueError, match="Unsupported connectivity"):
            neighbors_for("four")

