"""
Connectivity definitions for decomposition.

A connectivity defines which grid cells are "neighbors" of each other,
enabling connected component extraction. Different connectivities
produce different decompositions of the same image:
- FOUR: the 4 axis-aligned neighbors
- EIGHT: axis-aligned plus diagonal neighbors

Grid neighbor generators return every candidate, including coordinates
outside of the grid or negative ones. Filtering is left to the caller.
"""

from collections.abc import Sequence
from enum import IntEnum
from numbers import Integral
from typing import Final

from localtypes import Coord, NeighborGenerator


class Connectivity(IntEnum):
    FOUR = 4
    EIGHT = 8


# (Δrow, Δcol) offsets, in enumeration order
FOUR_DELTAS: Final[tuple[Coord, ...]] = (
    Coord(1, 0),  # down
    Coord(0, 1),  # right
    Coord(-1, 0),  # up
    Coord(0, -1),  # left
)
EIGHT_DELTAS: Final[tuple[Coord, ...]] = tuple(
    Coord(drow, dcol)
    for drow in (-1, 0, 1)
    for dcol in (-1, 0, 1)
    if (drow, dcol) != (0, 0)
)


def make_grid_neighbors(deltas: Sequence[Coord]) -> NeighborGenerator:
    """
    Create a neighbor generator from a set of (Δrow, Δcol) offsets.

    Example:
        >>> neighbors = make_grid_neighbors(FOUR_DELTAS)
        >>> neighbors(Coord(0, 0))
        [Coord(row=1, col=0), Coord(row=0, col=1), Coord(row=-1, col=0), Coord(row=0, col=-1)]
    """
    offsets = tuple(deltas)

    def neighbors(pos: Coord) -> list[Coord]:
        row, col = pos
        return [Coord(row + drow, col + dcol) for drow, dcol in offsets]

    return neighbors


# Standard connectivity functions for 2D grids
four_neighbors: NeighborGenerator = make_grid_neighbors(FOUR_DELTAS)
eight_neighbors: NeighborGenerator = make_grid_neighbors(EIGHT_DELTAS)

_NEIGHBORS_BY_CONNECTIVITY: Final[dict[Connectivity, NeighborGenerator]] = {
    Connectivity.FOUR: four_neighbors,
    Connectivity.EIGHT: eight_neighbors,
}


def neighbors_for(connectivity: Connectivity | int | NeighborGenerator) -> NeighborGenerator:
    """
    Resolve a connectivity setting into a neighbor generator.

    Accepts a Connectivity, the integers 4 or 8 (numpy integers included),
    or a neighbor generator which is returned as is.
    """
    if isinstance(connectivity, Integral):
        try:
            return _NEIGHBORS_BY_CONNECTIVITY[Connectivity(int(connectivity))]
        except ValueError:
            raise ValueError(
                f"Unsupported connectivity: {connectivity}, expected 4 or 8"
            ) from None
    if callable(connectivity):
        return connectivity
    raise ValueError(f"Unsupported connectivity: {connectivity!r}")
