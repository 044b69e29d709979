"""
Type definitions for connected component labeling.

This module contains the types shared by the labeling algorithm and its
policies, organized by their primary use cases.

Coordinate Convention:
    All coordinates use (row, col) order, matching grid indexing grid[row][col].
"""

from __future__ import annotations

from collections.abc import Sequence, Set
from typing import Any, NamedTuple, Protocol, TypeVar, runtime_checkable

# Pixel value type variables
V_contra = TypeVar("V_contra", contravariant=True)
V_co = TypeVar("V_co", covariant=True)


# Coordinate systems
class Coord(NamedTuple):
    row: int
    col: int


type Coords = Set[Coord]  # Set of coordinates
type Shape = tuple[int, int]  # (rows, cols)

# Labels
type Label = int  # Dense, starting at 0, in discovery order

# Components
type Component = frozenset[Coord]
type Components = list[Component]  # Indexed by label

# Grid representations
type Mask = list[list[bool]]  # Boolean mask: grid[row][col] -> is_foreground
type Image = Any  # Opaque, read through a PixelAccessor


# Policies
@runtime_checkable
class PixelAccessor(Protocol[V_co]):
    """Reads the pixel at (row, col). Never called out of bounds."""

    def __call__(self, image: Any, row: int, col: int, /) -> V_co: ...


@runtime_checkable
class PixelClassifier(Protocol[V_contra]):
    """True for foreground, False for background."""

    def __call__(self, value: V_contra, /) -> bool: ...


@runtime_checkable
class NeighborGenerator(Protocol):
    """Candidate neighbors of a coordinate, possibly out of the grid."""

    def __call__(self, pos: Coord, /) -> Sequence[Coord]: ...
