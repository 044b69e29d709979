"""
Object extraction via connected component labeling.

Objects are maximal connected sets of foreground pixels. Three policies
parameterize the extraction:
- how a pixel is read from the image (accessor)
- whether a pixel is foreground (classifier)
- which cells are adjacent (neighbor generator)

Algorithm:
    The grid is scanned in row-major order. Each unlabeled foreground pixel
    seeds a breadth-first flood fill which labels every foreground pixel
    reachable from it. Labels are assigned when a pixel is enqueued, so each
    pixel enters the queue at most once. Labels are dense, starting at 0, in
    the order seeds are met by the scan. A final pass over the label grid
    groups coordinates by label.
"""

import logging
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from constants import DEFAULT_CONNECTIVITY
from localtypes import (
    Component,
    Components,
    Coord,
    Image,
    NeighborGenerator,
    PixelAccessor,
    PixelClassifier,
    Shape,
)

from .access import access_for, square_bracket_access
from .classifiers import is_foreground
from .connectivity import (
    Connectivity,
    four_neighbors,
    neighbors_for,
)
from .errors import InvalidDimension
from .labels import LabelGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentFinder:
    """
    Labels the connected components of a rows x cols image.

    Instances hold no per-call state: every call gets its own label grid
    and work queue, so one finder can be shared freely.
    """

    neighbors: NeighborGenerator = four_neighbors
    access: PixelAccessor = square_bracket_access
    classify: PixelClassifier = is_foreground

    def label(self, image: Image, rows: int, cols: int) -> tuple[LabelGrid, int]:
        """
        Run the labeling pass.

        Returns:
            The filled label grid and the number of components found.

        Raises:
            InvalidDimension: rows or cols below 1, before any allocation.
            UnsupportedPixelType: a pixel the classifier cannot handle. Every
                scanned pixel is classified, so one anywhere in the image aborts
                the call.
        """
        if rows < 1 or cols < 1:
            raise InvalidDimension(rows, cols)

        labels = LabelGrid(rows, cols)
        logger.debug("Allocated %r", labels)

        next_label = 0
        queue: deque[Coord] = deque()

        for row in range(rows):
            for col in range(cols):
                foreground = self.classify(self.access(image, row, col))
                if not foreground or labels.is_labeled(row, col):
                    continue

                seed = Coord(row, col)
                labels.set(row, col, next_label)
                queue.append(seed)
                size = self._flood(image, labels, queue, next_label)

                logger.debug(
                    "Component %d seeded at %s with %d pixels", next_label, seed, size
                )
                next_label += 1

        logger.debug("Found %d components in %dx%d grid", next_label, rows, cols)
        return labels, next_label

    def _flood(
        self, image: Image, labels: LabelGrid, queue: deque[Coord], label: int
    ) -> int:
        """Drain the queue, labeling reachable foreground pixels. Returns the count."""
        rows, cols = labels.shape
        size = len(queue)
        while queue:
            current = queue.popleft()
            for neighbor in self.neighbors(current):
                row, col = neighbor
                if not (0 <= row < rows and 0 <= col < cols):
                    continue
                if not self.classify(self.access(image, row, col)):
                    continue
                if labels.is_labeled(row, col):
                    continue
                labels.set(row, col, label)
                queue.append(Coord(row, col))
                size += 1
        return size

    def find(self, image: Image, rows: int, cols: int) -> Components:
        """
        Connected components of the image, indexed by label.

        Each component is the frozenset of its coordinates.
        """
        labels, count = self.label(image, rows, cols)

        buckets: list[set[Coord]] = [set() for _ in range(count)]
        for coord, label in labels.labeled():
            buckets[label].add(coord)
        return [frozenset(bucket) for bucket in buckets]

    def __call__(self, image: Image, rows: int, cols: int) -> Components:
        return self.find(image, rows, cols)


def make_finder(
    connectivity: Connectivity | int | NeighborGenerator = DEFAULT_CONNECTIVITY,
    access: PixelAccessor = square_bracket_access,
    classify: PixelClassifier = is_foreground,
) -> ComponentFinder:
    return ComponentFinder(neighbors_for(connectivity), access, classify)


def label_components(
    image: Image,
    rows: int,
    cols: int,
    connectivity: Connectivity | int | NeighborGenerator = DEFAULT_CONNECTIVITY,
    access: PixelAccessor = square_bracket_access,
    classify: PixelClassifier = is_foreground,
) -> tuple[LabelGrid, int]:
    """Label grid and component count, without grouping coordinates."""
    return make_finder(connectivity, access, classify).label(image, rows, cols)


def find_connected_components(
    image: Image,
    rows: int,
    cols: int,
    connectivity: Connectivity | int | NeighborGenerator = DEFAULT_CONNECTIVITY,
    access: PixelAccessor = square_bracket_access,
    classify: PixelClassifier = is_foreground,
) -> Components:
    """
    Connected components of a rows x cols image.

    Args:
        image: Any image representation `access` can read.
        rows, cols: Dimensions of the image, both at least 1.
        connectivity: 4, 8, a Connectivity, or a custom neighbor generator.
        access: Reads the pixel at (row, col).
        classify: True for foreground pixels.

    Returns:
        Components indexed by label, in the order their first pixel is met
        by a row-major scan.

    Example:
        >>> find_connected_components([[1, 0], [0, 1]], 2, 2, connectivity=8)
        [frozenset({Coord(row=0, col=0), Coord(row=1, col=1)})]
    """
    return make_finder(connectivity, access, classify).find(image, rows, cols)


def grid_shape(grid: Any) -> Shape:
    """
    (rows, cols) of a 2D array or a rectangular nested sequence.

    Raises:
        InvalidDimension: empty, ragged or non-2D grids.
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise InvalidDimension(
                *(grid.shape + (0, 0))[:2], reason=f"expected 2 dimensions, got {grid.ndim}"
            )
        rows, cols = grid.shape
    else:
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        if any(len(row) != cols for row in grid):
            raise InvalidDimension(rows, cols, reason="rows have different lengths")
    if rows < 1 or cols < 1:
        raise InvalidDimension(rows, cols)
    return rows, cols


def grid_to_components(
    grid: Sequence[Sequence[Any]] | np.ndarray,
    connectivity: Connectivity | int | NeighborGenerator = DEFAULT_CONNECTIVITY,
    classify: PixelClassifier = is_foreground,
) -> Components:
    """Connected components of a grid whose dimensions and layout are inferred."""
    rows, cols = grid_shape(grid)
    return find_connected_components(
        grid, rows, cols, connectivity, access_for(grid), classify
    )


def label_map(
    grid: Sequence[Sequence[Any]] | np.ndarray,
    connectivity: Connectivity | int | NeighborGenerator = DEFAULT_CONNECTIVITY,
    classify: PixelClassifier = is_foreground,
    background: int = -1,
) -> np.ndarray:
    """Label image of a grid, background pixels set to `background`."""
    rows, cols = grid_shape(grid)
    labels, _ = label_components(
        grid, rows, cols, connectivity, access_for(grid), classify
    )
    return labels.to_array(background)


def components_to_mask(
    components: Sequence[Component], rows: int, cols: int
) -> list[list[bool]]:
    """Boolean mask of the union of the components."""
    mask = [[False] * cols for _ in range(rows)]
    for component in components:
        for row, col in component:
            mask[row][col] = True
    return mask


__all__ = [
    "ComponentFinder",
    "make_finder",
    "label_components",
    "find_connected_components",
    "grid_shape",
    "grid_to_components",
    "label_map",
    "components_to_mask",
]
