"""
Pixel accessors: read the value at (row, col) from an image.

Accessors decouple the labeling from the image storage layout. They never
check bounds, the caller only asks for coordinates inside the declared
dimensions.
"""

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np


def square_bracket_access(image: Any, row: int, col: int) -> Any:
    """Nested sequences: image[row][col]."""
    return image[row][col]


def round_bracket_access(image: Any, row: int, col: int) -> Any:
    """Callables: image(row, col)."""
    return image(row, col)


def index_access(image: Any, row: int, col: int) -> Any:
    """Tuple-indexed arrays: image[row, col]."""
    return image[row, col]


def make_row_major_access(cols: int) -> Callable[[Sequence[Any], int, int], Any]:
    """Flat sequences laid out row-major with `cols` values per row."""

    def row_major_access(image: Sequence[Any], row: int, col: int) -> Any:
        return image[row * cols + col]

    return row_major_access


def access_for(image: Any) -> Callable[[Any, int, int], Any]:
    """Pick the accessor matching the representation of `image`."""
    if isinstance(image, np.ndarray):
        return index_access
    if callable(image):
        return round_bracket_access
    return square_bracket_access
