"""
Connected component labeling of 2D grids.

This package labels the foreground pixels of an image into maximal connected
groups. The algorithm is a breadth-first flood fill driven by three policies:

**Access** (access.py)
    Reads a pixel at (row, col) from any image representation.
    - square_bracket_access: image[row][col]
    - round_bracket_access: image(row, col)
    - index_access: image[row, col]
    - make_row_major_access: flat row-major sequences

**Classification** (classifiers.py)
    Sorts pixels into foreground and background.
    - is_foreground: bool, int and character pixels; any other type is refused

**Connectivity** (connectivity.py)
    Defines adjacency. Different connectivities produce different
    decompositions of the same image.
    - four_neighbors: 4-connectivity (orthogonal only)
    - eight_neighbors: 8-connectivity (orthogonal + diagonal)

**Objects** (objects.py)
    Connected component extraction parameterized by the three policies.
    - find_connected_components(image, rows, cols, ...) -> components by label
    - grid_to_components(grid, ...) -> same, dimensions and access inferred
"""

from .access import (
    access_for,
    index_access,
    make_row_major_access,
    round_bracket_access,
    square_bracket_access,
)
from .classifiers import (
    equals_classifier,
    is_foreground,
    threshold_classifier,
)
from .connectivity import (
    EIGHT_DELTAS,
    FOUR_DELTAS,
    Connectivity,
    eight_neighbors,
    four_neighbors,
    make_grid_neighbors,
    neighbors_for,
)
from .errors import (
    ClassifierTypeUnsupported,
    DecompositionError,
    InvalidDimension,
    UnsupportedPixelType,
)
from .labels import NO_LABEL, LabelGrid
from .objects import (
    ComponentFinder,
    components_to_mask,
    find_connected_components,
    grid_shape,
    grid_to_components,
    label_components,
    label_map,
    make_finder,
)

__all__ = [
    # Access
    "access_for",
    "index_access",
    "make_row_major_access",
    "round_bracket_access",
    "square_bracket_access",
    # Classification
    "equals_classifier",
    "is_foreground",
    "threshold_classifier",
    # Connectivity
    "Connectivity",
    "EIGHT_DELTAS",
    "FOUR_DELTAS",
    "eight_neighbors",
    "four_neighbors",
    "make_grid_neighbors",
    "neighbors_for",
    # Errors
    "ClassifierTypeUnsupported",
    "DecompositionError",
    "InvalidDimension",
    "UnsupportedPixelType",
    # Labels
    "NO_LABEL",
    "LabelGrid",
    # Objects
    "ComponentFinder",
    "components_to_mask",
    "find_connected_components",
    "grid_shape",
    "grid_to_components",
    "label_components",
    "label_map",
    "make_finder",
]
