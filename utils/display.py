from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.text import Text

from constants import BACKGROUND_STYLE, FOREGROUND_STYLE, LABEL_STYLES
from decomposition import (
    Connectivity,
    LabelGrid,
    grid_shape,
    is_foreground,
    label_components,
)
from localtypes import Mask


def label_style(label: int | None) -> str:
    if label is None:
        return BACKGROUND_STYLE
    return LABEL_STYLES[label % len(LABEL_STYLES)]


def labels_to_text(labels: LabelGrid, cell_width: int = 2) -> Text:
    """Render a label grid as colored blocks, one color per component."""
    text = Text()
    for row in range(labels.rows):
        for col in range(labels.cols):
            text.append(" " * cell_width, style=label_style(labels.get(row, col)))
        text.append("\n")
    return text


def mask_to_text(mask: Mask, cell_width: int = 2) -> Text:
    text = Text()
    for line in mask:
        for value in line:
            style = FOREGROUND_STYLE if is_foreground(value) else BACKGROUND_STYLE
            text.append(" " * cell_width, style=style)
        text.append("\n")
    return text


def display_components(
    grid: Sequence[Sequence[Any]],
    connectivity: Connectivity | int = Connectivity.FOUR,
    console: Console | None = None,
) -> int:
    """Print a grid followed by its labeling. Returns the component count."""
    console = console or Console()
    rows, cols = grid_shape(grid)
    labels, count = label_components(grid, rows, cols, connectivity)

    console.print(f"Grid {rows}x{cols}, {int(connectivity)}-connectivity")
    console.print(mask_to_text(grid))
    console.print(f"{count} component(s)")
    console.print(labels_to_text(labels))
    return count
