"""
Global constants used throughout the project
"""

from typing import Final

DEFAULT_CONNECTIVITY: Final[int] = 4

# Glyphs used by utils.grid.parse_mask
FOREGROUND_GLYPHS: Final[frozenset[str]] = frozenset("#X1")
BACKGROUND_GLYPHS: Final[frozenset[str]] = frozenset(".0")

# Rich styles cycled over component labels, taken from the arcprize palette
LABEL_STYLES: Final[tuple[str, ...]] = (
    "on #1E93FF",  # Blue
    "on #F93C31",  # Red
    "on #4FCC30",  # Green
    "on #FFDC00",  # Yellow
    "on #E53AA3",  # Magenta
    "on #FF851B",  # Orange
    "on #87D8F1",  # Blue light
    "on #921231",  # Maroon
)
BACKGROUND_STYLE: Final[str] = "on #000000"
FOREGROUND_STYLE: Final[str] = "on #999999"
