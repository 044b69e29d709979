r"""
Grid helpers

Builds and renders boolean masks. Masks are nested lists indexed
mask[row][col], the layout the default square bracket accessor reads.
"""

from constants import BACKGROUND_GLYPHS, FOREGROUND_GLYPHS
from localtypes import Coord, Coords, Mask


def parse_mask(text: str) -> Mask:
    """
    Build a mask from rows of glyphs, one row per line.

    '#', 'X' and '1' are foreground, '.' and '0' are background.
    Blank lines and surrounding indentation are ignored.

    Example:
        >>> parse_mask('''
        ...     ##.
        ...     .#.
        ... ''')
        [[True, True, False], [False, True, False]]
    """
    mask: Mask = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        row = []
        for glyph in line:
            if glyph in FOREGROUND_GLYPHS:
                row.append(True)
            elif glyph in BACKGROUND_GLYPHS:
                row.append(False)
            else:
                raise ValueError(f"Unknown mask glyph: {glyph!r}")
        mask.append(row)
    return mask


def mask_to_coords(mask: Mask) -> Coords:
    return {
        Coord(row, col)
        for row, line in enumerate(mask)
        for col, value in enumerate(line)
        if value
    }


def mask_to_string(mask: Mask, foreground: str = "#", background: str = ".") -> str:
    return "\n".join(
        "".join(foreground if value else background for value in line)
        for line in mask
    )
