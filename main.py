"""
Label the reference grids and print their components.

Usage:
    python main.py [--debug]
"""

import logging
import sys

from decomposition import Connectivity
from utils.display import display_components
from utils.grid import parse_mask

logger = logging.getLogger(__name__)

SCENARIOS = {
    "L-shape and isolated corner": parse_mask(
        """
        ##.
        .#.
        ..#
        """
    ),
    "Checkerboard": parse_mask(
        """
        #.
        .#
        """
    ),
    "Rings": parse_mask(
        """
        ###...#
        #.#..#.
        ###.#..
        .......
        .####..
        """
    ),
}


def main(argv: list[str]) -> None:
    level = logging.DEBUG if "--debug" in argv else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s | %(message)s")

    for name, grid in SCENARIOS.items():
        for connectivity in Connectivity:
            logger.info("%s, %d-connectivity", name, connectivity)
            display_components(grid, connectivity)


if __name__ == "__main__":
    main(sys.argv[1:])
