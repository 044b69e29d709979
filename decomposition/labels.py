"""
Dense label storage for one labeling pass.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

import numpy as np

from localtypes import Coord, Label

from .errors import InvalidDimension

NO_LABEL: Final[None] = None


class LabelGrid:
    """
    A rows x cols grid of optional labels, stored row-major.

    A slot holds NO_LABEL until the traversal visits it. Once a slot is
    labeled it is never reset.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise InvalidDimension(rows, cols)
        self.rows = rows
        self.cols = cols
        self._slots: list[Label | None] = [NO_LABEL] * (rows * cols)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"({row}, {col}) is outside of the {self.rows}x{self.cols} grid"
            )
        return row * self.cols + col

    def get(self, row: int, col: int) -> Label | None:
        return self._slots[self._index(row, col)]

    def set(self, row: int, col: int, label: Label) -> None:
        index = self._index(row, col)
        if self._slots[index] is not NO_LABEL:
            raise ValueError(
                f"({row}, {col}) is already labeled {self._slots[index]}"
            )
        self._slots[index] = label

    def is_labeled(self, row: int, col: int) -> bool:
        return self.get(row, col) is not NO_LABEL

    def labeled(self) -> Iterator[tuple[Coord, Label]]:
        """Yields (coord, label) for every labeled slot, in row-major order."""
        for index, label in enumerate(self._slots):
            if label is not NO_LABEL:
                yield Coord(*divmod(index, self.cols)), label

    def to_array(self, background: int = -1) -> np.ndarray:
        """Label image as an int32 array, unlabeled slots set to `background`."""
        flat = np.fromiter(
            (background if label is NO_LABEL else label for label in self._slots),
            dtype=np.int32,
            count=len(self._slots),
        )
        return flat.reshape(self.rows, self.cols)

    def __repr__(self) -> str:
        return f"LabelGrid(rows={self.rows}, cols={self.cols})"
