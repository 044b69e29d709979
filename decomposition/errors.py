"""
Errors raised by connected component labeling.

Both are caller configuration errors: the labeling call aborts and no
partial result is returned.
"""


class DecompositionError(Exception):
    """Base class for labeling errors."""


class InvalidDimension(DecompositionError, ValueError):
    """Raised when a grid has fewer than one row or one column."""

    def __init__(self, rows: int, cols: int, reason: str | None = None) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(
            f"Invalid grid dimensions: {rows}x{cols}, "
            + (reason or "both must be at least 1")
        )


class UnsupportedPixelType(DecompositionError, TypeError):
    """Raised when no classifier is available for a pixel value type."""

    def __init__(self, value: object) -> None:
        self.value = value
        self.pixel_type = type(value)
        super().__init__(
            f"Unsupported pixel type: {self.pixel_type.__name__} ({value!r}), "
            "provide an explicit classifier"
        )


ClassifierTypeUnsupported = UnsupportedPixelType
