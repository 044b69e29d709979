"""
Pixel classifiers: foreground (True) or background (False).

`is_foreground` dispatches on the pixel type. Booleans are their own
classification, small integers and characters are foreground when nonzero.
Any other type raises UnsupportedPixelType instead of being guessed;
pass an explicit classifier for those.
"""

from collections.abc import Callable
from functools import singledispatch

import numpy as np

from .errors import UnsupportedPixelType


@singledispatch
def is_foreground(value: object) -> bool:
    raise UnsupportedPixelType(value)


@is_foreground.register
def _(value: bool) -> bool:
    return value


@is_foreground.register
def _(value: int) -> bool:
    return value != 0


@is_foreground.register
def _(value: str) -> bool:
    if len(value) != 1:
        raise UnsupportedPixelType(value)
    return value != "\0"


@is_foreground.register
def _(value: bytes) -> bool:
    if len(value) != 1:
        raise UnsupportedPixelType(value)
    return value != b"\0"


@is_foreground.register
def _(value: np.bool_) -> bool:
    return bool(value)


@is_foreground.register
def _(value: np.integer) -> bool:
    return bool(value != 0)


# Explicit classifiers for other pixel types


def threshold_classifier(threshold: float) -> Callable[[float], bool]:
    """Foreground when the value is strictly above `threshold`."""

    def classify(value: float) -> bool:
        return value > threshold

    return classify


def equals_classifier[T](target: T) -> Callable[[T], bool]:
    """Foreground when the value equals `target`, e.g. one color of a palette."""

    def classify(value: T) -> bool:
        return value == target

    return classify
