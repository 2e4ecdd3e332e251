# pantone_matcher/matching/color/types.py
from __future__ import annotations

from typing import Callable, NamedTuple

"""
types.py.

Does: Define the small immutable value types passed between the converter,
the difference engine and the matcher. NamedTuples so they unpack like tuples.
"""


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class Lab(NamedTuple):
    L: float
    a: float
    b: float


class HSL(NamedTuple):
    """Hue in degrees [0, 360], saturation and lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741


DistanceFn = Callable[[Lab, Lab], float]

__all__ = ["RGB", "Lab", "HSL", "DistanceFn"]

__docformat__ = "google"
