"""
color.
=====

Does: Aggregate core color-domain definitions (constants & value types) shared
      by the converter, the ΔE metrics, the classifier and the matcher.
Returns: Pure data structures; no side effects.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    D65_WHITE,
    QUALITY_TIER_TABLE,
    RGB_TO_XYZ,
    XYZ_TO_RGB,
)

# ── Types ────────────────────────────────────────────────────────────────────
from .types import HSL, RGB, DistanceFn, Lab

__all__ = [
    # constants
    "D65_WHITE",
    "RGB_TO_XYZ",
    "XYZ_TO_RGB",
    "QUALITY_TIER_TABLE",
    # types
    "RGB",
    "Lab",
    "HSL",
    "DistanceFn",
]
