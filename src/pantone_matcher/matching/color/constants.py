# constants.py
# ============

"""
constants.
=========

Does: Define the fixed numeric constants of the sRGB ↔ XYZ ↔ Lab pipeline and
      the ΔE quality tier table.
Used By: conversions, delta_e, quality classifier.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

from typing import Tuple

Matrix3 = Tuple[Tuple[float, float, float], ...]

# ── 1) sRGB transfer function ────────────────────────────────────────────────
SRGB_LINEAR_THRESHOLD = 0.04045      # encoded value where the power curve starts
SRGB_ENCODE_THRESHOLD = 0.0031308    # linear value where the power curve starts
SRGB_GAMMA = 2.4
SRGB_LINEAR_SLOPE = 12.92

# ── 2) Linear RGB ↔ XYZ (D65) ────────────────────────────────────────────────
RGB_TO_XYZ: Matrix3 = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_RGB: Matrix3 = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# D65 reference white, on the 0-100 scale
D65_WHITE: Tuple[float, float, float] = (95.047, 100.000, 108.883)

# ── 3) Lab nonlinearity ──────────────────────────────────────────────────────
LAB_EPSILON = 0.008856        # forward cube-root threshold
LAB_INVERSE_EPSILON = 0.206897  # cube root of LAB_EPSILON, for the inverse
LAB_KAPPA_SLOPE = 7.787
LAB_OFFSET = 16 / 116

# ── 4) CIEDE2000 ─────────────────────────────────────────────────────────────
POW25_7 = 25 ** 7

# ── 5) Quality tiers: (exclusive upper bound, rating, description, css class) ─
# Evaluated top-down; the last row catches everything else.
QUALITY_TIER_TABLE: Tuple[Tuple[float, str, str, str], ...] = (
    (1.0, "Perfect", "Not perceptible by human eyes", "perfect"),
    (2.0, "Excellent", "Perceptible through close observation", "excellent"),
    (10.0, "Good", "Perceptible at a glance", "good"),
    (50.0, "Fair", "Colors are more similar than opposite", "fair"),
    (float("inf"), "Poor", "Colors are significantly different", "poor"),
)

# Distance at which the "match %" figure bottoms out at 0
MATCH_PERCENT_CEILING = 100.0
