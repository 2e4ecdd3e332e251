"""
conversions.py
==============

Does: Convert between hex strings, sRGB, CIE Lab (D65) and HSL.
Used By: Palette loading/building, query parsing, the matcher.
Returns: RGB / Lab / HSL NamedTuples, hex strings, or None for malformed hex.

Notes:
- Malformed hex input is reported with None, never an exception; callers decide
  whether that becomes a user-facing message.
- The Lab pipeline keeps full float precision; rounding only happens when
  palette records are built for storage.
"""

from __future__ import annotations

import math
import re
from functools import lru_cache
from typing import Optional

from pantone_matcher.matching.color.constants import (
    D65_WHITE,
    LAB_EPSILON,
    LAB_INVERSE_EPSILON,
    LAB_KAPPA_SLOPE,
    LAB_OFFSET,
    RGB_TO_XYZ,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_LINEAR_THRESHOLD,
    XYZ_TO_RGB,
)
from pantone_matcher.matching.color.types import HSL, RGB, Lab

__all__ = [
    "is_valid_hex",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_lab",
    "lab_to_rgb",
    "hex_to_lab",
    "rgb_to_hsl",
]
__docformat__ = "google"

_HEX6_RE = re.compile(r"[0-9a-fA-F]{6}")
_HEX3_OR_6_RE = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


# =============================================================================
# 1) HEX
# =============================================================================

def _strip_hash(value: str) -> str:
    return value[1:] if value.startswith("#") else value


def is_valid_hex(value: object) -> bool:
    """Does: True iff value is exactly 3 or 6 hex digits after an optional '#'."""
    if not isinstance(value, str):
        return False
    return _HEX3_OR_6_RE.fullmatch(_strip_hash(value)) is not None


def _expand_hex(value: object) -> Optional[str]:
    """Strip '#', expand 3-digit shorthand, return 6 digits or None."""
    if not isinstance(value, str):
        return None
    digits = _strip_hash(value)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if _HEX6_RE.fullmatch(digits) is None:
        return None
    return digits


def hex_to_rgb(value: str) -> Optional[RGB]:
    """Does: Parse '#RRGGBB', 'RRGGBB' or '#RGB' (any case) into RGB; None if malformed."""
    digits = _expand_hex(value)
    if digits is None:
        return None
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _channel_to_hex(value: float) -> str:
    return f"{_round_half_up(max(0.0, min(255.0, float(value)))):02x}"


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Does: Clamp each channel to [0,255], round, and format as '#rrggbb'."""
    return "#" + "".join(_channel_to_hex(c) for c in (r, g, b))


def normalize_hex(value: str) -> Optional[str]:
    """Does: Return the canonical lowercase '#rrggbb' form, or None if malformed."""
    digits = _expand_hex(value)
    return None if digits is None else f"#{digits.lower()}"


# =============================================================================
# 2) LAB
# =============================================================================

def _validate_rgb(r: float, g: float, b: float) -> None:
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {(r, g, b)}")


def _srgb_to_linear(v: float) -> float:
    return ((v + 0.055) / 1.055) ** SRGB_GAMMA if v > SRGB_LINEAR_THRESHOLD else v / SRGB_LINEAR_SLOPE


def _linear_to_srgb(v: float) -> float:
    if v > SRGB_ENCODE_THRESHOLD:
        return 1.055 * v ** (1 / SRGB_GAMMA) - 0.055
    return SRGB_LINEAR_SLOPE * v


def _f_lab(t: float) -> float:
    return t ** (1 / 3) if t > LAB_EPSILON else LAB_KAPPA_SLOPE * t + LAB_OFFSET


def _f_lab_inverse(t: float) -> float:
    return t ** 3 if t > LAB_INVERSE_EPSILON else (t - LAB_OFFSET) / LAB_KAPPA_SLOPE


@lru_cache(maxsize=4096)
def _rgb_to_lab(r: float, g: float, b: float) -> Lab:
    lin = [_srgb_to_linear(c / 255) for c in (r, g, b)]
    x, y, z = (sum(m * c for m, c in zip(row, lin)) for row in RGB_TO_XYZ)

    # D65-normalized, on the 0..1 scale
    xn, yn, zn = D65_WHITE
    fx = _f_lab(x * 100 / xn)
    fy = _f_lab(y * 100 / yn)
    fz = _f_lab(z * 100 / zn)

    return Lab(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def rgb_to_lab(r: float, g: float, b: float) -> Lab:
    """Does: Convert sRGB (0-255 per channel) to CIE Lab under D65.

    Raises:
        ValueError: if any channel lies outside [0, 255].
    """
    _validate_rgb(r, g, b)
    return _rgb_to_lab(r, g, b)


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    """Does: Invert rgb_to_lab; out-of-gamut results are clamped into [0,255]."""
    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    xn, yn, zn = D65_WHITE
    xyz = (
        _f_lab_inverse(fx) * xn / 100,
        _f_lab_inverse(fy) * yn / 100,
        _f_lab_inverse(fz) * zn / 100,
    )
    lin = [sum(m * c for m, c in zip(row, xyz)) for row in XYZ_TO_RGB]

    out = [max(0, min(255, _round_half_up(_linear_to_srgb(c) * 255))) for c in lin]
    return RGB(*out)


def hex_to_lab(value: str) -> Optional[Lab]:
    """Does: hex_to_rgb then rgb_to_lab; None when the hex is malformed."""
    rgb = hex_to_rgb(value)
    if rgb is None:
        return None
    return rgb_to_lab(*rgb)


# =============================================================================
# 3) HSL
# =============================================================================

def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Does: Standard max/min HSL; hue in degrees, saturation/lightness in percent."""
    r, g, b = r / 255, g / 255, b / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    light = (hi + lo) / 2

    if hi == lo:
        return HSL(0, 0, _round_half_up(light * 100))

    d = hi - lo
    sat = d / (2 - hi - lo) if light > 0.5 else d / (hi + lo)
    if hi == r:
        hue = ((g - b) / d + (6 if g < b else 0)) / 6
    elif hi == g:
        hue = ((b - r) / d + 2) / 6
    else:
        hue = ((r - g) / d + 4) / 6

    return HSL(
        _round_half_up(hue * 360),
        _round_half_up(sat * 100),
        _round_half_up(light * 100),
    )
