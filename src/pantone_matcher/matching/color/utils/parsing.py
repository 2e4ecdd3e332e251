"""
parsing.py
==========

Does: Turn free-form user input (hex, rgb() / tuple text, CSS color names)
      into an RGB triple for the matcher.
Used By: match_color(), the CLI.
Returns: RGB or None when the text is not a color.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import webcolors

from pantone_matcher.matching.color.types import RGB
from pantone_matcher.matching.color.utils.conversions import hex_to_rgb

__all__ = ["parse_color_input", "parse_rgb_tuple", "rgb_from_css_name"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_RGB_PATTERNS = [
    r"rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)",
    r"\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)",
    r"\[\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\]",
    r"(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})",
]


def parse_rgb_tuple(text: str, debug: bool = False) -> Optional[RGB]:
    """Does: Read 'rgb(r, g, b)', '(r,g,b)', '[r,g,b]' or 'r, g, b'; channels must be 0–255."""
    for pat in _RGB_PATTERNS:
        m = re.fullmatch(pat, text.strip(), flags=re.IGNORECASE)
        if m:
            r, g, b = map(int, m.groups())
            if all(0 <= v <= 255 for v in (r, g, b)):
                return RGB(r, g, b)
            if debug:
                logger.debug("[OUT-OF-RANGE] RGB out of bounds: %s, %s, %s", r, g, b)
            return None
    if debug:
        logger.debug("[PARSE FAIL] Could not extract RGB from: %r", text)
    return None


def rgb_from_css_name(name: str) -> Optional[RGB]:
    """Does: Resolve a CSS3 color name ('navy', 'RebeccaPurple') through webcolors."""
    key = re.sub(r"[\s_-]+", "", name.strip().lower())
    if not key:
        return None
    try:
        hx = webcolors.name_to_hex(key)
    except ValueError:
        return None
    return hex_to_rgb(hx)


def parse_color_input(text: object, debug: bool = False) -> Optional[RGB]:
    """
    Does: Parse user input as hex first, then an RGB triple, then a CSS name.
    Returns: RGB, or None if nothing matched.
    """
    if not isinstance(text, str):
        return None
    value = text.strip()
    if not value:
        return None

    rgb = hex_to_rgb(value)
    if rgb is not None:
        return rgb

    rgb = parse_rgb_tuple(value, debug=debug)
    if rgb is not None:
        return rgb

    rgb = rgb_from_css_name(value)
    if rgb is None and debug:
        logger.debug("[NO MATCH] %r is not hex, RGB or a CSS color name", value)
    return rgb
