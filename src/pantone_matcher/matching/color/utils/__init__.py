"""
utils package.
=============

Does: Provide the pure color math (conversions, ΔE metrics) and input parsing
      shared by the matcher and palette modules.
"""

from .conversions import (
    hex_to_lab,
    hex_to_rgb,
    is_valid_hex,
    lab_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
)
from .delta_e import (
    DEFAULT_METRIC,
    METRICS,
    delta_e_76,
    delta_e_2000,
    get_distance_fn,
)
from .parsing import parse_color_input, parse_rgb_tuple, rgb_from_css_name

__all__ = [
    # conversions
    "is_valid_hex",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_lab",
    "lab_to_rgb",
    "hex_to_lab",
    "rgb_to_hsl",
    # distances
    "delta_e_76",
    "delta_e_2000",
    "METRICS",
    "DEFAULT_METRIC",
    "get_distance_fn",
    # parsing
    "parse_color_input",
    "parse_rgb_tuple",
    "rgb_from_css_name",
]

__docformat__ = "google"
