"""
matching.
========

Does: Public façade over the converter, ΔE metrics, quality classifier,
      palette matcher and reference palette.
Used by: The CLI and external callers (`from pantone_matcher.matching import ...`).
"""
from __future__ import annotations

from .color import HSL, RGB, Lab
from .color.logic import (
    QUALITY_TIERS,
    MatchResult,
    QualityTier,
    classify_distance,
    find_matches,
    match_color,
)
from .color.utils import (
    METRICS,
    delta_e_76,
    delta_e_2000,
    get_distance_fn,
    hex_to_lab,
    hex_to_rgb,
    is_valid_hex,
    lab_to_rgb,
    normalize_hex,
    parse_color_input,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
)
from .palette import (
    PaletteFormatError,
    ReferenceColor,
    ReferencePalette,
    fuzzy_search,
    load_palette,
    load_palette_path,
    named_color_palette,
    reference_from_hex,
    reference_from_lab,
)
from .settings import MatcherSettings, get_settings, load_settings

__all__ = [
    # types
    "RGB",
    "Lab",
    "HSL",
    # converter
    "is_valid_hex",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_lab",
    "lab_to_rgb",
    "hex_to_lab",
    "rgb_to_hsl",
    "parse_color_input",
    # difference engine
    "delta_e_76",
    "delta_e_2000",
    "METRICS",
    "get_distance_fn",
    # classifier
    "QualityTier",
    "QUALITY_TIERS",
    "classify_distance",
    # matcher
    "MatchResult",
    "find_matches",
    "match_color",
    # palette
    "PaletteFormatError",
    "ReferenceColor",
    "ReferencePalette",
    "reference_from_hex",
    "reference_from_lab",
    "load_palette",
    "load_palette_path",
    "named_color_palette",
    "fuzzy_search",
    # settings
    "MatcherSettings",
    "load_settings",
    "get_settings",
]
__docformat__ = "google"
