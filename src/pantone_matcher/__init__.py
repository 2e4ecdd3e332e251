"""
pantone_matcher
===============

Does: Root package for the spot-color matcher (color math, ΔE ranking, palettes).
Returns: Re-exports the everyday entry points from `matching`.
Used by: CLI, tests, presentation collaborators.
"""

from pantone_matcher.matching import (
    MatchResult,
    ReferenceColor,
    ReferencePalette,
    classify_distance,
    delta_e_76,
    delta_e_2000,
    find_matches,
    hex_to_lab,
    hex_to_rgb,
    load_palette,
    match_color,
)

__all__ = [
    "MatchResult",
    "ReferenceColor",
    "ReferencePalette",
    "classify_distance",
    "delta_e_76",
    "delta_e_2000",
    "find_matches",
    "hex_to_lab",
    "hex_to_rgb",
    "load_palette",
    "match_color",
]
__version__ = "0.1.0"
__docformat__ = "google"
