"""
logic package.
=============

Does: Quality classification and palette ranking built on the color utils.
"""

from .matcher import MatchResult, find_matches, match_color
from .quality import QUALITY_TIERS, QualityTier, classify_distance

__all__ = [
    "QualityTier",
    "QUALITY_TIERS",
    "classify_distance",
    "MatchResult",
    "find_matches",
    "match_color",
]
