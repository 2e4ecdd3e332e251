"""
quality.py

Does:
    Map a ΔE distance to a human-readable quality tier
    (Perfect / Excellent / Good / Fair / Poor).
Returns:
    classify_distance() → QualityTier; QUALITY_TIERS in evaluation order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pantone_matcher.matching.color.constants import QUALITY_TIER_TABLE

__all__ = ["QualityTier", "QUALITY_TIERS", "classify_distance"]


@dataclass(frozen=True)
class QualityTier:
    rating: str
    description: str
    css_class: str
    upper_bound: float


QUALITY_TIERS: Tuple[QualityTier, ...] = tuple(
    QualityTier(rating=rating, description=desc, css_class=css, upper_bound=bound)
    for bound, rating, desc, css in QUALITY_TIER_TABLE
)


def classify_distance(distance: float) -> QualityTier:
    """First tier whose exclusive upper bound exceeds the distance."""
    for tier in QUALITY_TIERS:
        if distance < tier.upper_bound:
            return tier
    return QUALITY_TIERS[-1]
