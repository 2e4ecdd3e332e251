"""
matcher.py
==========

Does: Rank a reference palette against one query color by ΔE and keep the top-k.
Returns: Ordered MatchResult lists (ascending distance, palette order on ties),
         or None from match_color() when the query text is not a color.
Used By: CLI and presentation collaborators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Union

from pantone_matcher.matching.color.constants import MATCH_PERCENT_CEILING
from pantone_matcher.matching.color.logic.quality import QualityTier, classify_distance
from pantone_matcher.matching.color.types import Lab
from pantone_matcher.matching.color.utils.conversions import rgb_to_lab
from pantone_matcher.matching.color.utils.delta_e import get_distance_fn
from pantone_matcher.matching.color.utils.parsing import parse_color_input
from pantone_matcher.matching.palette.reference import ReferenceColor
from pantone_matcher.matching.settings import MatcherSettings, get_settings

__all__ = ["MatchResult", "find_matches", "match_color"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

Metric = Union[str, Callable[[Sequence[float], Sequence[float]], float], None]


@dataclass(frozen=True)
class MatchResult:
    """One ranked candidate. Holds the reference record, never a copy of it."""

    reference: ReferenceColor
    distance: float
    quality: QualityTier
    rank: int

    @property
    def match_percentage(self) -> float:
        """100 for identical colors, 0 from ΔE 100 upward."""
        return MATCH_PERCENT_CEILING - min(self.distance, MATCH_PERCENT_CEILING)

    def to_dict(self) -> dict:
        ref = self.reference
        return {
            "rank": self.rank,
            "name": ref.name,
            "code": ref.code,
            "hex": ref.hex,
            "rgb": ref.rgb._asdict(),
            "lab": ref.lab._asdict(),
            "deltaE": self.distance,
            "match": self.match_percentage,
            "rating": self.quality.rating,
            "description": self.quality.description,
        }


def find_matches(
    query_lab: Sequence[float],
    references: Iterable[ReferenceColor],
    k: Optional[int] = 10,
    distance_fn: Metric = None,
) -> List[MatchResult]:
    """
    Does: Full scan of `references`, sorted ascending by distance_fn(query_lab, ref.lab).

    Args:
        query_lab: (L, a, b) of the query.
        references: reference records; read, never modified.
        k: number of results to keep; None keeps all, k <= 0 keeps none.
        distance_fn: metric name ("cie76", "ciede2000") or a callable;
            None means CIE76.

    Returns:
        Up to min(k, len(references)) results. Python's sort is stable, so equal
        distances keep the input order.
    """
    metric = get_distance_fn(distance_fn)
    if k is not None and k <= 0:
        return []

    scored = [(metric(query_lab, ref.lab), ref) for ref in references]
    scored.sort(key=lambda pair: pair[0])
    if k is not None:
        scored = scored[:k]

    return [
        MatchResult(reference=ref, distance=d, quality=classify_distance(d), rank=i)
        for i, (d, ref) in enumerate(scored, start=1)
    ]


def match_color(
    text: str,
    references: Iterable[ReferenceColor],
    k: Optional[int] = None,
    metric: Metric = None,
    *,
    settings: Optional[MatcherSettings] = None,
    debug: bool = False,
) -> Optional[List[MatchResult]]:
    """
    Does: Parse free-form color input (hex, rgb(), CSS name), convert to Lab, rank.

    `k` and `metric` fall back to MatcherSettings (max_results, default_metric)
    when not given; use find_matches(k=None) for a full ranking.

    Returns: The ranked list, or None if `text` is not a color.
    """
    rgb = parse_color_input(text, debug=debug)
    if rgb is None:
        if debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug("[INVALID INPUT] %r", text)
        return None

    if k is None or metric is None:
        settings = settings or get_settings()
        k = settings.max_results if k is None else k
        metric = settings.default_metric if metric is None else metric

    lab: Lab = rgb_to_lab(*rgb)
    results = find_matches(lab, references, k=k, distance_fn=metric)

    if debug and logger.isEnabledFor(logging.DEBUG):
        best = results[0] if results else None
        logger.debug(
            "[MATCH] %r → %s (ΔE=%s)",
            text,
            best.reference.name if best else None,
            f"{best.distance:.2f}" if best else "n/a",
        )
    return results
