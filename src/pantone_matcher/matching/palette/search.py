# src/pantone_matcher/matching/palette/search.py
from __future__ import annotations

"""
search.py

Does: Typo-tolerant lookup of palette entries by name or code.
Returns: (ReferenceColor, score) pairs ranked by similarity, best first.
Used by: Picker/search collaborators and the CLI name lookup.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from rapidfuzz import fuzz, process

from pantone_matcher.matching.palette.reference import ReferenceColor

__all__ = ["normalize_query", "fuzzy_search", "best_name_match"]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_SCORE_CUTOFF = 70
DEFAULT_LIMIT = 10
_PREFIX = "pantone "


def normalize_query(text: str) -> str:
    """
    Does: Lowercase, map hyphens/underscores to spaces, collapse spaces and
          drop a leading 'pantone' so '2097-c' and 'PANTONE 2097 C' compare equal.
    """
    s = (text or "").lower().replace("-", " ").replace("_", " ")
    s = " ".join(s.split())
    if s.startswith(_PREFIX):
        s = s[len(_PREFIX):]
    return s


def fuzzy_search(
    colors: Iterable[ReferenceColor],
    query: str,
    limit: int = DEFAULT_LIMIT,
    score_cutoff: float = DEFAULT_SCORE_CUTOFF,
) -> List[Tuple[ReferenceColor, float]]:
    """
    Does: Score every entry's name and code against the query (token-set ratio)
          and keep the better of the two.
    Returns: Up to `limit` pairs with score >= score_cutoff; ties keep palette order.
    """
    q = normalize_query(query)
    if not q or limit <= 0:
        return []

    entries = list(colors)
    choices = {i: f"{normalize_query(c.name)} | {normalize_query(c.code)}" for i, c in enumerate(entries)}
    hits = process.extract(
        q,
        choices,
        scorer=_entry_score,
        limit=None,
        score_cutoff=score_cutoff,
    )
    ranked = sorted(((score, key) for _, score, key in hits), key=lambda t: (-t[0], t[1]))
    out = [(entries[key], float(score)) for score, key in ranked[:limit]]
    log.debug("fuzzy_search(%r): %d hit(s)", query, len(out))
    return out


def _entry_score(query: str, choice: str, **_kwargs) -> float:
    # process.extract filters on score_cutoff itself
    name, _, code = choice.partition(" | ")
    return max(fuzz.token_set_ratio(query, name), fuzz.ratio(query, code))


def best_name_match(
    colors: Iterable[ReferenceColor],
    query: str,
    score_cutoff: float = DEFAULT_SCORE_CUTOFF,
) -> Optional[ReferenceColor]:
    """Does: Return the single best fuzzy hit, or None."""
    hits = fuzzy_search(colors, query, limit=1, score_cutoff=score_cutoff)
    return hits[0][0] if hits else None
