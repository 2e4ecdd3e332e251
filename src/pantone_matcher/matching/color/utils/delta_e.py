"""
delta_e.py
==========

Does: Compute perceptual color differences between two Lab triples
      (CIE76 Euclidean and CIEDE2000) and resolve metrics by name.
Used By: The palette matcher and any caller ranking colors.
Returns: Non-negative finite floats.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Sequence, Union

from pantone_matcher.matching.color.constants import POW25_7

__all__ = [
    "delta_e_76",
    "delta_e_2000",
    "METRICS",
    "DEFAULT_METRIC",
    "get_distance_fn",
]
__docformat__ = "google"

LabLike = Sequence[float]


def delta_e_76(lab1: LabLike, lab2: LabLike) -> float:
    """Does: CIE76 ΔE, the Euclidean distance in Lab space."""
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    return math.hypot(L1 - L2, a1 - a2, b1 - b2)


def _hue_deg(b: float, a_prime: float) -> float:
    """atan2 in degrees, folded into [0, 360)."""
    return (math.degrees(math.atan2(b, a_prime)) + 360) % 360


def _chroma_ratio(c: float) -> float:
    """c^7 / (c^7 + 25^7), evaluated without overflow for large chroma."""
    if c <= 25:
        c7 = c ** 7
        return c7 / (c7 + POW25_7)
    return 1 / (1 + (25 / c) ** 7)


def delta_e_2000(
    lab1: LabLike,
    lab2: LabLike,
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> float:
    """
    Does: CIEDE2000 ΔE (Sharma et al. formulation).

    Both inputs are (L, a, b). The weighting factors default to 1, the
    reference conditions. Hue wraparound and zero-chroma cases follow the
    standard branch rules; the result is symmetric in its two arguments.
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    # Chroma and the a' correction for the blue region
    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    Cab = (C1 + C2) / 2
    G = 0.5 * (1 - math.sqrt(_chroma_ratio(Cab)))

    a1p = (1 + G) * a1
    a2p = (1 + G) * a2
    C1p = math.hypot(a1p, b1)
    C2p = math.hypot(a2p, b2)

    h1p = _hue_deg(b1, a1p)
    h2p = _hue_deg(b2, a2p)

    dLp = L2 - L1
    dCp = C2p - C1p

    achromatic = C1p == 0 or C2p == 0
    if achromatic:
        dhp = 0.0
    elif abs(h2p - h1p) <= 180:
        dhp = h2p - h1p
    elif h2p - h1p > 180:
        dhp = h2p - h1p - 360
    else:
        dhp = h2p - h1p + 360

    dHp = 2 * math.sqrt(C1p) * math.sqrt(C2p) * math.sin(math.radians(dhp / 2))

    Lbar = (L1 + L2) / 2
    Cbar = (C1p + C2p) / 2

    # Mean hue on the shorter arc
    if achromatic:
        Hbar = h1p + h2p
    elif abs(h1p - h2p) <= 180:
        Hbar = (h1p + h2p) / 2
    elif h1p + h2p < 360:
        Hbar = (h1p + h2p + 360) / 2
    else:
        Hbar = (h1p + h2p - 360) / 2

    T = (
        1
        - 0.17 * math.cos(math.radians(Hbar - 30))
        + 0.24 * math.cos(math.radians(2 * Hbar))
        + 0.32 * math.cos(math.radians(3 * Hbar + 6))
        - 0.20 * math.cos(math.radians(4 * Hbar - 63))
    )

    # (L-50)^2 / sqrt(20 + (L-50)^2), written so large L cannot overflow
    dL50 = abs(Lbar - 50)
    SL = 1 + 0.015 * dL50 * (dL50 / math.hypot(math.sqrt(20), dL50))
    SC = 1 + 0.045 * Cbar
    SH = 1 + 0.015 * Cbar * T

    d_theta = 30 * math.exp(-(((Hbar - 275) / 25) ** 2))
    RC = 2 * math.sqrt(_chroma_ratio(Cbar))
    RT = -RC * math.sin(math.radians(2 * d_theta))

    tL = dLp / (kL * SL)
    tC = dCp / (kC * SC)
    tH = dHp / (kH * SH)

    # |RT| <= 2 keeps this >= 0 up to float noise
    return math.sqrt(max(0.0, tL * tL + tC * tC + tH * tH + RT * tC * tH))


# ── Metric registry ──────────────────────────────────────────────────────────
METRICS: Dict[str, Callable[[LabLike, LabLike], float]] = {
    "cie76": delta_e_76,
    "ciede2000": delta_e_2000,
}

DEFAULT_METRIC = "cie76"


def get_distance_fn(
    metric: Union[str, Callable[[LabLike, LabLike], float], None] = None,
) -> Callable[[LabLike, LabLike], float]:
    """Does: Resolve a metric name (case-insensitive) or pass a callable through.

    Raises:
        ValueError: for an unknown metric name.
    """
    if metric is None:
        metric = DEFAULT_METRIC
    if callable(metric):
        return metric
    key = str(metric).strip().lower()
    try:
        return METRICS[key]
    except KeyError:
        raise ValueError(
            f"Unknown metric {metric!r}; expected one of {sorted(METRICS)}"
        ) from None
