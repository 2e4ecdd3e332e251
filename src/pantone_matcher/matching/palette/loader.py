"""
loader.py
=========

Does: Load the reference palette JSON from the data directory and build
      alternative palettes from web named colors (CSS4 / XKCD).
Used By: CLI, matcher callers, tests.
Returns: ReferencePalette instances (read-only once built).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pantone_matcher.matching.general.utils import ConfigTypeError, load_config
from pantone_matcher.matching.palette.reference import (
    PaletteFormatError,
    ReferencePalette,
    reference_from_hex,
    reference_from_mapping,
)

__all__ = [
    "DEFAULT_PALETTE_FILE",
    "parse_palette_payload",
    "load_palette",
    "load_palette_path",
    "named_color_palette",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

DEFAULT_PALETTE_FILE = "pantone-colors"
NamedSource = Literal["css4", "xkcd"]


# =============================================================================
# 1) JSON PALETTES
# =============================================================================

def parse_palette_payload(payload: dict[str, Any]) -> ReferencePalette:
    """
    Does: Validate a {metadata, colors:[...]} document and build the palette.

    Raises:
        ConfigTypeError: if 'colors' is not a list or 'metadata' not an object.
        PaletteFormatError: for a malformed record.
    """
    colors = payload.get("colors")
    if not isinstance(colors, list):
        raise ConfigTypeError(f"palette: 'colors' must be a list, got {type(colors).__name__}")
    metadata = payload.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise ConfigTypeError("palette: 'metadata' must be an object")

    records = tuple(reference_from_mapping(rec, i) for i, rec in enumerate(colors))
    return ReferencePalette(colors=records, metadata=metadata)


def load_palette(
    file: str = DEFAULT_PALETTE_FILE,
    *,
    base_dir: Path | None = None,
) -> ReferencePalette:
    """Does: Load <data>/<file>.json as a ReferencePalette."""
    palette = load_config(
        file,
        mode="validated_dict",
        base_dir=base_dir,
        validator=parse_palette_payload,
    )
    logger.debug(
        "Loaded palette %r: %d colors (%s)", file, len(palette), palette.title or "untitled"
    )
    return palette


def load_palette_path(path: str | Path) -> ReferencePalette:
    """Does: Load a palette JSON from an explicit file path."""
    p = Path(path).expanduser().resolve()
    return load_palette(p.name, base_dir=p.parent)


# =============================================================================
# 2) NAMED WEB COLORS (lazy import)
# =============================================================================

@lru_cache(maxsize=2)
def named_color_palette(source: NamedSource = "css4") -> ReferencePalette:
    """Does: Build a palette from matplotlib's CSS4 or XKCD color tables (cached)."""
    from matplotlib.colors import CSS4_COLORS, XKCD_COLORS

    if source == "css4":
        table, title = CSS4_COLORS, "CSS4 named colors"
    elif source == "xkcd":
        table, title = XKCD_COLORS, "XKCD color survey"
    else:
        raise ValueError(f"Unknown named palette {source!r}; expected 'css4' or 'xkcd'")

    colors = []
    for key, hx in table.items():
        name = key.replace("xkcd:", "")
        try:
            colors.append(reference_from_hex(name, name.replace(" ", "-"), hx))
        except PaletteFormatError:
            logger.debug("Skipping named color %r with hex %r", key, hx)
    return ReferencePalette(colors=tuple(colors), metadata={"title": title, "colorModel": "RGB"})
