"""
palette package.
===============

Does: Provide the read-only reference palette: records, loading, and lookup.
"""

from .loader import (
    DEFAULT_PALETTE_FILE,
    load_palette,
    load_palette_path,
    named_color_palette,
    parse_palette_payload,
)
from .reference import (
    PaletteFormatError,
    ReferenceColor,
    ReferencePalette,
    reference_from_hex,
    reference_from_lab,
    reference_from_mapping,
)
from .search import best_name_match, fuzzy_search, normalize_query

__all__ = [
    # records
    "PaletteFormatError",
    "ReferenceColor",
    "ReferencePalette",
    "reference_from_hex",
    "reference_from_lab",
    "reference_from_mapping",
    # loading
    "DEFAULT_PALETTE_FILE",
    "load_palette",
    "load_palette_path",
    "named_color_palette",
    "parse_palette_payload",
    # search
    "fuzzy_search",
    "best_name_match",
    "normalize_query",
]

__docformat__ = "google"
