"""
settings.py
===========

Does: Load matcher defaults (metric, result count, palette file) from
      <data>/matcher_settings.json.
Used By: match_color(), CLI.
Returns: A frozen MatcherSettings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from pantone_matcher.matching.color.utils.delta_e import DEFAULT_METRIC, METRICS
from pantone_matcher.matching.general.utils import (
    ConfigFileNotFound,
    DataDirNotFound,
    load_config,
)

__all__ = ["MatcherSettings", "SETTINGS_FILE", "load_settings", "get_settings"]
__docformat__ = "google"

log = logging.getLogger(__name__)

SETTINGS_FILE = "matcher_settings"


@dataclass(frozen=True)
class MatcherSettings:
    default_metric: str = DEFAULT_METRIC
    max_results: int = 10
    palette_file: str = "pantone-colors"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MatcherSettings:
        """Does: Validate raw JSON; unknown keys are ignored, missing keys keep defaults."""
        base = cls()
        metric = str(data.get("default_metric", base.default_metric)).strip().lower()
        if metric not in METRICS:
            raise ValueError(f"default_metric must be one of {sorted(METRICS)}, got {metric!r}")

        max_results = data.get("max_results", base.max_results)
        if not isinstance(max_results, int) or isinstance(max_results, bool) or max_results < 1:
            raise ValueError(f"max_results must be a positive int, got {max_results!r}")

        palette_file = data.get("palette_file", base.palette_file)
        if not isinstance(palette_file, str) or not palette_file.strip():
            raise ValueError("palette_file must be a non-empty string")

        return cls(default_metric=metric, max_results=max_results, palette_file=palette_file)


def load_settings(*, base_dir: Path | None = None) -> MatcherSettings:
    """Does: Read matcher_settings.json; built-in defaults when the file is absent."""
    try:
        settings = load_config(
            SETTINGS_FILE,
            mode="validated_dict",
            base_dir=base_dir,
            validator=MatcherSettings.from_dict,
        )
    except (ConfigFileNotFound, DataDirNotFound):
        log.debug("No %s.json found; using built-in defaults", SETTINGS_FILE)
        return MatcherSettings()
    log.debug("Matcher settings: %s", settings)
    return settings


@lru_cache(maxsize=1)
def get_settings() -> MatcherSettings:
    """Does: Process-wide settings, read once. Call get_settings.cache_clear() to reload."""
    return load_settings()
