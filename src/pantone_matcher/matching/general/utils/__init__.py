# pantone_matcher/matching/general/utils/__init__.py
"""

Does: Provide data-file loading and lightweight debug logging utilities for the matcher.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Palette loader, matcher settings, CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    enable_topics,
    reload_topics,
)

__all__ = [
    # Data loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "enable_topics",
    "reload_topics",
]
