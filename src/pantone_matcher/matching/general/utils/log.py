"""
log.py.

Does: Topic-gated debug printer controlled by PANTONE_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the CLI and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enable_topics", "reload_topics"]

_ENV_VAR = "PANTONE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable PANTONE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Switch on extra topics for this process (e.g. from a --debug flag)."""
    _DEBUG_TOPICS.update(t.strip().lower() for t in topics if t.strip())


def debug(
    msg: str,
    topic: str = "matching",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    when the topic is enabled.
    """
    topic_key = topic.lower().strip()
    if not _DEBUG_TOPICS:
        return
    if "all" not in _DEBUG_TOPICS and topic_key not in _DEBUG_TOPICS:
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
