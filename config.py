"""
config.py
Settings read from environment variables.
"""

from __future__ import annotations

import os

DEFAULT_INSIGHTS_DELAY = 1.5
DEFAULT_TOP_CONTRIBUTORS = 5


def log_level() -> str:
    return os.getenv("CLUBSYNC_LOG_LEVEL", "INFO").upper()


def insights_delay() -> float:
    """
    Seconds the mock insight generator waits before answering.
    Override with CLUBSYNC_INSIGHTS_DELAY; invalid or negative values use the default.
    """
    raw = os.getenv("CLUBSYNC_INSIGHTS_DELAY")
    if not raw:
        return DEFAULT_INSIGHTS_DELAY
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_INSIGHTS_DELAY
    return value if value >= 0 else DEFAULT_INSIGHTS_DELAY


def top_contributors_limit() -> int:
    raw = os.getenv("CLUBSYNC_TOP_CONTRIBUTORS")
    try:
        value = int(raw) if raw else DEFAULT_TOP_CONTRIBUTORS
    except ValueError:
        return DEFAULT_TOP_CONTRIBUTORS
    return value if value > 0 else DEFAULT_TOP_CONTRIBUTORS
