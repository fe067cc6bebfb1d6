"""Timeline scheduling: playback delays and timestamp labels."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from .errors import RenderError

# 1 recorded second plays back as 100 ms
DEFAULT_SCALE_FACTOR = 100.0
DEFAULT_MAX_DELAY_MS = 2000.0


def delay(
    previous_t: float,
    current_t: float,
    *,
    scale_factor: float = DEFAULT_SCALE_FACTOR,
    cap_ms: float = DEFAULT_MAX_DELAY_MS,
) -> float:
    """Return the wait in milliseconds before playing the next event.

    The gap between the two timestamps is scaled and clamped to
    ``[0, cap_ms]``. Out-of-order timestamps yield no wait.
    """
    wait_ms = (current_t - previous_t) * scale_factor
    if wait_ms <= 0:
        return 0.0
    return float(min(wait_ms, cap_ms))


def require_time(value: Any) -> float:
    """Return ``value`` as an event time, or raise RenderError."""
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise RenderError(f"Event time must be a number, got {value!r}")
    return value


def format_timestamp(t: Any) -> str:
    """Format seconds since session start as ``MM:SS``.

    Fractional seconds are truncated. Negative times get a leading minus.
    """
    seconds = require_time(t)
    sign = "-" if seconds < 0 else ""
    total = int(abs(seconds))
    minutes, remaining = divmod(total, 60)
    return f"{sign}{minutes:02d}:{remaining:02d}"
