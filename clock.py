# clock.py
from __future__ import annotations
import logging
import math

from settings import MAX_FRAME_DT

logger = logging.getLogger(__name__)


def sanitize_delta(dt: float, max_dt: float = MAX_FRAME_DT) -> float:
    """Clamp a frame delta (ms) into [0, max_dt]; NaN and negatives become 0."""
    if math.isnan(dt) or dt <= 0.0:
        return 0.0
    if dt > max_dt:
        logger.warning("frame delta %.1f ms clamped to %.1f ms", dt, max_dt)
        return max_dt
    return dt


class Clock:
    """Turns a monotonically increasing timestamp feed (ms) into frame deltas."""

    def __init__(self, max_dt: float = MAX_FRAME_DT):
        self.max_dt = max_dt
        self._last: float | None = None

    def tick(self, timestamp: float) -> float:
        if self._last is None:
            # First frame has no previous timestamp to diff against
            self._last = timestamp
            return 0.0
        dt = timestamp - self._last
        # Never step the reference backwards on a stale timestamp
        self._last = max(self._last, timestamp)
        return sanitize_delta(dt, self.max_dt)

    def reset(self):
        self._last = None
