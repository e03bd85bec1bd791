"""Timers — Duration value type and thread-backed Timer."""

from island.core.timers.duration import Duration
from island.core.timers.timer import Timer

__all__ = ["Duration", "Timer"]
