"""Timer package."""

from .cycle import SessionType, advance, LONG_BREAK_INTERVAL
from .engine import (
    Notifier,
    SessionClock,
    TimerSnapshot,
    PRESET_DURATIONS,
    TICK_INTERVAL_MS,
    preset_for,
)

__all__ = [
    "Notifier",
    "SessionClock",
    "TimerSnapshot",
    "SessionType",
    "PRESET_DURATIONS",
    "TICK_INTERVAL_MS",
    "LONG_BREAK_INTERVAL",
    "advance",
    "preset_for",
]
