"""Cycle tracking: which session comes after the one that just finished.

A pure function of explicit state.  It never reads the clock, so the
answer cannot depend on anything captured earlier.
"""

from __future__ import annotations

from enum import Enum


class SessionType(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


LONG_BREAK_INTERVAL = 4  # every 4th completed work session earns a long break


def advance(
    completed_type: SessionType, cycles_completed: int
) -> tuple[SessionType, int]:
    """Return ``(next_type, next_cycles_completed)``.

    Work completions bump the cycle count and route to a long break on
    every ``LONG_BREAK_INTERVAL``-th cycle, a short break otherwise.
    Break completions always route back to Work and leave the count alone.
    """
    if cycles_completed < 0:
        raise ValueError(f"cycles_completed must be >= 0, got {cycles_completed}")

    if completed_type == SessionType.WORK:
        next_cycles = cycles_completed + 1
        if next_cycles % LONG_BREAK_INTERVAL == 0:
            return SessionType.LONG_BREAK, next_cycles
        return SessionType.SHORT_BREAK, next_cycles

    return SessionType.WORK, cycles_completed
