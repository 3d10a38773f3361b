"""Focus-session clock for FocusDash.

States
------
(phase, running)   phase ∈ {WORK, SHORT_BREAK, LONG_BREAK}

Transitions
-----------
paused  → running     start          (same phase, no-op at 0 s)
running → paused      pause          (time frozen)
any     → paused      reset          (time reloaded to the phase preset)
paused  → paused      switch_type    (new phase, time reloaded; refused while running)
running → paused      tick reaches 0 (phase advanced by ``cycle.advance``)

The clock never auto-starts the next phase; the user presses Start again.

Tick handle
-----------
At most one ``QTimer`` is alive at a time.  It is created by
``_acquire_tick`` and destroyed only by ``_release_tick``, which every
command calls before doing anything else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from datetime import datetime

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..errors import InvalidTransition
from .cycle import SessionType, advance

logger = logging.getLogger(__name__)


# ── constants ─────────────────────────────────────────────────────────────

PRESET_DURATIONS: dict[SessionType, int] = {
    SessionType.WORK: 25 * 60,
    SessionType.SHORT_BREAK: 5 * 60,
    SessionType.LONG_BREAK: 15 * 60,
}

TICK_INTERVAL_MS = 1000


def preset_for(session_type: SessionType) -> int:
    """Full length of *session_type* in seconds."""
    return PRESET_DURATIONS[session_type]


class Notifier(Protocol):
    """Anything the clock can hand a finished phase to."""

    def notify(
        self, completed_type: SessionType, *, sound_enabled: bool = True,
    ) -> None: ...


# ── read model ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable view of the clock.  A new one is committed per transition."""

    session_type: SessionType = SessionType.WORK
    time_left: int = PRESET_DURATIONS[SessionType.WORK]
    is_running: bool = False
    cycles_completed: int = 0
    sound_enabled: bool = True

    @property
    def preset(self) -> int:
        return PRESET_DURATIONS[self.session_type]

    @property
    def progress(self) -> float:
        """0.0 → 1.0 progress through the current phase."""
        total = self.preset
        return max(0.0, min(1.0, (total - self.time_left) / total))


# ── engine ────────────────────────────────────────────────────────────────


class SessionClock(QObject):
    """Sole owner of the timer state and of its one-second tick handle.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every decrement that does not finish the phase.
    state_changed(snapshot: TimerSnapshot)
        Emitted after every committed transition.
    session_completed(data: dict)
        Emitted after a phase runs out.  Keys: ``completed_type``,
        ``next_type``, ``cycles_completed``, ``end_time``.
    transition_rejected(error: InvalidTransition)
        Emitted when ``switch_type`` is refused.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    session_completed = pyqtSignal(object)
    transition_rejected = pyqtSignal(object)

    def __init__(
        self,
        notifier: Notifier | None = None,
        parent: QObject | None = None,
        *,
        sound_enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._notifier = notifier
        self._snapshot = TimerSnapshot(sound_enabled=sound_enabled)
        self._tick_timer: QTimer | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def snapshot(self) -> TimerSnapshot:
        return self._snapshot

    @property
    def session_type(self) -> SessionType:
        return self._snapshot.session_type

    @property
    def time_left(self) -> int:
        """Seconds left on the clock."""
        return self._snapshot.time_left

    @property
    def is_running(self) -> bool:
        return self._snapshot.is_running

    @property
    def cycles_completed(self) -> int:
        return self._snapshot.cycles_completed

    @property
    def sound_enabled(self) -> bool:
        return self._snapshot.sound_enabled

    @property
    def progress(self) -> float:
        return self._snapshot.progress

    @property
    def has_live_tick(self) -> bool:
        """True while a tick handle is held."""
        return self._tick_timer is not None

    # ══════════════════════════════════════════════════════════════════
    #  COMMANDS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin (or resume) counting down.  No-op at 0 s or when running."""
        snap = self._snapshot
        if snap.is_running or snap.time_left <= 0:
            return
        self._release_tick()
        # Handle must exist before observers run; a slot may pause at once
        self._acquire_tick()
        self._commit(replace(snap, is_running=True))

    def pause(self) -> None:
        """Freeze the countdown.  Idempotent."""
        self._release_tick()
        if not self._snapshot.is_running:
            return
        self._commit(replace(self._snapshot, is_running=False))

    def reset(self) -> None:
        """Stop and reload the current phase's full duration."""
        self._release_tick()
        snap = self._snapshot
        self._commit(replace(
            snap,
            is_running=False,
            time_left=preset_for(snap.session_type),
        ))

    def switch_type(self, session_type: SessionType) -> bool:
        """Load *session_type* paused at its full duration.

        Refused while running (pause first).  Returns whether the switch
        was applied.
        """
        if self._snapshot.is_running:
            error = InvalidTransition(
                "switch_type", "clock is running; pause it first",
            )
            logger.warning("%s (requested %s)", error, session_type.value)
            self.transition_rejected.emit(error)
            return False

        self._release_tick()
        self._commit(replace(
            self._snapshot,
            session_type=session_type,
            time_left=preset_for(session_type),
            is_running=False,
        ))
        return True

    def set_sound_enabled(self, enabled: bool) -> None:
        if enabled == self._snapshot.sound_enabled:
            return
        self._commit(replace(self._snapshot, sound_enabled=enabled))

    def shutdown(self) -> None:
        """Release the tick handle.  Call when the clock is torn down."""
        self._release_tick()
        if self._snapshot.is_running:
            self._snapshot = replace(self._snapshot, is_running=False)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _acquire_tick(self) -> None:
        timer = QTimer(self)
        timer.setInterval(TICK_INTERVAL_MS)
        timer.timeout.connect(self._on_tick)
        self._tick_timer = timer
        timer.start()

    def _release_tick(self) -> None:
        timer = self._tick_timer
        if timer is None:
            return
        self._tick_timer = None
        timer.stop()
        timer.timeout.disconnect(self._on_tick)
        timer.deleteLater()

    def _on_tick(self) -> None:
        snap = self._snapshot
        if not snap.is_running:
            # Late delivery after a pause/reset; nothing to decrement
            return

        remaining = snap.time_left - 1
        if remaining > 0:
            self._snapshot = replace(snap, time_left=remaining)
            self.tick.emit(remaining)
            return

        self._finish_session()

    def _finish_session(self) -> None:
        self._release_tick()
        snap = replace(self._snapshot, is_running=False)
        self._snapshot = snap
        completed_type = snap.session_type

        if self._notifier is not None:
            try:
                self._notifier.notify(
                    completed_type, sound_enabled=snap.sound_enabled,
                )
            except Exception:
                logger.exception(
                    "Completion notifier failed for %s", completed_type.value,
                )

        next_type, next_cycles = advance(completed_type, snap.cycles_completed)
        self._commit(TimerSnapshot(
            session_type=next_type,
            time_left=preset_for(next_type),
            is_running=False,
            cycles_completed=next_cycles,
            sound_enabled=snap.sound_enabled,
        ))
        logger.info(
            "%s session complete; next %s (cycles=%d)",
            completed_type.value, next_type.value, next_cycles,
        )
        self.session_completed.emit({
            "completed_type": completed_type,
            "next_type": next_type,
            "cycles_completed": next_cycles,
            "end_time": datetime.now(),
        })

    def _commit(self, snapshot: TimerSnapshot) -> None:
        self._snapshot = snapshot
        logger.debug("state → %s", snapshot)
        self.state_changed.emit(snapshot)
