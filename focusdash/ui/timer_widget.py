"""Main timer display widget.

Layout (top → bottom):
    - Session-type selector (Focus / Short break / Long break)
    - ProgressRing (large, centred)
    - Main action row: Reset, Start/Pause, sound toggle
    - Completed-cycles line

The widget only renders ``SessionClock`` snapshots and forwards button
presses as clock commands.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QSizePolicy, QButtonGroup,
)

from ..timer.cycle import SessionType
from ..timer.engine import SessionClock, TimerSnapshot, PRESET_DURATIONS
from .progress_ring import ProgressRing
from .styles import ring_colors


SESSION_LABELS: dict[SessionType, str] = {
    SessionType.WORK:        "FOCUS",
    SessionType.SHORT_BREAK: "SHORT BREAK",
    SessionType.LONG_BREAK:  "LONG BREAK",
}

SESSION_BUTTON_TEXT: dict[SessionType, str] = {
    st: f"{SESSION_LABELS[st].title()}\n{PRESET_DURATIONS[st] // 60} min"
    for st in SessionType
}


def format_time(seconds: int) -> str:
    """Render seconds as zero-padded ``MM:SS``."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class TimerWidget(QWidget):
    """The timer card: ring, controls and session selector."""

    def __init__(self, clock: SessionClock, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._clock = clock
        self._compact: bool = False
        self._build_ui()
        self._connect_signals()
        self._render(clock.snapshot)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 24)
        layout.setSpacing(12)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── session selector ─────────────────────────────────────────
        self._type_row = QWidget(card)
        type_layout = QHBoxLayout(self._type_row)
        type_layout.setContentsMargins(0, 0, 0, 0)
        type_layout.setSpacing(8)
        self._type_group = QButtonGroup(self)
        self._type_group.setExclusive(True)
        self._type_buttons: dict[SessionType, QPushButton] = {}
        for session_type in SessionType:
            btn = QPushButton(SESSION_BUTTON_TEXT[session_type], self._type_row)
            btn.setObjectName("sessionButton")
            btn.setCheckable(True)
            self._type_group.addButton(btn)
            self._type_buttons[session_type] = btn
            type_layout.addWidget(btn)
        layout.addWidget(self._type_row)

        # ── progress ring (centrepiece) ──────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(card)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed,
        )
        self._ring.setFixedSize(300, 300)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("secondaryButton")

        self._start_pause_btn = QPushButton("Start", card)
        self._start_pause_btn.setObjectName("primaryButton")

        self._sound_btn = QPushButton(card)
        self._sound_btn.setObjectName("secondaryButton")
        self._sound_btn.setCheckable(True)

        btn_row.addWidget(self._reset_btn)
        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._sound_btn)
        layout.addLayout(btn_row)

        # ── cycles ───────────────────────────────────────────────────
        self._cycles_label = QLabel(card)
        self._cycles_label.setObjectName("cyclesLabel")
        self._cycles_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._cycles_label)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._on_start_pause)
        self._reset_btn.clicked.connect(self._clock.reset)
        self._sound_btn.toggled.connect(self._clock.set_sound_enabled)
        for session_type, btn in self._type_buttons.items():
            btn.clicked.connect(
                lambda _checked=False, st=session_type: self._clock.switch_type(st)
            )

        self._clock.tick.connect(self._on_tick)
        self._clock.state_changed.connect(self._render)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        if self._clock.is_running:
            self._clock.pause()
        else:
            self._clock.start()

    def _on_tick(self, remaining: int) -> None:
        self._ring.set_time_text(format_time(remaining))
        self._ring.set_percent(self._clock.progress)

    def _render(self, snap: TimerSnapshot) -> None:
        self._start_pause_btn.setText("Pause" if snap.is_running else "Start")

        # Phase can only change while paused
        for session_type, btn in self._type_buttons.items():
            btn.setChecked(session_type == snap.session_type)
            btn.setEnabled(not snap.is_running)

        self._sound_btn.blockSignals(True)
        self._sound_btn.setChecked(snap.sound_enabled)
        self._sound_btn.blockSignals(False)
        self._sound_btn.setText("🔊" if snap.sound_enabled else "🔇")
        self._sound_btn.setToolTip(
            "Sound on" if snap.sound_enabled else "Sound off"
        )

        self._ring.set_time_text(format_time(snap.time_left))
        self._ring.set_percent(snap.progress)
        self._ring.set_state_label(SESSION_LABELS[snap.session_type])
        self._ring.set_colors(*ring_colors(snap.session_type, snap.is_running))

        cycles = f"Cycles completed: {snap.cycles_completed}"
        self._ring.set_cycles_text("" if self._compact else cycles)
        self._cycles_label.setText(cycles)

    # ── compact mode ─────────────────────────────────────────────────────

    def set_compact(self, compact: bool) -> None:
        """Toggle compact display: hide the selector, shrink the ring."""
        self._compact = compact
        self._type_row.setVisible(not compact)
        self._sound_btn.setVisible(not compact)
        size = 200 if compact else 300
        self._ring.setFixedSize(size, size)
        self._render(self._clock.snapshot)
