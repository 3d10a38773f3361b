"""Circular progress ring widget rendered with QPainter.

- Fills clockwise as the phase progresses.
- Colour-coded by phase (work=coral, short break=teal, long break=purple),
  gray while paused.
- Shows MM:SS in bold text at the centre plus a phase label and the
  completed-cycles line.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QPainter, QPen, QColor, QConicalGradient, QFont
from PyQt6.QtWidgets import QWidget

from .styles import PALETTE


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_THICKNESS = 14

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(200, 200)

        self._percent: float = 0.0
        self._time_text: str = "25:00"
        self._state_label: str = "FOCUS"
        self._cycles_text: str = ""
        self._primary_color = QColor("#6C7086")
        self._secondary_color = QColor("#585B70")
        self._track_color = QColor(PALETTE["border"])
        self._text_color = QColor(PALETTE["text"])
        self._muted_color = QColor(PALETTE["text_muted"])

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def state_label(self) -> str:
        return self._state_label

    @property
    def cycles_text(self) -> str:
        return self._cycles_text

    def set_percent(self, pct: float) -> None:
        """Update the arc fill (0..1)."""
        self._percent = max(0.0, min(1.0, pct))
        self.update()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_state_label(self, text: str) -> None:
        self._state_label = text
        self.update()

    def set_cycles_text(self, text: str) -> None:
        self._cycles_text = text
        self.update()

    def set_colors(self, primary: str, secondary: str) -> None:
        self._primary_color = QColor(primary)
        self._secondary_color = QColor(secondary)
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # noqa: N802
        side = min(self.width(), self.height()) - self.RING_THICKNESS * 2
        cx, cy = self.width() / 2, self.height() / 2
        rect = QRectF(cx - side / 2, cy - side / 2, side, side)

        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)

        # ── background track ──────────────────────────────────────────
        track_pen = QPen(self._track_color, self.RING_THICKNESS)
        track_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        p.setPen(track_pen)
        p.drawArc(rect, 0, 360 * 16)

        # ── progress arc (12 o'clock, clockwise) ─────────────────────
        if self._percent > 0:
            grad = QConicalGradient(QPointF(cx, cy), 90)
            grad.setColorAt(0.0, self._primary_color)
            grad.setColorAt(1.0, self._secondary_color)
            arc_pen = QPen(grad, self.RING_THICKNESS)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            p.setPen(arc_pen)
            span = -int(self._percent * 360 * 16)
            p.drawArc(rect, 90 * 16, span)

        # ── centre text ───────────────────────────────────────────────
        time_font = QFont()
        time_font.setPointSizeF(max(18.0, side / 6))
        time_font.setBold(True)
        p.setFont(time_font)
        p.setPen(self._text_color)
        p.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        label_font = QFont()
        label_font.setPointSizeF(max(9.0, side / 22))
        label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 2)
        p.setFont(label_font)
        p.setPen(self._muted_color)
        label_rect = QRectF(rect.left(), cy - side / 4, side, side / 8)
        p.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._state_label)

        if self._cycles_text:
            cycles_rect = QRectF(rect.left(), cy + side / 8, side, side / 8)
            p.drawText(cycles_rect, Qt.AlignmentFlag.AlignCenter, self._cycles_text)

        p.end()
