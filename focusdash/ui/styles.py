"""QSS stylesheet and session colours for FocusDash."""

from __future__ import annotations

from ..timer.cycle import SessionType

# ── session colours (ring gradient pairs) ────────────────────────────────
#    Each phase maps to (primary, secondary) for the conical gradient.

SESSION_COLORS: dict[SessionType, tuple[str, str]] = {
    SessionType.WORK:        ("#FF6B6B", "#FFA07A"),   # warm coral
    SessionType.SHORT_BREAK: ("#4ECDC4", "#44B09E"),   # cool teal
    SessionType.LONG_BREAK:  ("#A18CD1", "#7B68EE"),   # calm purple
}

PAUSED_COLORS: tuple[str, str] = ("#6C7086", "#585B70")   # desaturated gray

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def ring_colors(session_type: SessionType, running: bool) -> tuple[str, str]:
    """Gradient pair for the ring: phase colour while running, gray when paused."""
    if not running:
        return PAUSED_COLORS
    return SESSION_COLORS[session_type]


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 16px;
    }}

    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
        border-color: {p['border']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#sessionButton:checked {{
        background-color: {p['danger']};
        color: {p['bg']};
        border-color: {p['text']};
    }}

    QLabel#cyclesLabel {{
        color: {p['text_muted']};
        font-size: 13px;
    }}
    """
