"""Main application window for FocusDash."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QIcon, QPainter, QColor, QPixmap, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QStatusBar,
    QSystemTrayIcon, QMenu,
)

from .audio.sounds import QtTonePlayer
from .notify.desktop import TrayNotificationCenter
from .notify.notifier import (
    CompletionNotifier, NotificationPermission, run_side_effect,
    TONE_FREQUENCY, TONE_DURATION, TONE_START_GAIN, TONE_END_GAIN,
)
from .settings import Settings, load_settings, try_save_settings
from .timer.cycle import SessionType
from .timer.engine import SessionClock, TimerSnapshot
from .ui.settings_dialog import SettingsDialog
from .ui.styles import SESSION_COLORS, PAUSED_COLORS, build_stylesheet
from .ui.timer_widget import TimerWidget, format_time, SESSION_LABELS

COMPLETED_STATUS: dict[SessionType, str] = {
    SessionType.WORK:        "Focus session complete. Take a break!",
    SessionType.SHORT_BREAK: "Break over. Ready when you are.",
    SessionType.LONG_BREAK:  "Cycle complete. Ready when you are.",
}


def _make_icon(color: str) -> QIcon:
    """Plain filled circle used for the window and tray icons."""
    pixmap = QPixmap(64, 64)
    pixmap.fill(QColor(0, 0, 0, 0))
    p = QPainter(pixmap)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setBrush(QColor(color))
    p.setPen(QColor(color).darker(120))
    p.drawEllipse(4, 4, 56, 56)
    p.end()
    return QIcon(pixmap)


class FocusDashApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("FocusDash")
        self.setMinimumSize(380, 420)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()

        # ── platform capabilities ─────────────────────────────────────
        self._tone_player = QtTonePlayer(
            parent=self, volume=self._settings.sound_volume,
        )

        self._tray_icon: QSystemTrayIcon | None = None
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon = QSystemTrayIcon(self)
            self._tray_icon.setIcon(_make_icon(PAUSED_COLORS[0]))
            self._tray_icon.setToolTip("FocusDash")
            self._tray_icon.activated.connect(self._on_tray_activated)
            self._build_tray_menu()
            self._tray_icon.show()

        self._notification_center = TrayNotificationCenter(
            self._tray_icon,
            self,
            permission=NotificationPermission(
                self._settings.notification_permission
            ),
        )
        self._notification_center.permission_changed.connect(
            self._on_permission_changed,
        )

        self._notifier = CompletionNotifier(
            self._tone_player,
            self._notification_center,
            notifications_enabled=self._settings.notifications_enabled,
        )

        # ── clock ─────────────────────────────────────────────────────
        self._clock = SessionClock(
            self._notifier, self, sound_enabled=self._settings.sound_enabled,
        )

        # ── central widget ────────────────────────────────────────────
        self.setStyleSheet(build_stylesheet())
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(16, 12, 16, 12)

        self._timer_widget = TimerWidget(self._clock, central)
        root_layout.addWidget(self._timer_widget)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage("Ready to focus!")

        self._build_menu_bar()
        self._setup_shortcuts()

        # ── wire signals ──────────────────────────────────────────────
        self._clock.state_changed.connect(self._on_state_changed)
        self._clock.session_completed.connect(self._on_session_completed)
        self._clock.transition_rejected.connect(self._on_transition_rejected)
        self._clock.tick.connect(self._on_tick)

        app = QApplication.instance()
        if app is not None:
            app.aboutToQuit.connect(self._clock.shutdown)

        # ── restore window state ──────────────────────────────────────
        self._restore_geometry()
        if self._settings.always_on_top:
            self._apply_always_on_top(True)
        if self._settings.compact_mode:
            self._timer_widget.set_compact(True)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def clock(self) -> SessionClock:
        return self._clock

    @property
    def notification_center(self) -> TrayNotificationCenter:
        return self._notification_center

    def request_notification_permission(self) -> NotificationPermission:
        """Host-owned permission request (menu item / settings dialog)."""
        return self._notification_center.request_permission()

    # ══════════════════════════════════════════════════════════════════
    #  MENUS & SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()
        app_menu = menu_bar.addMenu("FocusDash")

        settings_action = QAction("Settings…", self)
        settings_action.setMenuRole(QAction.MenuRole.PreferencesRole)
        settings_action.setShortcut(QKeySequence("Ctrl+,"))
        settings_action.triggered.connect(self._open_settings)
        app_menu.addAction(settings_action)

        notif_action = QAction("Allow Desktop Notifications", self)
        notif_action.triggered.connect(self.request_notification_permission)
        app_menu.addAction(notif_action)

        app_menu.addSeparator()

        quit_action = QAction("Quit FocusDash", self)
        quit_action.setMenuRole(QAction.MenuRole.QuitRole)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self._quit_app)
        app_menu.addAction(quit_action)

    def _build_tray_menu(self) -> None:
        menu = QMenu(self)
        self._tray_start_action = menu.addAction("Start")
        self._tray_start_action.triggered.connect(self._toggle_start)
        reset_action = menu.addAction("Reset")
        reset_action.triggered.connect(lambda: self._clock.reset())
        menu.addSeparator()
        show_action = menu.addAction("Show FocusDash")
        show_action.triggered.connect(self._show_window)
        quit_action = menu.addAction("Quit")
        quit_action.triggered.connect(self._quit_app)
        self._tray_icon.setContextMenu(menu)

    def _setup_shortcuts(self) -> None:
        space = QShortcut(QKeySequence(Qt.Key.Key_Space), self)
        space.activated.connect(self._toggle_start)
        reset = QShortcut(QKeySequence("Ctrl+R"), self)
        reset.activated.connect(self._clock.reset)

    def _toggle_start(self) -> None:
        if self._clock.is_running:
            self._clock.pause()
        else:
            self._clock.start()

    def _open_settings(self) -> None:
        dialog = SettingsDialog(
            self._settings,
            self,
            sound_preview_callback=self._preview_tone,
        )
        dialog.permission_requested.connect(
            lambda: dialog.set_permission(self.request_notification_permission())
        )
        dialog.exec()
        self._apply_settings(dialog.settings)

    def _apply_settings(self, settings: Settings) -> None:
        self._settings = settings
        self._tone_player.set_volume(settings.sound_volume)
        self._notifier.notifications_enabled = settings.notifications_enabled
        self._clock.set_sound_enabled(settings.sound_enabled)
        self._timer_widget.set_compact(settings.compact_mode)
        self._apply_always_on_top(settings.always_on_top)

    def _preview_tone(self) -> None:
        run_side_effect(
            "tone preview",
            lambda: self._tone_player.play_tone(
                TONE_FREQUENCY, TONE_DURATION, TONE_START_GAIN, TONE_END_GAIN,
            ),
        )

    # ══════════════════════════════════════════════════════════════════
    #  CLOCK SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, snap: TimerSnapshot) -> None:
        if snap.is_running:
            self._status_bar.showMessage(
                f"{SESSION_LABELS[snap.session_type].title()}…"
            )
        if self._tray_icon is not None:
            color = (
                SESSION_COLORS[snap.session_type][0]
                if snap.is_running else PAUSED_COLORS[0]
            )
            self._tray_icon.setIcon(_make_icon(color))
            self._tray_start_action.setText("Pause" if snap.is_running else "Start")
            self._tray_icon.setToolTip(
                f"FocusDash — {SESSION_LABELS[snap.session_type].title()} "
                f"{format_time(snap.time_left)}"
            )

        if snap.sound_enabled != self._settings.sound_enabled:
            self._settings.sound_enabled = snap.sound_enabled
            self._save_settings()

    def _on_tick(self, remaining: int) -> None:
        if self._tray_icon is not None:
            label = SESSION_LABELS[self._clock.session_type].title()
            self._tray_icon.setToolTip(f"FocusDash — {label} {format_time(remaining)}")

    def _on_session_completed(self, data: dict) -> None:
        self._status_bar.showMessage(COMPLETED_STATUS[data["completed_type"]])

    def _on_transition_rejected(self, error) -> None:
        self._status_bar.showMessage("Pause the timer before switching sessions.", 4000)

    def _on_permission_changed(self, permission: NotificationPermission) -> None:
        self._settings.notification_permission = permission.value
        self._save_settings()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW
    # ══════════════════════════════════════════════════════════════════

    def _on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self._show_window()

    def _show_window(self) -> None:
        self.showNormal()
        self.raise_()
        self.activateWindow()

    def _apply_always_on_top(self, on_top: bool) -> None:
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, on_top)
        if self.isVisible():
            self.show()

    def _restore_geometry(self) -> None:
        s = self._settings
        self.resize(s.window_width, s.window_height)
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)

    def _save_geometry(self) -> None:
        geo = self.geometry()
        self._settings.window_x = geo.x()
        self._settings.window_y = geo.y()
        self._settings.window_width = geo.width()
        self._settings.window_height = geo.height()

    def _save_settings(self) -> None:
        try_save_settings(self._settings)

    def _quit_app(self) -> None:
        self._clock.shutdown()
        self._save_geometry()
        self._save_settings()
        QApplication.instance().quit()

    def closeEvent(self, event) -> None:  # noqa: N802
        self._clock.shutdown()
        self._save_geometry()
        self._save_settings()
        super().closeEvent(event)
