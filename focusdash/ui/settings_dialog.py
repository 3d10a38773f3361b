"""Settings dialog for FocusDash.

A modal dialog for audio and notification preferences.  Changes are
saved immediately to disk and returned to the caller so the app can
apply them.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QSlider, QCheckBox, QPushButton,
    QFrame, QWidget,
)

from ..notify.notifier import NotificationPermission
from ..settings import Settings, try_save_settings

PERMISSION_TEXT: dict[str, str] = {
    "granted": "Allowed",
    "denied":  "Not available on this system",
    "default": "Not requested yet",
}


class SettingsDialog(QDialog):
    """Modal dialog for all user preferences.

    Signals
    -------
    permission_requested()
        The user pressed "Allow desktop notifications"; the host decides.
    """

    permission_requested = pyqtSignal()

    def __init__(
        self,
        settings: Settings,
        parent: QWidget | None = None,
        *,
        sound_preview_callback=None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setMinimumWidth(400)
        self.setModal(True)

        self._settings = settings
        self._sound_preview = sound_preview_callback

        self._build_ui()
        self._populate()

    # ══════════════════════════════════════════════════════════════════
    #  BUILD UI
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 20)
        root.setSpacing(16)

        # ── Sound section ────────────────────────────────────────────
        root.addWidget(self._section_label("Sound"))
        snd_form = QFormLayout()
        snd_form.setContentsMargins(0, 0, 0, 0)
        snd_form.setHorizontalSpacing(20)
        snd_form.setVerticalSpacing(10)

        self._sound_cb = QCheckBox("Play a tone when a session ends")
        self._sound_cb.toggled.connect(self._on_toggle_changed)
        snd_form.addRow("", self._sound_cb)

        vol_row = QHBoxLayout()
        vol_row.setSpacing(10)
        self._vol_slider = QSlider(Qt.Orientation.Horizontal)
        self._vol_slider.setRange(0, 100)
        self._vol_slider.setTickInterval(10)
        self._vol_label = QLabel("70%")
        self._vol_label.setMinimumWidth(36)
        self._vol_slider.valueChanged.connect(self._on_volume_changed)
        self._vol_slider.sliderReleased.connect(self._on_volume_released)
        vol_row.addWidget(self._vol_slider)
        vol_row.addWidget(self._vol_label)

        vol_wrapper = QWidget()
        vol_wrapper.setLayout(vol_row)
        snd_form.addRow("Volume:", vol_wrapper)
        root.addLayout(snd_form)

        root.addWidget(self._separator())

        # ── Notifications section ────────────────────────────────────
        root.addWidget(self._section_label("Notifications"))
        notif_form = QFormLayout()
        notif_form.setContentsMargins(0, 0, 0, 0)
        notif_form.setVerticalSpacing(10)

        self._notif_cb = QCheckBox("Desktop notifications")
        self._notif_cb.toggled.connect(self._on_toggle_changed)
        notif_form.addRow("", self._notif_cb)

        self._permission_label = QLabel()
        notif_form.addRow("Permission:", self._permission_label)

        self._permission_btn = QPushButton("Allow desktop notifications")
        self._permission_btn.setObjectName("secondaryButton")
        self._permission_btn.clicked.connect(self.permission_requested.emit)
        notif_form.addRow("", self._permission_btn)
        root.addLayout(notif_form)

        root.addWidget(self._separator())

        # ── Window section ───────────────────────────────────────────
        root.addWidget(self._section_label("Window"))
        win_form = QFormLayout()
        win_form.setContentsMargins(0, 0, 0, 0)

        self._compact_cb = QCheckBox("Compact mode")
        self._compact_cb.toggled.connect(self._on_toggle_changed)
        win_form.addRow("", self._compact_cb)

        self._on_top_cb = QCheckBox("Always on top")
        self._on_top_cb.toggled.connect(self._on_toggle_changed)
        win_form.addRow("", self._on_top_cb)
        root.addLayout(win_form)

        # ── close button ─────────────────────────────────────────────
        root.addStretch()
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        close_btn = QPushButton("Close")
        close_btn.setObjectName("secondaryButton")
        close_btn.clicked.connect(self.accept)
        btn_row.addWidget(close_btn)
        root.addLayout(btn_row)

    # ── helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _section_label(text: str) -> QLabel:
        lbl = QLabel(text)
        lbl.setStyleSheet("font-size: 15px; font-weight: 700; margin-top: 4px;")
        return lbl

    @staticmethod
    def _separator() -> QFrame:
        line = QFrame()
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFixedHeight(1)
        line.setStyleSheet("background-color: rgba(255,255,255,0.08);")
        return line

    # ══════════════════════════════════════════════════════════════════
    #  POPULATE FROM SETTINGS
    # ══════════════════════════════════════════════════════════════════

    def _populate(self) -> None:
        s = self._settings
        for widget in (self._sound_cb, self._notif_cb, self._compact_cb,
                       self._on_top_cb, self._vol_slider):
            widget.blockSignals(True)
        self._sound_cb.setChecked(s.sound_enabled)
        self._vol_slider.setValue(s.sound_volume)
        self._vol_label.setText(f"{s.sound_volume}%")
        self._notif_cb.setChecked(s.notifications_enabled)
        self._compact_cb.setChecked(s.compact_mode)
        self._on_top_cb.setChecked(s.always_on_top)
        for widget in (self._sound_cb, self._notif_cb, self._compact_cb,
                       self._on_top_cb, self._vol_slider):
            widget.blockSignals(False)
        self._show_permission(s.notification_permission)

    def _show_permission(self, value: str) -> None:
        self._permission_label.setText(PERMISSION_TEXT.get(value, value))
        self._permission_btn.setVisible(value != "granted")

    # ══════════════════════════════════════════════════════════════════
    #  CHANGE HANDLERS — save immediately
    # ══════════════════════════════════════════════════════════════════

    def _on_toggle_changed(self) -> None:
        self._settings.sound_enabled = self._sound_cb.isChecked()
        self._settings.notifications_enabled = self._notif_cb.isChecked()
        self._settings.compact_mode = self._compact_cb.isChecked()
        self._settings.always_on_top = self._on_top_cb.isChecked()
        self._save()

    def _on_volume_changed(self, value: int) -> None:
        self._vol_label.setText(f"{value}%")
        self._settings.sound_volume = value
        self._save()

    def _on_volume_released(self) -> None:
        """Play the completion tone when the user releases the volume slider."""
        if self._sound_preview:
            self._sound_preview()

    def _save(self) -> None:
        try_save_settings(self._settings)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    def set_permission(self, permission: NotificationPermission) -> None:
        """Reflect a permission answer coming back from the host."""
        self._settings.notification_permission = permission.value
        self._show_permission(permission.value)
        self._save()

    @property
    def settings(self) -> Settings:
        return self._settings
