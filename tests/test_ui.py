"""Tests for the presentation layer.

Covers:
- format_time
- TimerWidget rendering and command forwarding
- Compact mode
- SettingsDialog population and permission flow
- Main window wiring (notifier, permission, teardown)
"""

from __future__ import annotations

import pytest
from PyQt6.QtGui import QCloseEvent

from focusdash.notify.notifier import NotificationPermission
from focusdash.settings import Settings, load_settings
from focusdash.timer.cycle import SessionType
from focusdash.ui.timer_widget import TimerWidget, format_time, SESSION_LABELS

from helpers import complete_session, run_ticks


class TestFormatTime:

    @pytest.mark.parametrize("seconds, text", [
        (1500, "25:00"),
        (300, "05:00"),
        (61, "01:01"),
        (9, "00:09"),
        (0, "00:00"),
        (-4, "00:00"),
    ])
    def test_format(self, seconds, text):
        assert format_time(seconds) == text


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:

    def test_initial_render(self, clock):
        w = TimerWidget(clock)
        assert w._ring.time_text == "25:00"
        assert w._ring.state_label == SESSION_LABELS[SessionType.WORK]
        assert w._start_pause_btn.text() == "Start"
        assert w._type_buttons[SessionType.WORK].isChecked()
        assert w._cycles_label.text() == "Cycles completed: 0"

    def test_start_button_toggles(self, clock):
        w = TimerWidget(clock)
        w._start_pause_btn.click()
        assert clock.is_running
        assert w._start_pause_btn.text() == "Pause"
        w._start_pause_btn.click()
        assert not clock.is_running
        assert w._start_pause_btn.text() == "Start"

    def test_type_buttons_disabled_while_running(self, clock):
        w = TimerWidget(clock)
        clock.start()
        assert all(not b.isEnabled() for b in w._type_buttons.values())
        clock.pause()
        assert all(b.isEnabled() for b in w._type_buttons.values())

    def test_type_button_switches(self, clock):
        w = TimerWidget(clock)
        w._type_buttons[SessionType.LONG_BREAK].click()
        assert clock.session_type == SessionType.LONG_BREAK
        assert w._ring.time_text == "15:00"

    def test_tick_updates_ring(self, clock):
        w = TimerWidget(clock)
        clock.start()
        run_ticks(clock, 61)
        assert w._ring.time_text == "23:59"
        assert w._ring.percent == pytest.approx(61 / 1500)

    def test_reset_button(self, clock):
        w = TimerWidget(clock)
        clock.start()
        run_ticks(clock, 10)
        w._reset_btn.click()
        assert w._ring.time_text == "25:00"
        assert not clock.is_running

    def test_sound_toggle(self, clock):
        w = TimerWidget(clock)
        assert w._sound_btn.isChecked()
        w._sound_btn.click()
        assert clock.sound_enabled is False
        assert w._sound_btn.toolTip() == "Sound off"

    def test_completion_renders_next_phase(self, clock):
        w = TimerWidget(clock)
        complete_session(clock)
        assert w._ring.time_text == "05:00"
        assert w._ring.state_label == SESSION_LABELS[SessionType.SHORT_BREAK]
        assert w._cycles_label.text() == "Cycles completed: 1"

    def test_compact_mode(self, clock):
        w = TimerWidget(clock)
        w.set_compact(True)
        assert w._type_row.isHidden()
        assert w._sound_btn.isHidden()
        assert w._ring.width() == 200
        w.set_compact(False)
        assert not w._type_row.isHidden()
        assert w._ring.width() == 300


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS DIALOG
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestSettingsDialog:

    def test_populates(self):
        from focusdash.ui.settings_dialog import SettingsDialog
        dlg = SettingsDialog(Settings(sound_volume=35, sound_enabled=False))
        assert dlg._vol_slider.value() == 35
        assert dlg._vol_label.text() == "35%"
        assert dlg._sound_cb.isChecked() is False

    def test_toggle_saves(self):
        from focusdash.ui.settings_dialog import SettingsDialog
        dlg = SettingsDialog(Settings())
        dlg._compact_cb.setChecked(True)
        assert load_settings().compact_mode is True

    def test_toggle_survives_unwritable_support_dir(self, app_support_dir):
        from focusdash.ui.settings_dialog import SettingsDialog
        app_support_dir.parent.mkdir(parents=True, exist_ok=True)
        app_support_dir.write_text("not a directory", encoding="utf-8")
        dlg = SettingsDialog(Settings())
        dlg._compact_cb.setChecked(True)
        assert dlg.settings.compact_mode is True

    def test_permission_request_signal(self):
        from focusdash.ui.settings_dialog import SettingsDialog
        dlg = SettingsDialog(Settings())
        fired = []
        dlg.permission_requested.connect(lambda: fired.append(True))
        dlg._permission_btn.click()
        assert fired == [True]

    def test_set_permission(self):
        from focusdash.ui.settings_dialog import SettingsDialog
        dlg = SettingsDialog(Settings())
        dlg.set_permission(NotificationPermission.GRANTED)
        assert dlg.settings.notification_permission == "granted"
        assert dlg._permission_btn.isHidden()
        assert load_settings().notification_permission == "granted"


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestMainWindow:

    @pytest.fixture
    def window(self):
        from focusdash.app import FocusDashApp
        w = FocusDashApp(Settings(sound_enabled=False))
        yield w
        w.clock.shutdown()
        w.deleteLater()

    def test_fresh_clock(self, window):
        snap = window.clock.snapshot
        assert (snap.session_type, snap.time_left, snap.is_running,
                snap.cycles_completed) == (SessionType.WORK, 1500, False, 0)

    def test_sound_setting_flows_into_clock(self):
        from focusdash.app import FocusDashApp
        w = FocusDashApp(Settings(sound_enabled=False))
        assert w.clock.sound_enabled is False
        w.clock.shutdown()

    def test_permission_request_persisted(self, window, monkeypatch):
        monkeypatch.setattr(
            "focusdash.notify.desktop._tray_supports_messages", lambda: False,
        )
        assert window.request_notification_permission() == NotificationPermission.DENIED
        assert load_settings().notification_permission == "denied"

    def test_sound_toggle_persisted(self, window):
        window.clock.set_sound_enabled(True)
        assert load_settings().sound_enabled is True

    def test_completion_with_no_platform_capabilities(self, window):
        complete_session(window.clock)
        assert window.clock.session_type == SessionType.SHORT_BREAK
        assert window.clock.cycles_completed == 1

    def test_close_releases_tick(self, window):
        window.clock.start()
        window.closeEvent(QCloseEvent())
        assert not window.clock.has_live_tick
        assert not window.clock.is_running

    def test_rejected_switch_shows_status(self, window):
        window.clock.start()
        window.clock.switch_type(SessionType.SHORT_BREAK)
        assert "Pause" in window.statusBar().currentMessage()
