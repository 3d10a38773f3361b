"""UI package."""

from .timer_widget import TimerWidget, format_time
from .progress_ring import ProgressRing
from .settings_dialog import SettingsDialog

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "SettingsDialog",
    "format_time",
]
