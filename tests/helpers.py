"""Shared test helpers for FocusDash."""

from dataclasses import replace

from focusdash.notify.notifier import NotificationPermission
from focusdash.timer.engine import SessionClock


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeTonePlayer:
    """Tone capability that records calls instead of making noise."""

    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple] = []
        self.error = error

    def play_tone(self, frequency, duration_s, start_gain, end_gain):
        if self.error is not None:
            raise self.error
        self.calls.append((frequency, duration_s, start_gain, end_gain))


class FakeNotificationCenter:
    """Notification capability that records what would have been shown."""

    def __init__(
        self,
        permission: NotificationPermission = NotificationPermission.GRANTED,
        error: Exception | None = None,
    ):
        self.permission = permission
        self.shown: list[tuple[str, str, bool]] = []
        self.error = error

    def show_notification(self, title, body, *, require_interaction=False):
        if self.error is not None:
            raise self.error
        self.shown.append((title, body, require_interaction))


def complete_session(clock: SessionClock) -> None:
    """Fast-complete the current phase by jumping to the last tick."""
    if not clock.is_running:
        clock.start()
    clock._snapshot = replace(clock._snapshot, time_left=1)
    clock._on_tick()


def run_ticks(clock: SessionClock, count: int) -> None:
    for _ in range(count):
        clock._on_tick()
