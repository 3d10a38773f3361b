"""Best-effort completion signal: a short tone plus a desktop notification.

Platform bindings are injected as small capability objects so the clock
can be exercised with fakes (or with nothing at all).  ``notify`` never
raises; each side effect is attempted on its own so a missing speaker
does not cost the user the notification, or the other way round.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from ..errors import PermissionDenied, ResourceUnavailable
from ..timer.cycle import SessionType

logger = logging.getLogger(__name__)


class NotificationPermission(Enum):
    GRANTED = "granted"
    DENIED = "denied"
    DEFAULT = "default"


# ── completion tone ───────────────────────────────────────────────────────

TONE_FREQUENCY = 800.0   # Hz, sine
TONE_DURATION = 0.5      # seconds
TONE_START_GAIN = 0.3
TONE_END_GAIN = 0.01     # exponential decay target

# ── notification copy ─────────────────────────────────────────────────────

COMPLETION_MESSAGES: dict[SessionType, tuple[str, str]] = {
    SessionType.WORK: (
        "⏰ Focus session complete!",
        "Well done! You finished 25 minutes of focus. Time for a break!",
    ),
    SessionType.SHORT_BREAK: (
        "☕ Short break over!",
        "Nice rest! Ready for another focus session?",
    ),
    SessionType.LONG_BREAK: (
        "\U0001f389 Long break over!",
        "Excellent rest! You completed a full Pomodoro cycle!",
    ),
}


class ToneCapability(Protocol):
    def play_tone(
        self,
        frequency: float,
        duration_s: float,
        start_gain: float,
        end_gain: float,
    ) -> None: ...


class NotificationCapability(Protocol):
    @property
    def permission(self) -> NotificationPermission: ...

    def show_notification(
        self, title: str, body: str, *, require_interaction: bool = False,
    ) -> None: ...


def run_side_effect(label: str, action) -> bool:
    """Run *action*, logging instead of raising.  Returns whether it ran."""
    try:
        action()
    except ResourceUnavailable as exc:
        logger.info("Skipping %s: %s", label, exc)
    except PermissionDenied as exc:
        logger.debug("Skipping %s: %s", label, exc)
    except Exception:
        logger.exception("Unexpected failure during %s", label)
    else:
        return True
    return False


class CompletionNotifier:
    """Plays the completion tone and shows the completion notification.

    Either capability may be ``None``; that side effect is then skipped.
    """

    def __init__(
        self,
        tone: ToneCapability | None = None,
        notifications: NotificationCapability | None = None,
        *,
        notifications_enabled: bool = True,
    ) -> None:
        self._tone = tone
        self._notifications = notifications
        self.notifications_enabled = notifications_enabled

    def notify(
        self, completed_type: SessionType, *, sound_enabled: bool = True,
    ) -> None:
        """Signal that a *completed_type* phase just ran out."""
        if sound_enabled:
            run_side_effect("completion tone", self._play_tone)
        if self.notifications_enabled:
            run_side_effect(
                "completion notification",
                lambda: self._show_notification(completed_type),
            )

    # ── side effects ──────────────────────────────────────────────────

    def _play_tone(self) -> None:
        if self._tone is None:
            raise ResourceUnavailable("audio synthesis")
        self._tone.play_tone(
            TONE_FREQUENCY, TONE_DURATION, TONE_START_GAIN, TONE_END_GAIN,
        )

    def _show_notification(self, completed_type: SessionType) -> None:
        center = self._notifications
        if center is None:
            raise ResourceUnavailable("desktop notifications")
        permission = center.permission
        if permission != NotificationPermission.GRANTED:
            raise PermissionDenied(permission.value)
        title, body = COMPLETION_MESSAGES[completed_type]
        center.show_notification(title, body, require_interaction=True)
