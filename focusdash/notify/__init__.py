"""Completion notifications package."""

from .notifier import (
    CompletionNotifier,
    run_side_effect,
    NotificationPermission,
    ToneCapability,
    NotificationCapability,
    COMPLETION_MESSAGES,
    TONE_FREQUENCY,
    TONE_DURATION,
    TONE_START_GAIN,
    TONE_END_GAIN,
)
from .desktop import TrayNotificationCenter

__all__ = [
    "CompletionNotifier",
    "run_side_effect",
    "NotificationPermission",
    "ToneCapability",
    "NotificationCapability",
    "TrayNotificationCenter",
    "COMPLETION_MESSAGES",
    "TONE_FREQUENCY",
    "TONE_DURATION",
    "TONE_START_GAIN",
    "TONE_END_GAIN",
]
