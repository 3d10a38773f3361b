"""Tests for the completion notifier and its failure isolation."""

import logging

import pytest

from focusdash.errors import PermissionDenied, ResourceUnavailable
from focusdash.notify.notifier import (
    CompletionNotifier, NotificationPermission, COMPLETION_MESSAGES,
    TONE_FREQUENCY, TONE_DURATION, TONE_START_GAIN, TONE_END_GAIN,
    run_side_effect,
)
from focusdash.timer.cycle import SessionType

from helpers import FakeNotificationCenter, FakeTonePlayer


class TestMessages:

    def test_one_message_per_session_type(self):
        assert set(COMPLETION_MESSAGES) == set(SessionType)

    def test_messages_are_distinct(self):
        titles = {title for title, _ in COMPLETION_MESSAGES.values()}
        assert len(titles) == 3


class TestNotify:

    def test_plays_tone_with_fixed_parameters(self, notifier, tone):
        notifier.notify(SessionType.WORK)
        assert tone.calls == [
            (TONE_FREQUENCY, TONE_DURATION, TONE_START_GAIN, TONE_END_GAIN),
        ]
        assert (TONE_FREQUENCY, TONE_DURATION) == (800.0, 0.5)

    @pytest.mark.parametrize("session_type", list(SessionType))
    def test_shows_message_for_type(self, notifier, notifications, session_type):
        notifier.notify(session_type)
        title, body = COMPLETION_MESSAGES[session_type]
        assert notifications.shown == [(title, body, True)]

    def test_sound_disabled(self, notifier, tone, notifications):
        notifier.notify(SessionType.WORK, sound_enabled=False)
        assert tone.calls == []
        assert len(notifications.shown) == 1

    @pytest.mark.parametrize("permission", [
        NotificationPermission.DENIED, NotificationPermission.DEFAULT,
    ])
    def test_permission_not_granted_skips_notification_only(self, permission):
        tone = FakeTonePlayer()
        center = FakeNotificationCenter(permission)
        CompletionNotifier(tone, center).notify(SessionType.WORK)
        assert center.shown == []
        assert len(tone.calls) == 1

    def test_missing_audio_still_notifies(self):
        center = FakeNotificationCenter()
        CompletionNotifier(None, center).notify(SessionType.SHORT_BREAK)
        assert len(center.shown) == 1

    def test_missing_notifications_still_plays(self):
        tone = FakeTonePlayer()
        CompletionNotifier(tone, None).notify(SessionType.LONG_BREAK)
        assert len(tone.calls) == 1

    def test_no_capabilities_at_all(self):
        CompletionNotifier().notify(SessionType.WORK)

    def test_audio_failure_does_not_skip_notification(self):
        tone = FakeTonePlayer(error=ResourceUnavailable("audio output"))
        center = FakeNotificationCenter()
        CompletionNotifier(tone, center).notify(SessionType.WORK)
        assert len(center.shown) == 1

    def test_unexpected_errors_are_swallowed_and_logged(self, caplog):
        tone = FakeTonePlayer(error=RuntimeError("boom"))
        center = FakeNotificationCenter(error=ValueError("bad"))
        with caplog.at_level(logging.ERROR, logger="focusdash"):
            CompletionNotifier(tone, center).notify(SessionType.WORK)
        failures = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(failures) == 2

    def test_notifications_disabled(self, tone, notifications):
        n = CompletionNotifier(tone, notifications, notifications_enabled=False)
        n.notify(SessionType.WORK)
        assert notifications.shown == []
        assert len(tone.calls) == 1


class TestRunSideEffect:

    def test_success(self):
        assert run_side_effect("x", lambda: None) is True

    @pytest.mark.parametrize("error", [
        ResourceUnavailable("speaker"),
        PermissionDenied("denied"),
        RuntimeError("boom"),
    ])
    def test_failures_return_false(self, error):
        def fail():
            raise error
        assert run_side_effect("x", fail) is False

    def test_resource_unavailable_logged_at_info(self, caplog):
        def fail():
            raise ResourceUnavailable("speaker")
        with caplog.at_level(logging.INFO, logger="focusdash"):
            run_side_effect("completion tone", fail)
        assert any(
            "completion tone" in r.getMessage() and r.levelno == logging.INFO
            for r in caplog.records
        )
