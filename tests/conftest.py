"""Shared pytest fixtures for FocusDash tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from focusdash.notify.notifier import CompletionNotifier, NotificationPermission
from focusdash.timer.engine import SessionClock

from helpers import FakeNotificationCenter, FakeTonePlayer


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def app_support_dir(tmp_path, monkeypatch):
    """Keep settings, sounds and logs out of the real home directory."""
    support = tmp_path / "support"
    monkeypatch.setattr("focusdash.settings.APP_SUPPORT_DIR", support)
    monkeypatch.setattr("focusdash.settings.SETTINGS_PATH", support / "settings.json")
    monkeypatch.setattr("focusdash.audio.sounds.SOUNDS_DIR", support / "sounds")
    monkeypatch.setattr("focusdash.log.LOG_DIR", support / "logs")
    yield support


@pytest.fixture
def tone():
    return FakeTonePlayer()


@pytest.fixture
def notifications():
    return FakeNotificationCenter(NotificationPermission.GRANTED)


@pytest.fixture
def notifier(tone, notifications):
    return CompletionNotifier(tone, notifications)


@pytest.fixture
def clock(qapp, notifier):
    """Fresh SessionClock wired to fake platform capabilities."""
    c = SessionClock(notifier)
    yield c
    c.shutdown()


@pytest.fixture
def bare_clock(qapp):
    """SessionClock with no notifier at all."""
    c = SessionClock()
    yield c
    c.shutdown()
