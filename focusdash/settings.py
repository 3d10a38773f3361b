"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/FocusDash/settings.json

Usage::

    settings = load_settings()
    settings.sound_volume = 50
    save_settings(settings)

Timer state is deliberately *not* part of settings: every launch starts
a fresh Work session with zero completed cycles.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "FocusDash"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"

PERMISSION_VALUES = ("default", "granted", "denied")


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── notifications ─────────────────────────────────────────────────
    notifications_enabled: bool = True
    notification_permission: str = "default"   # default | granted | denied

    # ── window ────────────────────────────────────────────────────────
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 460
    window_height: int = 640
    always_on_top: bool = False
    compact_mode: bool = False

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.sound_volume = max(0, min(int(self.sound_volume), 100))
        if self.notification_permission not in PERMISSION_VALUES:
            self.notification_permission = "default"


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError):
        logger.warning(
            "Could not read %s; using default settings", SETTINGS_PATH,
            exc_info=True,
        )
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )


def try_save_settings(settings: Settings) -> bool:
    """Like ``save_settings`` but logs a failed write instead of raising."""
    try:
        save_settings(settings)
    except OSError:
        logger.warning("Could not save settings to %s", SETTINGS_PATH, exc_info=True)
        return False
    return True
