"""Desktop notifications through the system tray.

``TrayNotificationCenter`` is the notification capability used by the
app.  It owns the permission state; asking for permission is an explicit
host action (a menu item or the settings dialog), never something the
timer does on its own.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QSystemTrayIcon

from ..errors import ResourceUnavailable
from .notifier import NotificationPermission

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 10_000
# Qt only takes a timeout *hint*; a day is as close to "until dismissed" as it gets
STICKY_TIMEOUT_MS = 24 * 60 * 60 * 1000


def _tray_supports_messages() -> bool:
    return (
        QSystemTrayIcon.isSystemTrayAvailable()
        and QSystemTrayIcon.supportsMessages()
    )


class TrayNotificationCenter(QObject):
    """Notification capability backed by ``QSystemTrayIcon.showMessage``.

    Signals
    -------
    permission_changed(permission: NotificationPermission)
    """

    permission_changed = pyqtSignal(object)

    def __init__(
        self,
        tray_icon: QSystemTrayIcon | None = None,
        parent: QObject | None = None,
        *,
        permission: NotificationPermission = NotificationPermission.DEFAULT,
    ) -> None:
        super().__init__(parent)
        self._tray_icon = tray_icon
        self._permission = permission

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    def set_tray_icon(self, tray_icon: QSystemTrayIcon | None) -> None:
        self._tray_icon = tray_icon

    def request_permission(self) -> NotificationPermission:
        """Resolve the permission state from what the platform supports.

        A ``DENIED`` answer sticks only until the next request.
        """
        if self._tray_icon is not None and _tray_supports_messages():
            granted = NotificationPermission.GRANTED
        else:
            granted = NotificationPermission.DENIED
        logger.info("Notification permission: %s", granted.value)
        self._set_permission(granted)
        return granted

    def revoke(self) -> None:
        self._set_permission(NotificationPermission.DEFAULT)

    def show_notification(
        self, title: str, body: str, *, require_interaction: bool = False,
    ) -> None:
        if self._tray_icon is None:
            raise ResourceUnavailable("desktop notifications", "no tray icon")
        if not _tray_supports_messages():
            raise ResourceUnavailable(
                "desktop notifications", "system tray does not support messages",
            )
        timeout = STICKY_TIMEOUT_MS if require_interaction else DEFAULT_TIMEOUT_MS
        self._tray_icon.showMessage(
            title, body, QSystemTrayIcon.MessageIcon.Information, timeout,
        )

    def _set_permission(self, permission: NotificationPermission) -> None:
        if permission == self._permission:
            return
        self._permission = permission
        self.permission_changed.emit(permission)
