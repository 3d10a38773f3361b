"""Error taxonomy for the focus-session timer.

None of these ever reach the Qt event loop.  ``InvalidTransition`` is
reported by :meth:`SessionClock.switch_type`; the other two are raised by
platform capability bindings and swallowed (after logging) by
:class:`CompletionNotifier`.
"""

from __future__ import annotations


class FocusDashError(Exception):
    """Base class for all FocusDash errors."""


class InvalidTransition(FocusDashError):
    """A command was issued in a state that does not allow it.

    The only case today is ``switch_type`` while the clock is running.
    """

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"{command} rejected: {reason}")
        self.command = command
        self.reason = reason


class ResourceUnavailable(FocusDashError):
    """An audio or notification capability is missing at call time."""

    def __init__(self, resource: str, detail: str = "") -> None:
        msg = f"{resource} unavailable"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.resource = resource


class PermissionDenied(FocusDashError):
    """Desktop-notification permission has not been granted."""

    def __init__(self, permission: str) -> None:
        super().__init__(f"notification permission is {permission!r}")
        self.permission = permission
