"""Port interfaces consumed by the break scheduler.

The scheduler only ever talks to the outside world through these abstract
base classes (Ports & Adapters). Concrete implementations live in
``breakminder.adapters`` and ``breakminder.services``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class InactivityProbe(ABC):
    """Answers whether the user has been idle for a number of minutes."""

    @abstractmethod
    def is_inactive(self, threshold_minutes: int) -> bool:
        """Return True if there was no user input for at least ``threshold_minutes``."""
        raise NotImplementedError("InactivityProbe.is_inactive() must be implemented by adapter")


class NotificationPort(ABC):
    """Fire-and-forget user notifications."""

    @abstractmethod
    def send_single(self, title: str, subtitle: str, sound_enabled: bool) -> None:
        """Deliver one notification. Must not raise on delivery failure."""
        raise NotImplementedError("NotificationPort.send_single() must be implemented by adapter")


class PreferencesPort(ABC):
    """Best-effort persistence of the user-configurable values."""

    @abstractmethod
    def set_should_run(self, value: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_work_interval(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_break_interval(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_launch_at_login(self, value: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_sound_enabled(self, value: bool) -> None:
        raise NotImplementedError


class LoginItemPort(ABC):
    """Registers or unregisters the app as an OS autostart item."""

    @abstractmethod
    def set_enabled(self, enabled: bool) -> None:
        """Idempotently enable or disable launching at login."""
        raise NotImplementedError("LoginItemPort.set_enabled() must be implemented by adapter")
