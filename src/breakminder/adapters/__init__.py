"""Concrete implementations of the scheduler ports."""

from .idle import SystemInactivityProbe
from .login_item import LoginItemManager
from .notifier import CompositeNotifier, ConsoleNotifier, DesktopNotifier

__all__ = [
    "CompositeNotifier",
    "ConsoleNotifier",
    "DesktopNotifier",
    "LoginItemManager",
    "SystemInactivityProbe",
]
