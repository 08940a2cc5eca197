"""Notification adapters.

``ConsoleNotifier`` prints a rich panel (and rings the terminal bell when
sound is on), ``DesktopNotifier`` raises a system notification through
plyer. Both are fire-and-forget: delivery problems are logged, never raised.
"""

from __future__ import annotations

import logging

from plyer import notification
from rich.console import Console
from rich.panel import Panel

from breakminder.core.ports import NotificationPort

logger = logging.getLogger(__name__)

APP_NAME = "breakminder"
DESKTOP_TIMEOUT = 10  # seconds


class ConsoleNotifier(NotificationPort):
    """Prints notifications to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def send_single(self, title: str, subtitle: str, sound_enabled: bool) -> None:
        panel = Panel(
            f"[bold]{title}[/bold]\n{subtitle}",
            border_style="cyan",
            padding=(1, 2),
        )
        self.console.print(panel)
        if sound_enabled:
            self.console.bell()


class DesktopNotifier(NotificationPort):
    """Sends OS notifications via plyer."""

    def __init__(self, app_name: str = APP_NAME, timeout: int = DESKTOP_TIMEOUT):
        self.app_name = app_name
        self.timeout = timeout

    def send_single(self, title: str, subtitle: str, sound_enabled: bool) -> None:
        try:
            # plyer exposes no sound switch; the OS default applies
            notification.notify(
                title=title,
                message=subtitle,
                app_name=self.app_name,
                timeout=self.timeout,
            )
        except Exception as e:  # plyer backends raise arbitrary errors
            logger.warning("desktop notification failed: %s", e)


class CompositeNotifier(NotificationPort):
    """Fans one notification out to several notifiers."""

    def __init__(self, *notifiers: NotificationPort):
        self.notifiers = list(notifiers)

    def send_single(self, title: str, subtitle: str, sound_enabled: bool) -> None:
        for notifier in self.notifiers:
            notifier.send_single(title, subtitle, sound_enabled)
        logger.info("notification sent: %s", title)
