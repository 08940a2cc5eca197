"""Composition root: wires the scheduler to its ports and runs the loop."""

from __future__ import annotations

import asyncio
import logging

from rich.console import Console
from rich.live import Live

from breakminder.adapters.idle import SystemInactivityProbe
from breakminder.adapters.login_item import LoginItemManager
from breakminder.adapters.notifier import CompositeNotifier, ConsoleNotifier, DesktopNotifier
from breakminder.core.ports import (
    InactivityProbe,
    LoginItemPort,
    NotificationPort,
    PreferencesPort,
)
from breakminder.core.scheduler import BreakScheduler
from breakminder.models.config_models import Preferences, SchedulerConfig
from breakminder.ui.keyboard import get_keyboard_handler
from breakminder.ui.status_view import StatusView

logger = logging.getLogger(__name__)

KEY_POLL_SECONDS = 0.25


def build_scheduler(
    config: SchedulerConfig,
    initial: Preferences,
    preferences: PreferencesPort,
    probe: InactivityProbe | None = None,
    notifier: NotificationPort | None = None,
    login_item: LoginItemPort | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> BreakScheduler:
    """Create a ``BreakScheduler`` with the system adapters as defaults."""
    return BreakScheduler(
        config=config,
        initial=initial,
        probe=probe or SystemInactivityProbe(),
        notifier=notifier or ConsoleNotifier(),
        preferences=preferences,
        login_item=login_item or LoginItemManager(),
        loop=loop,
    )


def default_notifier(console: Console, desktop: bool = True) -> NotificationPort:
    if desktop:
        return CompositeNotifier(ConsoleNotifier(console), DesktopNotifier())
    return ConsoleNotifier(console)


class BreakReminderApp:
    """Runs the scheduler, the live view and keyboard controls on one event loop."""

    def __init__(
        self,
        config: SchedulerConfig,
        initial: Preferences,
        preferences: PreferencesPort,
        console: Console | None = None,
        probe: InactivityProbe | None = None,
        notifier: NotificationPort | None = None,
        login_item: LoginItemPort | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.console = console or Console()
        self.loop = loop or asyncio.new_event_loop()
        self.scheduler = build_scheduler(
            config,
            initial,
            preferences,
            probe=probe,
            notifier=notifier or default_notifier(self.console),
            login_item=login_item,
            loop=self.loop,
        )
        self.view = StatusView(self.scheduler, self.console)
        self._quit_requested = False

    def handle_key(self, key: str | None) -> None:
        if key == "p":
            self.scheduler.pause_timer()
        elif key == "r":
            self.scheduler.resume_timer()
        elif key == "d":
            self.scheduler.reset_to_defaults()
        elif key == "q":
            self.quit()

    def quit(self) -> None:
        logger.info("quit requested")
        self._quit_requested = True

    async def _main(self) -> None:
        keyboard = get_keyboard_handler()
        try:
            with Live(self.view.render(), console=self.console, refresh_per_second=4) as live:
                self.view.live = live
                self.view.attach()
                while not self._quit_requested:
                    self.handle_key(keyboard.get_key())
                    await asyncio.sleep(KEY_POLL_SECONDS)
        finally:
            self.view.live = None
            self.view.detach()
            keyboard.stop()

    def run(self) -> None:
        """Block until the user quits or presses Ctrl+C."""
        logger.info("reminder loop started")
        try:
            self.loop.run_until_complete(self._main())
        except KeyboardInterrupt:
            logger.info("interrupted")
        finally:
            self.scheduler.close()
            self.loop.close()
            logger.info("reminder loop stopped")
