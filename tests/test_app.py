"""Tests for the composition root in breakminder.app."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from breakminder.adapters.notifier import CompositeNotifier, ConsoleNotifier
from breakminder.app import BreakReminderApp, build_scheduler, default_notifier
from breakminder.models.config_models import Preferences, SchedulerConfig


@pytest.fixture()
def reminder(fake_loop, probe, notifier, preferences_port, login_item):
    return BreakReminderApp(
        config=SchedulerConfig(),
        initial=Preferences(),
        preferences=preferences_port,
        console=MagicMock(),
        probe=probe,
        notifier=notifier,
        login_item=login_item,
        loop=fake_loop,
    )


class TestBuildScheduler:
    def test_wires_given_ports(self, fake_loop, probe, notifier, preferences_port, login_item):
        scheduler = build_scheduler(
            SchedulerConfig(allowed_inactivity_minutes=3),
            Preferences(work_interval=2),
            preferences_port,
            probe=probe,
            notifier=notifier,
            login_item=login_item,
            loop=fake_loop,
        )
        scheduler.tick()
        scheduler.tick()
        assert probe.queries == [3, 3]
        assert len(notifier.sent) == 1
        preferences_port.set_work_interval.assert_called_once_with(2)

    def test_default_notifier(self):
        console = MagicMock()
        assert isinstance(default_notifier(console, desktop=False), ConsoleNotifier)
        assert isinstance(default_notifier(console), CompositeNotifier)


class TestBreakReminderApp:
    def test_keys_drive_scheduler(self, reminder):
        s = reminder.scheduler

        reminder.handle_key("p")
        assert s.ticker.is_running() is False

        reminder.handle_key("r")
        assert s.ticker.is_running() is True

        s.work_interval.set(50)
        reminder.handle_key("d")
        assert s.work_interval.get() == 25

        reminder.handle_key(None)
        reminder.handle_key("x")
        assert s.ticker.is_running() is True

    def test_quit_key(self, reminder):
        reminder.handle_key("q")
        assert reminder._quit_requested is True

    def test_run_until_quit(self, probe, notifier, preferences_port, login_item):
        keys = iter(["p", "q"])
        keyboard = MagicMock()
        keyboard.get_key.side_effect = lambda: next(keys, None)
        reminder = BreakReminderApp(
            config=SchedulerConfig(tick_interval_seconds=0.01),
            initial=Preferences(),
            preferences=preferences_port,
            console=MagicMock(),
            probe=probe,
            notifier=notifier,
            login_item=login_item,
            loop=asyncio.new_event_loop(),
        )

        with (
            patch("breakminder.app.get_keyboard_handler", return_value=keyboard),
            patch("breakminder.app.Live") as live_cls,
            patch("breakminder.app.KEY_POLL_SECONDS", 0),
        ):
            reminder.run()

        keyboard.stop.assert_called_once()
        live_cls.assert_called_once()
        assert reminder.scheduler.should_run.get() is False
        assert reminder.scheduler.ticker.is_running() is False
        assert reminder.loop.is_closed()
        assert reminder.view.live is None
