"""Work/break phase state machine.

``BreakScheduler`` counts down the minutes of the current phase once per tick,
freezes the work countdown while the user is away, credits a slice of idle
time back when the user goes idle, and flips between work and break when the
countdown runs out. Every configurable value is an ``ObservableValue``; the
scheduler subscribes to them and reacts synchronously to every write.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from breakminder.core.observable import ObservableValue, Subscription
from breakminder.core.ports import (
    InactivityProbe,
    LoginItemPort,
    NotificationPort,
    PreferencesPort,
)
from breakminder.core.ticker import PeriodicTicker
from breakminder.models.config_models import Preferences, SchedulerConfig

logger = logging.getLogger(__name__)

BREAK_TITLE = "It's time for break"
BREAK_SUBTITLE = "Relax from your computer for {minutes} min."
WORK_TITLE = "It's time to work"
WORK_SUBTITLE = "Let's continue to do amazing things!"


class Phase(str, Enum):
    WORK = "work"
    BREAK = "break"

    def other(self) -> Phase:
        return Phase.BREAK if self is Phase.WORK else Phase.WORK


@dataclass(frozen=True)
class SchedulerSnapshot:
    """Read-only view of the scheduler for displays and status output."""

    phase: Phase
    remaining_minutes: int
    work_interval: int
    break_interval: int
    is_running: bool
    is_user_inactive: bool
    sound_enabled: bool
    launch_at_login: bool


class BreakScheduler:
    """Owns the phase, the remaining-minutes countdown and the idle latch."""

    def __init__(
        self,
        config: SchedulerConfig,
        initial: Preferences,
        probe: InactivityProbe,
        notifier: NotificationPort,
        preferences: PreferencesPort,
        login_item: LoginItemPort,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self.config = config
        self.defaults = config.defaults
        self.allowed_inactivity_minutes = config.allowed_inactivity_minutes

        self._probe = probe
        self._notifier = notifier
        self._preferences = preferences
        self._login_item = login_item

        self.should_run = ObservableValue(initial.should_run, "should_run")
        self.sound_enabled = ObservableValue(initial.sound_enabled, "sound_enabled")
        self.work_interval = ObservableValue(initial.work_interval, "work_interval")
        self.break_interval = ObservableValue(initial.break_interval, "break_interval")
        self.launch_at_login = ObservableValue(initial.launch_at_login, "launch_at_login")

        self.phase = ObservableValue(Phase.WORK, "phase")
        self.remaining_minutes = ObservableValue(initial.work_interval, "remaining_minutes")
        self.is_user_inactive = False

        self.ticker = PeriodicTicker(config.tick_interval_seconds, self.tick, loop=loop)

        self._wired = False
        self._subscriptions: list[Subscription] = [
            self.should_run.subscribe(self._on_should_run_changed),
            self.should_run.subscribe(preferences.set_should_run),
            self.work_interval.subscribe(self._on_work_interval_changed),
            self.work_interval.subscribe(preferences.set_work_interval),
            self.break_interval.subscribe(self._on_break_interval_changed),
            self.break_interval.subscribe(preferences.set_break_interval),
            self.launch_at_login.subscribe(self._on_launch_at_login_changed),
            self.launch_at_login.subscribe(preferences.set_launch_at_login),
            self.sound_enabled.subscribe(preferences.set_sound_enabled),
        ]
        self._wired = True

        if self.should_run.get():
            self.ticker.start()

        logger.info(
            "scheduler ready: work=%d break=%d running=%s",
            self.work_interval.get(),
            self.break_interval.get(),
            self.ticker.is_running(),
        )

    # ----- Derived state -----

    @property
    def is_break_time(self) -> bool:
        return self.phase.get() is Phase.BREAK

    def interval_for(self, phase: Phase) -> int:
        if phase is Phase.WORK:
            return self.work_interval.get()
        return self.break_interval.get()

    def snapshot(self) -> SchedulerSnapshot:
        return SchedulerSnapshot(
            phase=self.phase.get(),
            remaining_minutes=self.remaining_minutes.get(),
            work_interval=self.work_interval.get(),
            break_interval=self.break_interval.get(),
            is_running=self.ticker.is_running(),
            is_user_inactive=self.is_user_inactive,
            sound_enabled=self.sound_enabled.get(),
            launch_at_login=self.launch_at_login.get(),
        )

    # ----- Tick processing -----

    def tick(self) -> None:
        """Advance the countdown by one tick."""
        now_inactive = self._probe.is_inactive(self.allowed_inactivity_minutes)
        remaining = self.remaining_minutes.get()

        if not self.is_user_inactive and now_inactive:
            credit = min(
                self.work_interval.get() - remaining,
                self.allowed_inactivity_minutes,
            )
            # A negative credit would shorten the countdown, never apply it
            credit = max(credit, 0)
            if credit:
                remaining += credit
                self.remaining_minutes.set(remaining)
            logger.info("user went idle, credited %d min", credit)

        self.is_user_inactive = now_inactive

        if self.is_break_time or not self.is_user_inactive:
            remaining -= 1
            self.remaining_minutes.set(remaining)
            if remaining <= 0:
                self._switch_phase()

        logger.debug(
            "tick: phase=%s remaining=%d inactive=%s",
            self.phase.get().value,
            self.remaining_minutes.get(),
            self.is_user_inactive,
        )

    def _switch_phase(self) -> None:
        next_phase = self.phase.get().other()
        self.remaining_minutes.set(self.interval_for(next_phase))
        self.phase.set(next_phase)
        logger.info("phase changed to %s (%d min)", next_phase.value, self.remaining_minutes.get())
        self.send_notification()

    def send_notification(self) -> None:
        """Notify the user about the phase that just started."""
        if self.is_break_time:
            title = BREAK_TITLE
            subtitle = BREAK_SUBTITLE.format(minutes=self.break_interval.get())
        else:
            title = WORK_TITLE
            subtitle = WORK_SUBTITLE
        self._notifier.send_single(title, subtitle, self.sound_enabled.get())

    # ----- Configuration reactions -----

    def _on_should_run_changed(self, should_run: bool) -> None:
        if not self._wired:
            return
        if should_run:
            self.ticker.start()
        else:
            self.ticker.stop()

    def _on_work_interval_changed(self, work_interval: int) -> None:
        if not self.is_break_time:
            self.remaining_minutes.set(work_interval)

    def _on_break_interval_changed(self, break_interval: int) -> None:
        if self.is_break_time:
            self.remaining_minutes.set(break_interval)

    def _on_launch_at_login_changed(self, launch_at_login: bool) -> None:
        self._login_item.set_enabled(launch_at_login)

    # ----- Commands -----

    def pause_timer(self) -> None:
        self.should_run.set(False)
        # Re-publish the unchanged countdown so views redraw the paused state
        self.remaining_minutes.set(self.remaining_minutes.get())

    def resume_timer(self) -> None:
        self.should_run.set(True)

    def reset_to_defaults(self) -> None:
        self.sound_enabled.set(self.defaults.sound_enabled)
        self.work_interval.set(self.defaults.work_interval)
        self.break_interval.set(self.defaults.break_interval)
        self.should_run.set(self.defaults.should_run)
        logger.info("settings reset to defaults")

    def close(self) -> None:
        """Stop the ticker and detach from every observable."""
        self.ticker.stop()
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()
