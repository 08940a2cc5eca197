"""Shared test fixtures and configuration.

Provides a deterministic fake event loop, recording port doubles and
isolation of the log file and preferences directory.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from unittest.mock import MagicMock, patch

import pytest

from breakminder.core.ports import (
    InactivityProbe,
    LoginItemPort,
    NotificationPort,
    PreferencesPort,
)
from breakminder.core.scheduler import BreakScheduler
from breakminder.models.config_models import Preferences, SchedulerConfig


# ---------------------------------------------------------------------------
# Fake event loop
# ---------------------------------------------------------------------------


class FakeHandle:
    def __init__(self, when: float, callback, args):
        self.when = when
        self._callback = callback
        self._args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def run(self) -> None:
        """Invoke the callback even if cancelled (simulates a late firing)."""
        self._callback(*self._args)


class FakeLoop:
    """Minimal stand-in for ``asyncio`` ``time``/``call_at`` with manual time."""

    def __init__(self):
        self._now = 0.0
        self._seq = itertools.count()
        self._queue: list[tuple[float, int, FakeHandle]] = []
        self.handles: list[FakeHandle] = []

    def time(self) -> float:
        return self._now

    def call_at(self, when, callback, *args) -> FakeHandle:
        handle = FakeHandle(when, callback, args)
        heapq.heappush(self._queue, (when, next(self._seq), handle))
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        target = self._now + seconds
        while self._queue and self._queue[0][0] <= target:
            when, _, handle = heapq.heappop(self._queue)
            self._now = max(self._now, when)
            if not handle.cancelled:
                handle.run()
        self._now = target

    def stall(self, seconds: float) -> None:
        """Move the clock forward without running anything, like a suspended process."""
        self._now += seconds


@pytest.fixture()
def fake_loop() -> FakeLoop:
    return FakeLoop()


# ---------------------------------------------------------------------------
# Port doubles
# ---------------------------------------------------------------------------


class ScriptedProbe(InactivityProbe):
    """Probe whose answer is set by the test; records each threshold asked."""

    def __init__(self, inactive: bool = False):
        self.inactive = inactive
        self.queries: list[int] = []

    def is_inactive(self, threshold_minutes: int) -> bool:
        self.queries.append(threshold_minutes)
        return self.inactive


class RecordingNotifier(NotificationPort):
    def __init__(self):
        self.sent: list[tuple[str, str, bool]] = []

    def send_single(self, title: str, subtitle: str, sound_enabled: bool) -> None:
        self.sent.append((title, subtitle, sound_enabled))


@pytest.fixture()
def probe() -> ScriptedProbe:
    return ScriptedProbe()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def preferences_port() -> MagicMock:
    return MagicMock(spec=PreferencesPort)


@pytest.fixture()
def login_item() -> MagicMock:
    return MagicMock(spec=LoginItemPort)


@pytest.fixture()
def make_scheduler(fake_loop, probe, notifier, preferences_port, login_item):
    """Factory building a BreakScheduler on the fake loop.

    Keyword arguments override ``Preferences`` fields; ``allowed_inactivity``
    and ``tick`` override the ``SchedulerConfig``.
    """

    def _make(allowed_inactivity: int = 5, tick: float = 60.0, **prefs) -> BreakScheduler:
        prefs.setdefault("should_run", True)
        return BreakScheduler(
            config=SchedulerConfig(
                tick_interval_seconds=tick,
                allowed_inactivity_minutes=allowed_inactivity,
            ),
            initial=Preferences(**prefs),
            probe=probe,
            notifier=notifier,
            preferences=preferences_port,
            login_item=login_item,
            loop=fake_loop,
        )

    return _make


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log into tmp_path and reset the singleton."""
    import breakminder.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("breakminder").handlers.clear()
    logging.getLogger("breakminder").propagate = True
    with patch("breakminder.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    logging.getLogger("breakminder").handlers.clear()
    logging.getLogger("breakminder").propagate = True


@pytest.fixture()
def prefs_dir(tmp_path):
    """Point the preferences service at tmp_path and clear its cache."""
    from breakminder.services.preferences_service import get_preferences_service

    config_dir = tmp_path / "config"
    get_preferences_service.cache_clear()
    with patch(
        "breakminder.services.preferences_service.user_config_dir",
        return_value=str(config_dir),
    ):
        yield config_dir
    get_preferences_service.cache_clear()
