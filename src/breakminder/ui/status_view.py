"""Live status panel for the reminder loop."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from breakminder.core.observable import Subscription
from breakminder.core.scheduler import BreakScheduler, Phase, SchedulerSnapshot

KEY_HINTS = "'p' pause  •  'r' resume  •  'd' defaults  •  'q' quit"


class StatusView:
    """Redraws whenever one of the scheduler's observables is written."""

    def __init__(self, scheduler: BreakScheduler, console: Console | None = None):
        self.scheduler = scheduler
        self.console = console or Console()
        self.live: Live | None = None
        self.refresh_count = 0
        self._subscriptions: list[Subscription] = []

    def attach(self) -> None:
        s = self.scheduler
        for observable in (
            s.phase,
            s.remaining_minutes,
            s.should_run,
            s.work_interval,
            s.break_interval,
            s.sound_enabled,
            s.launch_at_login,
        ):
            self._subscriptions.append(observable.subscribe(self.refresh))

    def detach(self) -> None:
        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions.clear()

    def refresh(self, _value=None) -> None:
        self.refresh_count += 1
        if self.live is not None:
            self.live.update(self.render())

    def render(self) -> Panel:
        snap = self.scheduler.snapshot()
        return Panel(
            Align.center(self._body(snap)),
            title="breakminder",
            border_style=self._color(snap),
            padding=(1, 2),
        )

    def _color(self, snap: SchedulerSnapshot) -> str:
        if not snap.is_running:
            return "yellow"
        return "green" if snap.phase is Phase.BREAK else "cyan"

    def _body(self, snap: SchedulerSnapshot) -> Group:
        if not snap.is_running:
            heading = "PAUSED"
        elif snap.phase is Phase.BREAK:
            heading = "Break time"
        else:
            heading = "Working"

        total = snap.break_interval if snap.phase is Phase.BREAK else snap.work_interval
        remaining = max(snap.remaining_minutes, 0)
        components = [
            Text(heading, style=f"bold {self._color(snap)}", justify="center"),
            Text(f"{remaining} min left of {total}", style="bold", justify="center"),
        ]
        if snap.is_user_inactive and snap.phase is Phase.WORK:
            components.append(Text("away - work countdown frozen", style="dim", justify="center"))

        sound = "on" if snap.sound_enabled else "off"
        login = "on" if snap.launch_at_login else "off"
        components.append(Text(""))
        components.append(
            Text(
                f"work {snap.work_interval} min  •  break {snap.break_interval} min"
                f"  •  sound {sound}  •  at login {login}",
                style="dim",
                justify="center",
            )
        )
        components.append(Text(KEY_HINTS, style="dim", justify="center"))
        return Group(*components)
