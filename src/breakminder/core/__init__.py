"""Core state machine: observable values, ticker and break scheduler."""

from .observable import ObservableValue, Subscription
from .scheduler import BreakScheduler, Phase, SchedulerSnapshot
from .ticker import PeriodicTicker

__all__ = [
    "BreakScheduler",
    "ObservableValue",
    "PeriodicTicker",
    "Phase",
    "SchedulerSnapshot",
    "Subscription",
]
