"""Configuration models for the break scheduler.

``Preferences`` is what the user edits and what gets persisted.
``SchedulerConfig`` is fixed at construction time and never persisted.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Keys accepted by ``breakminder config get/set``
PREFERENCE_KEYS = (
    "should_run",
    "sound_enabled",
    "work_interval",
    "break_interval",
    "launch_at_login",
)


class Preferences(BaseModel):
    """The five user-configurable values."""

    should_run: bool = Field(default=True, description="Whether the countdown is running")
    sound_enabled: bool = Field(default=True, description="Play a sound with notifications")
    work_interval: int = Field(default=25, ge=1, description="Work interval in minutes")
    break_interval: int = Field(default=5, ge=1, description="Break interval in minutes")
    launch_at_login: bool = Field(default=False, description="Start automatically at login")


class Defaults(Preferences):
    """Fallback values used on first run and by ``reset_to_defaults``."""

    model_config = {"frozen": True}


class SchedulerConfig(BaseModel):
    """Construction-time settings of the scheduler."""

    tick_interval_seconds: float = Field(default=60.0, gt=0)
    allowed_inactivity_minutes: int = Field(default=5, ge=1)
    defaults: Defaults = Field(default_factory=Defaults)
