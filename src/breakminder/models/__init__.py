"""Configuration models."""

from .config_models import Defaults, Preferences, SchedulerConfig

__all__ = ["Defaults", "Preferences", "SchedulerConfig"]
