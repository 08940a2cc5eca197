"""Preferences service: persisted user settings for breakminder.

Implements ``PreferencesPort`` on top of a JSON file in the platform config
directory. Each ``set_*`` call from the scheduler rewrites the file; a write
failure is logged and otherwise ignored, since losing one preference write
must never interrupt the countdown.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError

from breakminder.core.ports import PreferencesPort
from breakminder.models.config_models import PREFERENCE_KEYS, Defaults, Preferences

logger = logging.getLogger(__name__)


class PreferencesService(PreferencesPort):
    """Loads, stores and persists the user's ``Preferences``."""

    def __init__(self, defaults: Defaults | None = None):
        self.defaults = defaults or Defaults()
        self.config_dir = Path(user_config_dir("breakminder"))
        self.preferences_path = self.config_dir / "preferences.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._preferences: Preferences | None = None

    @property
    def preferences(self) -> Preferences:
        """Get or load the current preferences."""
        if self._preferences is None:
            self._preferences = self.load_preferences()
        return self._preferences

    def load_preferences(self) -> Preferences:
        """Load preferences from disk, falling back to the defaults on first run."""
        if self._preferences is not None:
            return self._preferences

        try:
            with open(self.preferences_path, encoding="utf-8") as f:
                self._preferences = Preferences.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._preferences = Preferences(**self.defaults.model_dump())
        except (OSError, ValidationError) as e:
            raise RuntimeError(f"Failed to load preferences: {e}") from e

        return self._preferences

    def initial_snapshot(self) -> Preferences:
        """Copy of the stored preferences, used to seed the scheduler."""
        return self.preferences.model_copy()

    def save_preferences(self) -> bool:
        """Write preferences to disk. Returns False if the write failed."""
        try:
            self.preferences_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.preferences_path, "w", encoding="utf-8") as f:
                f.write(self.preferences.model_dump_json(indent=4))
        except OSError as e:
            logger.warning("could not save preferences to %s: %s", self.preferences_path, e)
            return False
        return True

    def get(self, key: str) -> Any:
        if key not in PREFERENCE_KEYS:
            raise KeyError(key)
        return getattr(self.preferences, key)

    def coerce(self, key: str, value: Any) -> Any:
        """Validate a raw value for one preference without storing it."""
        if key not in PREFERENCE_KEYS:
            raise KeyError(key)
        data = self.preferences.model_dump()
        data[key] = value
        return getattr(Preferences.model_validate(data), key)

    def set(self, key: str, value: Any) -> None:
        """Validate and store one preference by name."""
        self._store(key, self.coerce(key, value))

    def reset(self) -> None:
        """Reset every preference to its default and persist."""
        self._preferences = Preferences(**self.defaults.model_dump())
        self.save_preferences()

    # ----- PreferencesPort -----

    def set_should_run(self, value: bool) -> None:
        self._store("should_run", value)

    def set_work_interval(self, value: int) -> None:
        self._store("work_interval", value)

    def set_break_interval(self, value: int) -> None:
        self._store("break_interval", value)

    def set_launch_at_login(self, value: bool) -> None:
        self._store("launch_at_login", value)

    def set_sound_enabled(self, value: bool) -> None:
        self._store("sound_enabled", value)

    def _store(self, key: str, value: Any) -> None:
        # Callers pass values that are already validated
        setattr(self.preferences, key, value)
        self.save_preferences()


@lru_cache(maxsize=1)
def get_preferences_service() -> PreferencesService:
    """Get a cached PreferencesService instance."""
    service = PreferencesService()
    service.load_preferences()
    return service
