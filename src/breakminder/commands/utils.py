"""Shared helpers for commands."""

from breakminder.services.preferences_service import (
    PreferencesService,
    get_preferences_service,
)
from breakminder.utils.exit_codes import ERROR_CONFIG

from .decorators import AppError


def load_preferences_service() -> PreferencesService:
    """Return the preferences service, mapping an unreadable file to AppError."""
    try:
        return get_preferences_service()
    except RuntimeError as e:
        raise AppError(str(e), exit_code=ERROR_CONFIG) from e
