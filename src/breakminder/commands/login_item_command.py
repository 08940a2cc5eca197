"""Command 'login-item' - register breakminder to start at login."""

import typer

from breakminder.adapters.login_item import LoginItemManager
from breakminder.services.preferences_service import PreferencesService
from breakminder.utils.exit_codes import ERROR_LOGIN_ITEM
from breakminder.utils.typer_helpers import SuggestingGroup
from breakminder.utils.ui.formatters import format_info, format_success

from .decorators import AppError, command_wrapper
from .utils import load_preferences_service

app = typer.Typer(cls=SuggestingGroup, help="Launch-at-login registration")


def apply_login_item(
    service: PreferencesService,
    enabled: bool,
    manager: LoginItemManager | None = None,
) -> None:
    """Register or unregister the login item and persist the preference."""
    manager = manager or LoginItemManager()
    if not manager.set_enabled(enabled):
        raise AppError("Could not update the login item, see the log for details", ERROR_LOGIN_ITEM)
    service.set_launch_at_login(enabled)


@app.command("enable")
@command_wrapper
def enable() -> None:
    """Start breakminder automatically when you log in."""
    apply_login_item(load_preferences_service(), True)
    format_success("breakminder will start at login")


@app.command("disable")
@command_wrapper
def disable() -> None:
    """Stop starting breakminder at login."""
    apply_login_item(load_preferences_service(), False)
    format_success("breakminder will no longer start at login")


@app.command("status")
@command_wrapper
def status() -> None:
    """Show whether the login item is registered."""
    registered = LoginItemManager().is_enabled()
    format_info(f"Login item {'registered' if registered else 'not registered'}")
