"""Preference management commands."""

import typer
from pydantic import ValidationError

from breakminder.models.config_models import PREFERENCE_KEYS
from breakminder.utils.exit_codes import ERROR_INVALID_ARGS
from breakminder.utils.typer_helpers import SuggestingGroup
from breakminder.utils.ui.console import get_console
from breakminder.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_output,
    format_success,
    format_value,
)

from .decorators import AppError, command_wrapper
from .login_item_command import apply_login_item
from .utils import load_preferences_service

app = typer.Typer(cls=SuggestingGroup, help="Preference management commands")
console = get_console()


def _check_key(key: str) -> None:
    if key not in PREFERENCE_KEYS:
        raise AppError(
            f"Unknown preference '{key}'. Valid keys: {', '.join(PREFERENCE_KEYS)}",
            exit_code=ERROR_INVALID_ARGS,
        )


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format (table, json, yaml)"),
) -> None:
    """View stored preferences."""
    if output not in OUTPUT_FORMATS:
        raise AppError(f"Unknown output format '{output}'", exit_code=ERROR_INVALID_ARGS)
    service = load_preferences_service()
    format_output(service.preferences.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Preference name (e.g. work_interval)"),
) -> None:
    """Get a preference value."""
    _check_key(key)
    service = load_preferences_service()
    console.print(format_value(service.get(key)))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Preference name (e.g. work_interval)"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a preference value."""
    _check_key(key)
    service = load_preferences_service()
    try:
        parsed = service.coerce(key, value)
    except ValidationError as e:
        message = e.errors()[0]["msg"]
        raise AppError(f"Invalid value for '{key}': {message}", exit_code=ERROR_INVALID_ARGS) from e
    if key == "launch_at_login":
        apply_login_item(service, parsed)
    else:
        service.set(key, parsed)
    format_success(f"Preference '{key}' set to '{service.get(key)}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset all preferences to defaults."""
    if not yes:
        if not typer.confirm("Reset all preferences to defaults?"):
            raise typer.Exit(0)
    service = load_preferences_service()
    service.reset()
    format_success("Preferences reset to defaults")
