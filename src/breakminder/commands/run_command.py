"""Command 'run' - start the work/break reminder loop."""

import typer

from breakminder.app import BreakReminderApp, default_notifier
from breakminder.models.config_models import SchedulerConfig
from breakminder.utils.exit_codes import ERROR_INVALID_ARGS
from breakminder.utils.ui.console import get_console

from .decorators import AppError, command_wrapper
from .utils import load_preferences_service

app = typer.Typer()
console = get_console()


@app.command("run")
@command_wrapper
def run(
    tick_seconds: float = typer.Option(
        60.0, "--tick-seconds", help="Seconds per countdown step (one minute by default)"
    ),
    allowed_inactivity: int = typer.Option(
        5, "--allowed-inactivity", help="Idle minutes before the work countdown freezes"
    ),
    desktop: bool = typer.Option(
        True, "--desktop/--no-desktop", help="Also send desktop notifications"
    ),
) -> None:
    """Start the reminder with a live status view."""
    if tick_seconds <= 0:
        raise AppError("--tick-seconds must be positive", exit_code=ERROR_INVALID_ARGS)
    if allowed_inactivity < 1:
        raise AppError("--allowed-inactivity must be at least 1", exit_code=ERROR_INVALID_ARGS)

    service = load_preferences_service()
    config = SchedulerConfig(
        tick_interval_seconds=tick_seconds,
        allowed_inactivity_minutes=allowed_inactivity,
        defaults=service.defaults,
    )

    reminder = BreakReminderApp(
        config=config,
        initial=service.initial_snapshot(),
        preferences=service,
        console=console,
        notifier=default_notifier(console, desktop=desktop),
    )
    reminder.run()
