"""Command 'status' - show stored preferences and defaults."""

import typer

from breakminder.utils.exit_codes import ERROR_INVALID_ARGS
from breakminder.utils.ui.console import get_console
from breakminder.utils.ui.formatters import OUTPUT_FORMATS, format_output

from .decorators import AppError, command_wrapper
from .utils import load_preferences_service

app = typer.Typer()
console = get_console()


@app.command("status")
@command_wrapper
def status(
    output: str = typer.Option("table", "--output", "-o", help="Output format (table, json, yaml)"),
) -> None:
    """Show the preferences the next run will start with."""
    if output not in OUTPUT_FORMATS:
        raise AppError(f"Unknown output format '{output}'", exit_code=ERROR_INVALID_ARGS)
    service = load_preferences_service()
    data = {
        "preferences_file": str(service.preferences_path),
        **service.preferences.model_dump(),
    }
    if output == "table":
        console.print("[bold]Current preferences[/bold]")
    format_output(data, output)
    if output == "table":
        console.print()
        console.print("[bold]Defaults[/bold]")
        format_output(service.defaults.model_dump(), output)
