"""Main entry point for breakminder."""

import typer

from breakminder.commands import (
    config,
    login_item_command,
    run_command,
    status_command,
    version_command,
)
from breakminder.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="breakminder",
    cls=SuggestingGroup,
    help="Work/break interval reminder that pauses while you are away",
    no_args_is_help=True,
)

app.add_typer(config.app, name="config", help="Preference management")
app.add_typer(login_item_command.app, name="login-item", help="Launch-at-login registration")

# Top-level commands
app.command("run")(run_command.run)
app.command("status")(status_command.status)
app.command("version")(version_command.version)


if __name__ == "__main__":
    app()
