"""Command 'version' of breakminder"""

import typer

from breakminder import __version__
from breakminder.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
