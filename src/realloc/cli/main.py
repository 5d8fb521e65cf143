# src/realloc/cli/main.py
"""
This module is the main entry point for the realloc CLI.

It builds the Config once and hands it to the `resize` and `agent` commands
through the Typer context.
"""

import logging

import typer

from ..core.config import Config
from . import agent, resize

logger = logging.getLogger(__name__)


app = typer.Typer(
    name="realloc",
    help="Change the CPU, memory and bandwidth of a running Kubernetes container.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of realloc.
    """
    if value:
        from .. import __version__

        typer.echo(f"realloc version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of realloc.
    """
    from .. import __version__

    typer.echo(f"realloc version: {__version__}")


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    realloc CLI main entry point.
    """
    try:
        config = Config().validate_instance()
    except ValueError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    ctx.obj = config


# Register command sub-apps
app.add_typer(resize.app, name="resize")
app.add_typer(agent.app, name="agent")


if __name__ == "__main__":
    app()
