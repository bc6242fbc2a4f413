"""
Main Typer application for the smoothie CLI.

This module defines the root CLI application and registers all commands.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from smoothie import __version__
from smoothie.cli.commands import install
from smoothie.cli.output import console, print_info

# Create the main Typer app
app = typer.Typer(
    name="smoothie",
    help="Install Filament skills for your code editor or coding agent.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"smoothie version [green]{__version__}[/green]")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]smoothie[/bold blue] - Filament skills installer

    Copies Filament skills into your editor's skills directory and
    registers them so your coding assistant picks them up.
    """
    configure_logging(verbose)


# Register commands
app.command("install")(install.install)
app.command("skill")(install.skill)
app.command("list")(install.list_skills)


if __name__ == "__main__":
    app()
