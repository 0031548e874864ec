"""Root callback: welcome banner and --version."""

import typer

from changelog_gen import __version__


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"changelog {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Changelog Generator - create release notes from your git history."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    typer.echo("Welcome to Changelog Generator!")
    typer.echo()
    typer.echo("Available commands:")
    typer.echo("  init      - Initialize configuration")
    typer.echo("  generate  - Generate a changelog")
    typer.echo("  show      - Show current configuration")
    typer.echo()
    typer.echo("Run 'changelog --help' for more information")
