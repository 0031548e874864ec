"""CLI command for displaying the project configuration."""

import typer

from changelog_gen.cli.utils import format_config, load_config_or_exit


def show_config() -> None:
    """Show the current configuration from .changelogrc.yaml."""
    config = load_config_or_exit()
    typer.echo(format_config(config))
