"""CLI command for initializing the project configuration."""

import typer

from changelog_gen.project_config import (
    CONFIG_FILENAME,
    ConfigError,
    config_exists,
    write_default_config,
)


def init_config() -> None:
    """Create a .changelogrc.yaml with default settings."""
    typer.echo("Initializing changelog configuration...")
    typer.echo()

    # Check if already configured
    if config_exists():
        typer.echo(f"{CONFIG_FILENAME} already exists!")
        overwrite = typer.confirm("Overwrite?", default=False)
        if not overwrite:
            typer.echo("Cancelled.")
            raise typer.Exit(0)

    try:
        write_default_config()
    except ConfigError as e:
        typer.echo(f"Error creating config: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Created {CONFIG_FILENAME}")
    typer.echo()
    typer.echo("Next steps:")
    typer.echo(f"  1. Edit {CONFIG_FILENAME} to set your preferences")
    typer.echo("  2. Run 'changelog generate' to create your first changelog")
