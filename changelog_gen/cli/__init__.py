"""CLI entry point for changelog-gen.

This module provides the main CLI application that combines all commands
into a single unified interface.
"""

import typer

from changelog_gen.cli.generate import generate_command
from changelog_gen.cli.init import init_config
from changelog_gen.cli.main import main_command
from changelog_gen.cli.show import show_config

# Main application
app = typer.Typer(
    name="changelog",
    help="changelog: AI-powered changelog generator",
    add_completion=False,
)

# Add individual commands
app.command("init")(init_config)
app.command("generate")(generate_command)
app.command("show")(show_config)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "init_config",
    "generate_command",
    "show_config",
    "main_command",
]
