"""Shared utility functions for CLI commands."""

import typer

from changelog_gen.config import AVAILABLE_MODELS, resolve_provider
from changelog_gen.project_config import ChangelogConfig, ConfigError, load_config


def load_config_or_exit() -> ChangelogConfig:
    """Load the project config, exiting with a tip if it is missing or invalid.

    Raises:
        typer.Exit: With code 1 if the config cannot be loaded.
    """
    try:
        return load_config()
    except ConfigError as e:
        typer.echo(f"Error loading config: {e}", err=True)
        typer.echo("", err=True)
        typer.echo("Tip: Run 'changelog init' to create a config file", err=True)
        raise typer.Exit(1)


def _is_known_model(provider: str, model: str) -> bool:
    """Check a model name against the provider's known models."""
    try:
        return model in AVAILABLE_MODELS[resolve_provider(provider)]
    except ValueError:
        return False


def format_config(config: ChangelogConfig) -> str:
    """Format the configuration for display.

    Args:
        config: The loaded configuration.

    Returns:
        Multi-line, human-readable summary.
    """
    ai_provider = config.ai.provider or "not set"
    if config.ai.model:
        ai_provider = f"{ai_provider}, {config.ai.model}"
        if not _is_known_model(config.ai.provider, config.ai.model):
            ai_provider = f"{ai_provider} [unlisted model]"

    categories = ", ".join(config.categories) if config.categories else "(none)"

    lines = [
        "Current Configuration:",
        "",
        f"  Project: {config.project.name} (v{config.project.version})",
        f"  Repository: {config.git.repository_path} (branch: {config.git.default_branch})",
        f"  Output: {config.output.filename} ({config.output.format})",
        f"  AI: {'enabled' if config.ai.enabled else 'disabled'} ({ai_provider})",
        f"  Categories: {categories}",
    ]
    return "\n".join(lines)
