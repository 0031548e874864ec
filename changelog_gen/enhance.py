"""Best-effort rewriting of commit messages through an LLM provider."""

from dataclasses import replace
from typing import Optional, Sequence

import typer

from changelog_gen.config import resolve_provider
from changelog_gen.formatters import clean_message
from changelog_gen.llm import BaseLLMProvider, LLMError, get_provider
from changelog_gen.models import Commit
from changelog_gen.project_config import AISettings


def create_provider(settings: AISettings) -> Optional[BaseLLMProvider]:
    """Build the provider configured in the ai section.

    Any problem (unknown provider, missing credential) disables enhancement
    for the whole run instead of failing it.

    Args:
        settings: The ai section of the project config.

    Returns:
        A ready provider, or None if enhancement is unavailable.
    """
    try:
        provider = get_provider(resolve_provider(settings.provider), model=settings.model)
        # Fail early on a missing credential rather than once per commit
        provider.get_api_key()
    except (ValueError, LLMError) as e:
        typer.echo(f"AI not available: {e}", err=True)
        typer.echo("   Continuing without AI enhancement...", err=True)
        typer.echo("", err=True)
        return None

    return provider


def enhance_commits(commits: Sequence[Commit], provider: BaseLLMProvider) -> list[Commit]:
    """Rewrite each commit message, one request per commit.

    Commits keep their order. When a request fails, that commit falls back
    to the locally cleaned message and processing continues.

    Args:
        commits: Commits in fetch order.
        provider: The LLM provider to call.

    Returns:
        New Commit objects with display_message set; the raw message is kept.
    """
    typer.echo("Using AI to improve commit messages...", err=True)
    typer.echo("", err=True)

    enhanced = []
    for i, commit in enumerate(commits, 1):
        typer.echo(f"  Processing {i}/{len(commits)}: {commit.hash}", err=True)

        try:
            text = provider.improve_message(commit.message).text
        except LLMError as e:
            typer.echo(f"  Error: {e} (using original)", err=True)
            text = clean_message(commit.message)

        enhanced.append(replace(commit, display_message=text))

    typer.echo("", err=True)
    typer.echo("AI processing complete!", err=True)
    typer.echo("", err=True)
    return enhanced
