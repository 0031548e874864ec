"""CLI command for generating a changelog."""

from pathlib import Path
from typing import Optional

import typer

from changelog_gen.categories import group_by_category
from changelog_gen.cli.utils import load_config_or_exit
from changelog_gen.enhance import create_provider, enhance_commits
from changelog_gen.formatters import (
    OutputError,
    format_grouped_commits,
    render_markdown,
    save_markdown,
)
from changelog_gen.git import (
    GitError,
    RepositoryNotFoundError,
    get_recent_commits,
    open_repository,
)


def generate_command(
    since: Optional[str] = typer.Option(
        None,
        "--since",
        help="Only include commits after this revision (exclusive)",
    ),
    to: str = typer.Option(
        "HEAD",
        "--to",
        help="Revision to start reading history from",
    ),
    count: int = typer.Option(
        10,
        "--count",
        "-n",
        min=0,
        help="Number of commits to include",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default from config)",
    ),
    ai: bool = typer.Option(
        False,
        "--ai",
        help="Use AI to improve commit messages",
    ),
) -> None:
    """Analyze git commits and generate a changelog.

    Loads .changelogrc.yaml, reads the most recent commits, optionally
    rewrites them with AI, groups them by category and writes markdown.
    """
    config = load_config_or_exit()

    typer.echo("Generating changelog...", err=True)
    typer.echo(f"Project: {config.project.name}", err=True)
    typer.echo(f"Repository: {config.git.repository_path}", err=True)
    typer.echo("", err=True)

    # Step 1: Open the repository
    try:
        repo_root = open_repository(config.git.repository_path)
    except RepositoryNotFoundError as e:
        typer.echo(f"Error opening repository: {e}", err=True)
        typer.echo("", err=True)
        typer.echo("Tip: Make sure you're in a git repository!", err=True)
        raise typer.Exit(1)

    # Step 2: Read history
    typer.echo(f"Fetching last {count} commits...", err=True)
    try:
        commits = get_recent_commits(repo_root, count, to=to, since=since)
    except GitError as e:
        typer.echo(f"Error getting commits: {e}", err=True)
        typer.echo("", err=True)
        typer.echo("Tip: Make sure the repository has commits and the revisions exist", err=True)
        raise typer.Exit(1)

    typer.echo(f"Found {len(commits)} commits", err=True)
    typer.echo("", err=True)

    # Step 3: Optional AI enhancement (before any grouping or rendering)
    if ai or config.ai.enabled:
        provider = create_provider(config.ai)
        if provider is not None:
            commits = enhance_commits(commits, provider)

    # Step 4: Show grouped commits
    typer.echo(format_grouped_commits(group_by_category(commits)))

    # Step 5: Render and save
    typer.echo("Generating markdown...", err=True)
    markdown = render_markdown(commits, config.project.name, config.project.version)

    filename = output or Path(config.output.filename)
    try:
        saved_path = save_markdown(markdown, filename)
    except OutputError as e:
        typer.echo(f"Error saving file: {e}", err=True)
        typer.echo("", err=True)
        typer.echo("Tip: Check that the output directory exists and is writable", err=True)
        raise typer.Exit(1)

    typer.echo(f"Changelog saved to: {saved_path}", err=True)
    typer.echo("", err=True)
    typer.echo("Done!", err=True)
