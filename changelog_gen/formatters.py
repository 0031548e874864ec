"""Changelog formatting and rendering."""

from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from changelog_gen.categories import CATEGORY_ORDER, Category, group_by_category
from changelog_gen.models import Commit


class OutputError(Exception):
    """Raised when the changelog cannot be written."""

    pass


# Conventional commit prefixes stripped for display, checked in this order
DISPLAY_PREFIXES = ["feat:", "fix:", "docs:", "chore:", "test:", "refactor:", "perf:"]

RULE_LINE = "─" * 37


def strip_scope(text: str) -> str:
    """Remove the first parenthesized group, e.g. "(auth): add" -> ": add".

    If the opening parenthesis is never closed, everything after it is dropped.
    """
    start = text.find("(")
    if start == -1:
        return text
    end = text.find(")", start + 1)
    if end == -1:
        return text[:start]
    return text[:start] + text[end + 1:]


def clean_message(message: str) -> str:
    """Turn a raw commit message into a changelog entry.

    Keeps the first line only, strips a conventional commit prefix and the
    first scope group, and capitalizes the first letter. Cleaning is meant to
    run once; applying it twice may change the text again.

    Args:
        message: The raw (or enhanced) commit message.

    Returns:
        The cleaned single-line message.

    Example:
        >>> clean_message("feat(auth): add login")
        'Add login'
    """
    cleaned = message.split("\n", 1)[0]

    for prefix in DISPLAY_PREFIXES:
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):]
            if cleaned.startswith(" "):
                cleaned = cleaned[1:]
            break
        # Scoped form "type(scope): ..." or "type(scope)!: ...": drop the type
        # and the "!", the scope goes next
        commit_type = prefix[:-1]
        if cleaned.startswith(f"{commit_type}("):
            close = cleaned.find(")")
            rest = cleaned[close + 1:]
            if close != -1 and rest.startswith((":", "!:")):
                cleaned = cleaned[len(commit_type):close + 1] + rest.removeprefix("!")
                break

    cleaned = strip_scope(cleaned)

    if cleaned.startswith(": "):
        cleaned = cleaned[2:]

    if cleaned and "a" <= cleaned[0] <= "z":
        cleaned = cleaned[0].upper() + cleaned[1:]

    return cleaned


def format_date(value: date) -> str:
    """Format a date as "January 2, 2006"."""
    return f"{value:%B} {value.day}, {value.year}"


def render_markdown(
    commits: Sequence[Commit],
    project_name: str,
    version: str,
    today: Optional[date] = None,
) -> str:
    """Render commits into a markdown changelog document.

    Args:
        commits: Commits in fetch order (enhanced, if enhancement ran).
        project_name: Project name for the title.
        version: Version string for the release heading.
        today: Date shown as the generation date. Defaults to today.

    Returns:
        The full markdown document.

    Example output:
        # Changelog - Demo

        ## Version 1.0
        **Generated:** March 4, 2025

        ###  Features

        - Add search ([a1])

        ---
        *Total commits: 1*
    """
    today = today or date.today()
    groups = group_by_category(commits)

    lines = [
        f"# Changelog - {project_name}",
        "",
        f"## Version {version}",
        f"**Generated:** {format_date(today)}",
        "",
    ]

    for category in CATEGORY_ORDER:
        category_commits = groups.get(category)
        if not category_commits:
            continue

        lines.append(f"### {category.label}")
        lines.append("")
        for commit in category_commits:
            lines.append(f"- {clean_message(commit.text)} ([{commit.hash}])")
        lines.append("")

    lines.append("---")
    lines.append(f"*Total commits: {len(commits)}*")

    return "\n".join(lines) + "\n"


def format_grouped_commits(groups: dict[Category, list[Commit]]) -> str:
    """Render grouped commits for terminal display.

    Args:
        groups: Output of group_by_category().

    Returns:
        Multi-line text listing each non-empty category with its commits.
    """
    lines = ["Categorized Commits:", ""]

    for category in CATEGORY_ORDER:
        category_commits = groups.get(category)
        if not category_commits:
            continue

        lines.append(f"{category.label} ({len(category_commits)})")
        lines.append(RULE_LINE)
        for commit in category_commits:
            summary = commit.text.split("\n", 1)[0]
            lines.append(f"  [{commit.hash}] {summary}")
        lines.append("")

    return "\n".join(lines)


def save_markdown(content: str, filename: str | Path) -> Path:
    """Write the changelog to disk, replacing any existing file.

    Args:
        content: The complete markdown document.
        filename: Destination path.

    Returns:
        The path that was written.

    Raises:
        OutputError: If the file cannot be written.
    """
    path = Path(filename)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write {path}: {e}")
    return path
