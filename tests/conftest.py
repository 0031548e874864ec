"""Shared test fixtures and configuration."""

import subprocess
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from changelog_gen.models import Commit


def _git(repo: Path, *args: str) -> str:
    """Run git in a test repository with a fixed identity."""
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test Author",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def empty_git_repo(temp_dir):
    """A freshly initialized repository without commits."""
    _git(temp_dir, "init", "-q")
    return temp_dir


@pytest.fixture
def make_commits(empty_git_repo):
    """Factory that adds empty commits (oldest first) and returns their full hashes."""

    def _make(messages):
        hashes = []
        for message in messages:
            _git(empty_git_repo, "commit", "-q", "--allow-empty", "-m", message)
            hashes.append(_git(empty_git_repo, "rev-parse", "HEAD"))
        return hashes

    return _make


@pytest.fixture
def git_repo(empty_git_repo, make_commits):
    """A repository with a small conventional-commit history."""
    make_commits([
        "chore: initial commit",
        "feat(search): add search endpoint",
        "fix: resolve crash on empty query",
        "docs: update readme",
    ])
    return empty_git_repo


@pytest.fixture
def sample_commits():
    """Commits covering several categories, newest first."""
    when = datetime(2025, 3, 4, 12, 0, tzinfo=timezone.utc)
    return [
        Commit(hash="a1", author="Ada", date=when, message="feat: add search"),
        Commit(hash="b2", author="Ada", date=when, message="fix(ui): button alignment"),
        Commit(hash="c3", author="Bob", date=when, message="docs: update readme"),
    ]


@pytest.fixture
def make_commit():
    """Factory for a single Commit with defaults."""

    def _make(message, hash="abc1234", display_message=None):
        return Commit(
            hash=hash,
            author="Test Author",
            date=datetime(2025, 1, 1, tzinfo=timezone.utc),
            message=message,
            display_message=display_message,
        )

    return _make
