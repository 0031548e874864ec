"""Git access for changelog-gen.

This package provides:
- exceptions: GitError, RepositoryNotFoundError, NoCommitsError
- runner: _run_git_command, open_repository
- log: resolve_revision, iter_commits, get_recent_commits, parse_commit_record
"""

# Exceptions
from changelog_gen.git.exceptions import (
    GitError,
    NoCommitsError,
    RepositoryNotFoundError,
)

# Runner utilities
from changelog_gen.git.runner import (
    _run_git_command,
    open_repository,
)

# Commit history
from changelog_gen.git.log import (
    get_recent_commits,
    iter_commits,
    parse_commit_record,
    resolve_revision,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoCommitsError",
    "RepositoryNotFoundError",
    # Runner
    "_run_git_command",
    "open_repository",
    # Log
    "get_recent_commits",
    "iter_commits",
    "parse_commit_record",
    "resolve_revision",
]
