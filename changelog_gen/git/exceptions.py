"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- RepositoryNotFoundError: Raised when a path is not a git work tree
- NoCommitsError: Raised when the starting revision cannot be resolved
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class RepositoryNotFoundError(GitError):
    """Raised when the repository path is missing or not a git repository."""

    pass


class NoCommitsError(GitError):
    """Raised when HEAD (or the requested revision) does not exist."""

    pass
