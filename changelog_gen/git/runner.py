"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- open_repository: Resolve a path to the root of its git work tree
"""

import subprocess
from pathlib import Path

from changelog_gen.git.exceptions import GitError, RepositoryNotFoundError


def _run_git_command(args: list[str], cwd: Path | None = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in. Defaults to the current directory.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def open_repository(path: str | Path) -> Path:
    """Open the git repository containing the given path.

    Args:
        path: A path inside the repository (usually its root).

    Returns:
        Path to the repository root.

    Raises:
        RepositoryNotFoundError: If the path does not exist or is not in a git repo.
    """
    repo_path = Path(path).expanduser()
    if not repo_path.is_dir():
        raise RepositoryNotFoundError(f"Repository path does not exist: {repo_path}")

    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=repo_path)
    except GitError as e:
        raise RepositoryNotFoundError(f"Not a git repository: {repo_path}\n{e}")

    return Path(root)
