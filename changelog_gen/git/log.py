"""Commit history reading.

Contains:
- resolve_revision: Resolve a revision to a full commit hash
- iter_commits: Lazily stream commits from git log
- get_recent_commits: Take the first n commits of the stream
- parse_commit_record: Turn one git log record into a Commit
"""

import subprocess
import tempfile
from datetime import datetime
from itertools import islice
from pathlib import Path
from typing import Iterator, Optional

from changelog_gen.git.exceptions import GitError, NoCommitsError
from changelog_gen.git.runner import _run_git_command
from changelog_gen.models import Commit

SHORT_HASH_LENGTH = 7

# With -z every commit is NUL-terminated. Commit messages cannot contain NUL,
# and hash, author and date never contain a newline, so the message is
# whatever follows the third newline.
FIELD_SEP = "\n"
RECORD_SEP = "\x00"
LOG_FORMAT = "--format=%H%n%an%n%aI%n%B"

READ_CHUNK_SIZE = 8192


def resolve_revision(repo_root: Path, revision: str = "HEAD") -> str:
    """Resolve a revision to a full commit hash.

    Args:
        repo_root: The repository root.
        revision: Any revision git understands (HEAD, a tag, a hash, ...).

    Returns:
        The full commit hash.

    Raises:
        NoCommitsError: If the revision does not exist (e.g. HEAD in an empty repo).
    """
    try:
        return _run_git_command(
            ["rev-parse", "--verify", "--quiet", f"{revision}^{{commit}}"],
            cwd=repo_root,
        )
    except GitError:
        raise NoCommitsError(f"Failed to resolve {revision}: no such commit")


def parse_commit_record(record: str) -> Commit:
    """Parse a single git log record.

    Args:
        record: "hash\\nauthor\\niso-date\\nmessage" without the NUL terminator.

    Returns:
        The parsed Commit with a short hash.

    Raises:
        GitError: If the record is malformed.
    """
    parts = record.split(FIELD_SEP, 3)
    if len(parts) != 4:
        raise GitError(f"Unexpected git log output: {record[:80]!r}")

    full_hash, author, date_str, message = parts
    try:
        date = datetime.fromisoformat(date_str)
    except ValueError:
        raise GitError(f"Unexpected commit date {date_str!r} for {full_hash}")

    return Commit(
        hash=full_hash[:SHORT_HASH_LENGTH],
        author=author,
        date=date,
        message=message,
    )


def _read_records(stream) -> Iterator[str]:
    """Yield RECORD_SEP-terminated records from a text stream as they arrive."""
    buffer = ""
    for chunk in iter(lambda: stream.read(READ_CHUNK_SIZE), ""):
        buffer += chunk
        *records, buffer = buffer.split(RECORD_SEP)
        yield from records

    if buffer:
        yield buffer


def iter_commits(
    repo_root: Path,
    to: str = "HEAD",
    since: Optional[str] = None,
) -> Iterator[Commit]:
    """Lazily iterate over commits, newest first.

    The git process is only read as far as the caller consumes the iterator;
    closing the iterator early stops the process. git's stderr goes to a
    temporary file so it can never fill a pipe while stdout is being read.

    Args:
        repo_root: The repository root.
        to: Revision to start walking from.
        since: Optional revision to stop at (exclusive), i.e. ``since..to``.

    Yields:
        Commits in git log order.

    Raises:
        NoCommitsError: If a revision cannot be resolved.
        GitError: If git log fails.
    """
    start = resolve_revision(repo_root, to)
    rev_range = start
    if since:
        rev_range = f"{resolve_revision(repo_root, since)}..{start}"

    with tempfile.TemporaryFile(mode="w+", encoding="utf-8", errors="replace") as stderr_file:
        try:
            process = subprocess.Popen(
                ["git", "log", "-z", LOG_FORMAT, rev_range, "--"],
                cwd=repo_root,
                stdout=subprocess.PIPE,
                stderr=stderr_file,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH.")

        finished = False
        try:
            for record in _read_records(process.stdout):
                yield parse_commit_record(record)
            finished = True
        finally:
            if not finished and process.poll() is None:
                process.kill()
            process.stdout.close()
            returncode = process.wait()

        stderr_file.seek(0)
        stderr = stderr_file.read()

    if returncode != 0:
        raise GitError(f"Git command failed: git log {rev_range}\n{stderr.strip()}")


def get_recent_commits(
    repo_root: Path,
    count: int,
    to: str = "HEAD",
    since: Optional[str] = None,
) -> list[Commit]:
    """Get the last ``count`` commits reachable from ``to``.

    Args:
        repo_root: The repository root.
        count: Maximum number of commits to return.
        to: Revision to start from.
        since: Optional exclusive lower bound revision.

    Returns:
        Up to ``count`` commits, newest first.

    Raises:
        NoCommitsError: If a revision cannot be resolved.
        GitError: If reading history fails.
    """
    if count <= 0:
        return []

    commits = iter_commits(repo_root, to=to, since=since)
    try:
        return list(islice(commits, count))
    finally:
        commits.close()
