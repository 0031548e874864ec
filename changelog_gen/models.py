"""Data types shared across the changelog pipeline."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Commit:
    """A single commit read from the repository.

    Attributes:
        hash: Short (7 character) commit hash.
        author: Author name.
        date: Author timestamp.
        message: Raw commit message as stored in git.
        display_message: Rewritten message from the enhancement pass, if any.
    """

    hash: str
    author: str
    date: datetime
    message: str
    display_message: Optional[str] = None

    @property
    def text(self) -> str:
        """The message every downstream consumer should show."""
        if self.display_message is not None:
            return self.display_message
        return self.message
