"""Commit classification into changelog categories.

Classification is a fixed, ordered rule set:

1. Breaking change markers ("BREAKING CHANGE", "BREAKING:" or any "!")
2. Conventional commit prefixes (feat, fix, docs, perf, refactor, test, chore)
3. Keyword fallback (add/implement/..., fix/bug/..., update/improve)
4. Everything else is Other

Note: rule 1 treats an exclamation mark anywhere in the message as a breaking
change, not only the "type!:" marker of Conventional Commits.
"""

from enum import Enum
from typing import Iterable

from changelog_gen.models import Commit


class Category(Enum):
    """Changelog categories, declared in display order."""

    BREAKING = "breaking"
    FEATURE = "feature"
    FIX = "fix"
    PERFORMANCE = "performance"
    REFACTOR = "refactor"
    DOCS = "docs"
    TEST = "test"
    CHORE = "chore"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Heading used for this category in changelog output."""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    Category.BREAKING: "  Breaking Changes",
    Category.FEATURE: " Features",
    Category.FIX: " Bug Fixes",
    Category.PERFORMANCE: " Performance",
    Category.REFACTOR: "  Refactoring",
    Category.DOCS: " Documentation",
    Category.TEST: " Tests",
    Category.CHORE: " Chores",
    Category.OTHER: " Other",
}

# Order in which categories are displayed
CATEGORY_ORDER = [
    Category.BREAKING,
    Category.FEATURE,
    Category.FIX,
    Category.PERFORMANCE,
    Category.REFACTOR,
    Category.DOCS,
    Category.TEST,
    Category.CHORE,
    Category.OTHER,
]

BREAKING_MARKERS = ("BREAKING CHANGE", "BREAKING:", "!")

# Conventional commit type -> category, checked in this order
CONVENTIONAL_PREFIXES = [
    ("feat", Category.FEATURE),
    ("fix", Category.FIX),
    ("docs", Category.DOCS),
    ("perf", Category.PERFORMANCE),
    ("refactor", Category.REFACTOR),
    ("test", Category.TEST),
    ("chore", Category.CHORE),
]

# Case-insensitive keyword fallback, checked in this order
KEYWORD_RULES = [
    (("add", "implement", "create", "new"), Category.FEATURE),
    (("fix", "bug", "issue", "resolve"), Category.FIX),
    (("update", "improve"), Category.REFACTOR),
]


def has_conventional_prefix(message: str, prefix: str) -> bool:
    """Check whether a message starts with a conventional commit type.

    Matches "type:", "type(scope)..." and "type!..." forms.

    Args:
        message: The commit message.
        prefix: The commit type, e.g. "feat".

    Returns:
        True if the message starts with the type followed by ":", "(" or "!".
    """
    return message.startswith((f"{prefix}:", f"{prefix}(", f"{prefix}!"))


def contains_keyword(message: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring check against any of the keywords."""
    lowered = message.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


def classify(message: str) -> Category:
    """Classify a commit message into exactly one category.

    Args:
        message: The commit message (full, multi-line text allowed).

    Returns:
        The first matching category; Category.OTHER when nothing matches.
    """
    if any(marker in message for marker in BREAKING_MARKERS):
        return Category.BREAKING

    for prefix, category in CONVENTIONAL_PREFIXES:
        if has_conventional_prefix(message, prefix):
            return category

    for keywords, category in KEYWORD_RULES:
        if contains_keyword(message, keywords):
            return category

    return Category.OTHER


def group_by_category(commits: Iterable[Commit]) -> dict[Category, list[Commit]]:
    """Partition commits into category buckets.

    Input order is preserved inside each bucket. Categories without commits
    are absent from the result.

    Args:
        commits: Commits in fetch order.

    Returns:
        Mapping of category to the commits classified into it.
    """
    groups: dict[Category, list[Commit]] = {}
    for commit in commits:
        groups.setdefault(classify(commit.text), []).append(commit)
    return groups
