"""Tests for changelog_gen.formatters module."""

from datetime import date

import pytest

from changelog_gen.categories import Category, group_by_category
from changelog_gen.formatters import (
    OutputError,
    clean_message,
    format_date,
    format_grouped_commits,
    render_markdown,
    save_markdown,
    strip_scope,
)


class TestCleanMessage:
    """Tests for clean_message function."""

    def test_scope_and_newline(self):
        """Test truncation, prefix and scope stripping, capitalization."""
        assert clean_message("feat(auth): add login\nmore text") == "Add login"

    def test_plain_prefix(self):
        """Test a simple prefix."""
        assert clean_message("fix: resolve crash") == "Resolve crash"

    @pytest.mark.parametrize("message,expected", [
        ("docs: update readme", "Update readme"),
        ("chore:bump deps", "Bump deps"),
        ("perf: faster  startup", "Faster  startup"),
        ("refactor(core): split module", "Split module"),
        ("test(parser): cover edge cases", "Cover edge cases"),
    ])
    def test_other_prefixes(self, message, expected):
        """Test the remaining prefixes."""
        assert clean_message(message) == expected

    def test_only_one_leading_space_removed(self):
        """Test that exactly one space after the prefix is dropped."""
        assert clean_message("feat:  spaced") == " spaced"

    def test_no_prefix_capitalizes(self):
        """Test messages without a prefix."""
        assert clean_message("update dependencies") == "Update dependencies"

    def test_non_ascii_first_letter_untouched(self):
        """Test that only ASCII lowercase letters are capitalized."""
        assert clean_message("über fast") == "über fast"

    def test_only_first_scope_removed(self):
        """Test that a second parenthesized group survives."""
        assert clean_message("Handle foo (bar) and (baz)") == "Handle foo  and (baz)"

    def test_unclosed_parenthesis(self):
        """Test that an unclosed group drops the rest of the line."""
        assert clean_message("fix: handle (edge case") == "Handle "

    @pytest.mark.parametrize("message,expected", [
        ("feat(api)!: remove v1 endpoints", "Remove v1 endpoints"),
        ("fix(parser)!: reject tabs", "Reject tabs"),
        ("fix(es) for layout", "Fix for layout"),
        ("feat(x) without colon", "Feat without colon"),
    ])
    def test_scoped_type_needs_colon(self, message, expected):
        """Test that the type is only dropped for "type(scope):" and "type(scope)!:"."""
        assert clean_message(message) == expected

    def test_bang_prefix_kept(self):
        """Test that 'feat!:' is not a display prefix."""
        assert clean_message("feat!: drop v1") == "Feat!: drop v1"

    def test_empty(self):
        """Test empty input."""
        assert clean_message("") == ""

    def test_cleaning_twice_is_not_idempotent(self):
        """Test that cleaning is meant to run once."""
        once = clean_message("fix: (a) (b) text")
        assert once == " (b) text"
        assert clean_message(once) == "  text"


class TestStripScope:
    """Tests for strip_scope function."""

    def test_strips_first_group(self):
        """Test removing a scope."""
        assert strip_scope("(api): add") == ": add"

    def test_no_group(self):
        """Test text without parentheses."""
        assert strip_scope("plain text") == "plain text"


class TestFormatDate:
    """Tests for format_date function."""

    def test_month_day_year(self):
        """Test the long date format without zero padding."""
        assert format_date(date(2025, 3, 4)) == "March 4, 2025"
        assert format_date(date(2024, 12, 25)) == "December 25, 2024"


class TestRenderMarkdown:
    """Tests for render_markdown function."""

    def test_end_to_end_document(self, sample_commits):
        """Test the complete document for a small release."""
        markdown = render_markdown(sample_commits, "Demo", "1.0", today=date(2025, 3, 4))

        expected = (
            "# Changelog - Demo\n"
            "\n"
            "## Version 1.0\n"
            "**Generated:** March 4, 2025\n"
            "\n"
            "###  Features\n"
            "\n"
            "- Add search ([a1])\n"
            "\n"
            "###  Bug Fixes\n"
            "\n"
            "- Button alignment ([b2])\n"
            "\n"
            "###  Documentation\n"
            "\n"
            "- Update readme ([c3])\n"
            "\n"
            "---\n"
            "*Total commits: 3*\n"
        )
        assert markdown == expected

    def test_category_order(self, make_commit):
        """Test that sections follow display order, not input order."""
        commits = [
            make_commit("chore: tidy", hash="c"),
            make_commit("feat!: remove api", hash="b"),
            make_commit("feat: add x", hash="f"),
        ]

        markdown = render_markdown(commits, "P", "2.0", today=date(2025, 1, 1))

        breaking = markdown.index(Category.BREAKING.label)
        features = markdown.index(Category.FEATURE.label)
        chores = markdown.index(Category.CHORE.label)
        assert breaking < features < chores

    def test_scoped_breaking_commit(self, make_commit):
        """Test that "type(scope)!:" renders as a readable breaking entry."""
        commit = make_commit("feat(api)!: remove v1 endpoints", hash="h1")

        markdown = render_markdown([commit], "P", "1", today=date(2025, 1, 1))

        assert f"### {Category.BREAKING.label}\n\n- Remove v1 endpoints ([h1])\n" in markdown
        assert "- !:" not in markdown

    def test_no_empty_sections(self, make_commit):
        """Test that empty categories get no header."""
        markdown = render_markdown([make_commit("feat: add x")], "P", "1", today=date(2025, 1, 1))

        assert markdown.count("### ") == 1
        assert Category.FIX.label not in markdown

    def test_footer_without_commits(self):
        """Test that the footer is always present."""
        markdown = render_markdown([], "P", "1", today=date(2025, 1, 1))

        assert "### " not in markdown
        assert markdown.endswith("---\n*Total commits: 0*\n")

    def test_uses_display_message(self, make_commit):
        """Test that enhanced text is rendered instead of the raw message."""
        commit = make_commit("feat: add search", hash="a1", display_message="Added a search box")

        markdown = render_markdown([commit], "P", "1", today=date(2025, 1, 1))

        assert "- Added a search box ([a1])" in markdown
        assert "add search" not in markdown

    def test_defaults_to_today(self, mocker):
        """Test that the generation date defaults to today."""
        fake_date = mocker.patch("changelog_gen.formatters.date")
        fake_date.today.return_value = date(2030, 7, 9)

        markdown = render_markdown([], "P", "1")

        assert "**Generated:** July 9, 2030" in markdown


class TestFormatGroupedCommits:
    """Tests for format_grouped_commits function."""

    def test_lists_categories_with_counts(self, sample_commits):
        """Test the terminal view."""
        text = format_grouped_commits(group_by_category(sample_commits))

        assert text.startswith("Categorized Commits:")
        assert f"{Category.FEATURE.label} (1)" in text
        assert "  [b2] fix(ui): button alignment" in text

    def test_shows_first_line_only(self, make_commit):
        """Test that message bodies are not printed."""
        text = format_grouped_commits(group_by_category([make_commit("feat: x\n\nbody", hash="h")]))

        assert "  [h] feat: x" in text
        assert "body" not in text


class TestSaveMarkdown:
    """Tests for save_markdown function."""

    def test_writes_and_overwrites(self, temp_dir):
        """Test that existing files are replaced."""
        target = temp_dir / "CHANGELOG.md"
        target.write_text("old")

        result = save_markdown("# new ✓\n", target)

        assert result == target
        assert target.read_text(encoding="utf-8") == "# new ✓\n"

    def test_missing_directory_raises(self, temp_dir):
        """Test that write failures become OutputError."""
        with pytest.raises(OutputError) as exc_info:
            save_markdown("x", temp_dir / "missing" / "CHANGELOG.md")

        assert "Failed to write" in str(exc_info.value)
