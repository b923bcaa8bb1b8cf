"""Tests for subject formatters, the summarizer and the body formatter."""
import pytest

from aicommit.commit_message.body import BodyFormatter
from aicommit.commit_message.formatter import (
    ConventionalFormatter,
    FreeformFormatter,
    create_formatter,
)
from aicommit.commit_message.summarizer import (
    find_action,
    find_context,
    tokenize,
    summarize_conventional,
    summarize_description,
    summarize_freeform,
)
from aicommit.commit_message.text import strip_type_prefix
from aicommit.exceptions import UnsupportedStyleError
from aicommit.models import CommitStyle


@pytest.fixture
def conventional():
    return ConventionalFormatter()


@pytest.fixture
def freeform():
    return FreeformFormatter()


def test_create_formatter_dispatch():
    assert isinstance(create_formatter("conventional"), ConventionalFormatter)
    assert isinstance(create_formatter(CommitStyle.FREEFORM), FreeformFormatter)


def test_create_formatter_unknown_style():
    with pytest.raises(UnsupportedStyleError) as exc_info:
        create_formatter("gitmoji")
    assert str(exc_info.value) == "Unsupported commit style: gitmoji"


class TestConventionalSubject:
    def test_strips_keyword_and_period(self, conventional):
        assert (
            conventional.format_subject("Fix memory leak in image processing pipeline.")
            == "fix: memory leak in image processing pipeline"
        )

    def test_keyword_must_be_whole_leading_word(self, conventional):
        # "added" is not the keyword "add", so nothing is stripped
        assert conventional.format_subject("added get_username method") == "feat: added get_username method"

    def test_already_conventional_is_unchanged(self, conventional):
        assert conventional.format_subject("feat(parser): add tokenizer") == "feat(parser): add tokenizer"
        # Idempotent even when the validator would complain
        assert conventional.format_subject("docs: Update guide") == "docs: Update guide"

    def test_leaked_prefix_is_replaced(self, conventional):
        assert conventional.format_subject("FEAT: Add login") == "feat: login"

    def test_lowercases_description(self, conventional):
        assert conventional.format_subject("Optimize Query planner") == "perf: query planner"

    def test_fallback_description(self, conventional):
        assert conventional.format_subject("Refactor:") == "refactor: update code"

    def test_unclassified_subject_defaults_to_feat(self, conventional):
        assert conventional.format_subject("Bump version to 2.0") == "feat: bump version to 2.0"


class TestFreeformSubject:
    def test_capitalizes_and_drops_period(self, freeform):
        assert freeform.format_subject("handle missing token.") == "Handle missing token"

    def test_keeps_existing_text(self, freeform):
        assert freeform.format_subject("Add get_username method") == "Add get_username method"

    def test_lone_period_falls_back_to_action(self, freeform):
        assert freeform.format_subject(".") == "Update"

    def test_only_one_period_removed(self, freeform):
        assert freeform.format_subject("wait for it..") == "Wait for it."


class TestSummarizer:
    def test_find_action(self):
        assert find_action(["we", "remove", "add"]) == "remove"
        assert find_action(["nothing", "here"]) == "update"
        assert find_action([], default="Update") == "Update"

    def test_find_context_prefers_technical_terms(self):
        assert find_context(["improve", "service", "config"]) == "config"

    def test_find_context_long_word_fallback(self):
        assert find_context(["from", "there", "about", "parsers"]) == "there"
        assert find_context(["with", "that", "tiny"]) == "functionality"

    def test_git_commit_phrasing(self):
        assert summarize_description("update the git commit body logic") == "update git commit body"
        assert summarize_description("fix git commit subject casing") == "fix git commit subject"
        assert summarize_description("add git commit hooks") == "add git commit handling"

    def test_template_phrasing(self):
        assert summarize_description("improve the template engine") == "improve template template"
        assert summarize_description("change output format rules") == "update format formatting"

    def test_summarize_conventional(self):
        text = (
            "Update the git commit body formatting logic so that it handles "
            "very long lines gracefully"
        )
        assert summarize_conventional(text) == "style: update git commit body"

    def test_summarize_conventional_strips_keyword(self):
        text = (
            "Resolve an issue where the config loader would crash when the file "
            "contains trailing commas"
        )
        assert summarize_conventional(text) == "fix: update config"

    def test_summarize_freeform_keeps_six_words(self):
        text = (
            "implemented a brand new caching layer for the user profile service "
            "which reduces database load"
        )
        assert summarize_freeform(text) == "Implemented brand caching layer user profile"

    def test_summarize_freeform_falls_back_to_action(self):
        assert summarize_freeform("a fix to it") == "Fix"
        assert summarize_freeform("it is so") == "Update"

    def test_tokenize_strips_trailing_punctuation(self):
        assert tokenize("Fix the parser, then the users.") == ["fix", "the", "parser", "then", "the", "users"]
        assert tokenize("... ok!") == ["ok"]

    def test_summarize_freeform_drops_trailing_period(self):
        text = "we had to do a lot of work on the app so it can run well for all of the new users."
        assert summarize_freeform(text) == "Work well users"


class TestStripTypePrefix:
    def test_removes_conventional_prefix_with_scope(self):
        assert strip_type_prefix("fix(api): Handle nulls", "fix") == "Handle nulls"

    def test_removes_revert_prefix(self):
        assert strip_type_prefix("Revert : old change", "feat") == "old change"

    def test_keyword_match_is_case_insensitive(self):
        assert strip_type_prefix("PATCH the leak", "fix") == "the leak"


class TestBodyFormatter:
    def test_bullets_normalized(self):
        formatter = BodyFormatter(CommitStyle.CONVENTIONAL)
        assert formatter.format_body("* add new validator") == "- add new validator"
        assert formatter.format_body("• remove old code\n+ rename module") == "- remove old code\n- rename module"

    def test_numbered_items_normalized(self):
        formatter = BodyFormatter(CommitStyle.CONVENTIONAL)
        assert formatter.format_body("1. first step\n2. second step") == "- first step\n- second step"

    def test_conventional_prefix_removed_from_lines(self):
        formatter = BodyFormatter(CommitStyle.CONVENTIONAL)
        assert formatter.format_body("refactor: move helpers") == "move helpers"

    def test_action_lines_get_dash(self):
        formatter = BodyFormatter(CommitStyle.CONVENTIONAL)
        body = "update docs for setup\nplain explanation"
        assert formatter.format_body(body) == "- update docs for setup\nplain explanation"

    def test_freeform_only_converts_bullets(self):
        formatter = BodyFormatter(CommitStyle.FREEFORM)
        body = "* add new validator\nfix: keep prefix\nupdate docs"
        assert formatter.format_body(body) == "- add new validator\nfix: keep prefix\nupdate docs"

    def test_blank_body(self):
        assert BodyFormatter().format_body("  \n ") == ""
