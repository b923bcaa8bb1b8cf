"""Tests for raw message sanitizing."""
import pytest

from aicommit.commit_message.sanitizer import MessageSanitizer
from aicommit.exceptions import EmptyInputError, InputError


@pytest.fixture
def sanitizer():
    return MessageSanitizer()


@pytest.mark.parametrize("raw", ["", "   ", "\n\t\n", None, 42])
def test_sanitize_rejects_blank_or_non_string(sanitizer, raw):
    with pytest.raises(EmptyInputError) as exc_info:
        sanitizer.sanitize(raw)
    assert isinstance(exc_info.value, InputError)
    assert "non-empty string" in str(exc_info.value)


def test_sanitize_trims_whitespace(sanitizer):
    assert sanitizer.sanitize("  feat: add parser \n") == "feat: add parser"


def test_sanitize_removes_markdown(sanitizer):
    assert sanitizer.sanitize("**feat**: add `parse_args` helper") == "feat: add parse_args helper"
    assert sanitizer.sanitize("fix: handle *empty* input") == "fix: handle empty input"


def test_sanitize_removes_code_blocks(sanitizer):
    raw = "fix: handle timeouts\n```python\nprint('debug')\n```\nRetry twice before failing"
    sanitized = sanitizer.sanitize(raw)
    assert "print" not in sanitized
    assert "```" not in sanitized
    assert sanitizer.parse_lines(sanitized) == ["fix: handle timeouts", "Retry twice before failing"]


def test_sanitize_can_leave_nothing(sanitizer):
    # Only a code block: sanitizing succeeds but leaves no lines
    sanitized = sanitizer.sanitize("```\nsome code\n```")
    assert sanitizer.parse_lines(sanitized) == []


def test_bullet_asterisks_on_separate_lines_are_kept(sanitizer):
    sanitized = sanitizer.sanitize("* add parser\n* fix lexer")
    assert sanitized == "* add parser\n* fix lexer"


def test_parse_lines_drops_blank_lines(sanitizer):
    assert sanitizer.parse_lines("first\n\n   \n  second  \n") == ["first", "second"]
