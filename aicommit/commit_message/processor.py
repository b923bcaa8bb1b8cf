"""Orchestration of sanitizing, formatting and validating commit messages."""
from typing import Union

from .constants import SUBJECT_MAX_LENGTH
from .formatter import create_formatter
from .sanitizer import MessageSanitizer
from .styles import resolve_style
from .validator import CommitMessageValidator
from ..exceptions import EmptyMessageError
from ..models import CommitStyle, FormattedMessage, ValidationResult


class CommitMessageProcessor:
    """Formats and validates messages according to one commit style."""

    def __init__(self, style: Union[CommitStyle, str] = CommitStyle.CONVENTIONAL):
        self.style = resolve_style(style)
        self.sanitizer = MessageSanitizer()
        self.formatter = create_formatter(self.style)
        self.validator = CommitMessageValidator(self.style)

    def build(self, raw_message: str) -> FormattedMessage:
        """Turn raw text into a subject and optional body.

        Raises:
            EmptyInputError: If ``raw_message`` is blank.
            EmptyMessageError: If nothing is left after sanitizing.
        """
        sanitized = self.sanitizer.sanitize(raw_message)
        lines = self.sanitizer.parse_lines(sanitized)

        if not lines:
            raise EmptyMessageError()

        first_line = lines[0]
        body = "\n".join(lines[1:]).strip()

        subject = None
        if len(first_line) <= SUBJECT_MAX_LENGTH:
            subject = self.formatter.format_subject(first_line)

        if subject is None or len(subject) > SUBJECT_MAX_LENGTH:
            # Keep the full line in the body so nothing is discarded
            subject = self.formatter.create_summary_subject(first_line)
            body = f"{first_line}\n{body}" if body else first_line

        formatted_body = self.formatter.format_body(body) if body else ""
        return FormattedMessage(subject=subject, body=formatted_body or None)

    def format(self, raw_message: str) -> str:
        return self.build(raw_message).render()

    def validate(self, message: str) -> ValidationResult:
        return self.validator.validate(message)


def format_commit_message(raw_message: str, style: Union[CommitStyle, str]) -> str:
    """Format ``raw_message`` according to ``style``."""
    return CommitMessageProcessor(style).format(raw_message)


def validate_commit_message(message: str, style: Union[CommitStyle, str]) -> ValidationResult:
    """Validate ``message`` according to ``style``."""
    return CommitMessageProcessor(style).validate(message)
