"""Commit message validation."""
from typing import Union

from .validation import create_validation_chain
from ..models import CommitStyle, ValidationResult


class CommitMessageValidator:
    """Validates commit messages against the rules of a commit style."""

    def __init__(self, style: Union[CommitStyle, str] = CommitStyle.CONVENTIONAL):
        self.validation_chain = create_validation_chain(style)

    def validate(self, message: str) -> ValidationResult:
        """Check the subject line of ``message``; the message is not modified."""
        subject = message.split("\n")[0] if message else ""
        errors = self.validation_chain.handle(subject)
        return ValidationResult(valid=not errors, errors=errors)
