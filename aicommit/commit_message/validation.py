"""Commit message validation using Chain of Responsibility pattern.

Unlike a short-circuiting chain, every handler runs: each one appends its
violation (if any) and forwards the subject to the next handler, so the
caller sees all problems at once.
"""
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Union

from .constants import CONVENTIONAL_REGEX, SUBJECT_MAX_LENGTH
from .styles import resolve_style
from ..models import CommitStyle

_DESCRIPTION_START = re.compile(r"^[^:]+: (.)")


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional["ValidationHandler"] = None):
        self.next_handler = next_handler

    def handle(self, subject: str, errors: Optional[List[str]] = None) -> List[str]:
        """Record this handler's violation and pass on to the next handler."""
        errors = [] if errors is None else errors
        error = self.validate(subject)
        if error:
            errors.append(error)
        if self.next_handler:
            return self.next_handler.handle(subject, errors)
        return errors

    @abstractmethod
    def validate(self, subject: str) -> Optional[str]:
        """Return a violation description, or None when the subject passes."""
        pass


class SubjectLengthHandler(ValidationHandler):
    def __init__(self, max_length: int = SUBJECT_MAX_LENGTH, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, subject: str) -> Optional[str]:
        if len(subject) > self.max_length:
            return f"Subject line exceeds {self.max_length} characters"
        return None


class EmptySubjectHandler(ValidationHandler):
    def validate(self, subject: str) -> Optional[str]:
        if len(subject) == 0:
            return "Subject line is empty"
        return None


class ConventionalFormatHandler(ValidationHandler):
    def validate(self, subject: str) -> Optional[str]:
        if not CONVENTIONAL_REGEX.match(subject):
            return "Subject line does not follow Conventional Commits format"
        return None


class LowercaseDescriptionHandler(ValidationHandler):
    def validate(self, subject: str) -> Optional[str]:
        match = _DESCRIPTION_START.match(subject)
        if match and match.group(1) != match.group(1).lower():
            return "Description should start with lowercase letter"
        return None


class SubjectPeriodHandler(ValidationHandler):
    def validate(self, subject: str) -> Optional[str]:
        if subject.endswith("."):
            return "Subject line should not end with a period"
        return None


def create_validation_chain(
    style: Union[CommitStyle, str] = CommitStyle.CONVENTIONAL,
    max_subject_length: int = SUBJECT_MAX_LENGTH,
) -> ValidationHandler:
    """Create the validation chain for a commit style.

    Freeform messages only get the basic structure checks; conventional
    messages also get format, capitalization and period checks.
    """
    style = resolve_style(style)

    tail = None
    if style == CommitStyle.CONVENTIONAL:
        period = SubjectPeriodHandler()
        lowercase = LowercaseDescriptionHandler(period)
        tail = ConventionalFormatHandler(lowercase)

    empty_subject = EmptySubjectHandler(tail)
    return SubjectLengthHandler(max_subject_length, empty_subject)
