"""Subject formatting for each commit style."""
from abc import ABC, abstractmethod
from typing import Union

from .body import BodyFormatter
from .classifier import classify
from .constants import CONVENTIONAL_REGEX, FALLBACK_DESCRIPTION
from .styles import resolve_style
from .summarizer import summarize_conventional, summarize_freeform
from .text import capitalize_first, lowercase_first, remove_trailing_period, strip_type_prefix
from ..models import CommitStyle


class BaseFormatter(ABC):
    """Abstract base class for commit message formatters."""

    style: CommitStyle

    def __init__(self):
        self.body_formatter = BodyFormatter(self.style)

    @abstractmethod
    def format_subject(self, subject: str) -> str:
        """Turn a candidate first line into a compliant subject."""
        pass

    @abstractmethod
    def create_summary_subject(self, long_message: str) -> str:
        """Build a short subject for a candidate that is too long."""
        pass

    def format_body(self, body: str) -> str:
        return self.body_formatter.format_body(body)


class ConventionalFormatter(BaseFormatter):
    """Formats subjects as ``<type>[(scope)]: <description>``."""

    style = CommitStyle.CONVENTIONAL

    def format_subject(self, subject: str) -> str:
        subject = remove_trailing_period(subject)

        if CONVENTIONAL_REGEX.match(subject):
            return subject

        commit_type = classify(subject)
        cleaned = strip_type_prefix(subject, commit_type.value)
        description = lowercase_first(cleaned or FALLBACK_DESCRIPTION)
        return f"{commit_type.value}: {description}"

    def create_summary_subject(self, long_message: str) -> str:
        return summarize_conventional(long_message)


class FreeformFormatter(BaseFormatter):
    """Formats subjects as plain sentences without a type prefix."""

    style = CommitStyle.FREEFORM

    def format_subject(self, subject: str) -> str:
        formatted = capitalize_first(remove_trailing_period(subject))
        # A lone period leaves nothing to capitalize
        return formatted or summarize_freeform(subject)

    def create_summary_subject(self, long_message: str) -> str:
        return summarize_freeform(long_message)


def create_formatter(style: Union[CommitStyle, str]) -> BaseFormatter:
    """Return the formatter for ``style``."""
    style = resolve_style(style)
    if style == CommitStyle.CONVENTIONAL:
        return ConventionalFormatter()
    return FreeformFormatter()
