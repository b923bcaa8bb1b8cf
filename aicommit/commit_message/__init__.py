"""Commit message formatting, validation and generation package."""

from .body import BodyFormatter
from .classifier import classify
from .formatter import (
    BaseFormatter,
    ConventionalFormatter,
    FreeformFormatter,
    create_formatter,
)
from .processor import (
    CommitMessageProcessor,
    format_commit_message,
    validate_commit_message,
)
from .sanitizer import MessageSanitizer
from .strategy import (
    CommitMessageStrategy,
    CustomCommitStrategy,
    OllamaCommitStrategy,
    OpenAICommitStrategy,
    OpenRouterCommitStrategy,
)
from .validator import CommitMessageValidator

__all__ = [
    'BodyFormatter',
    'classify',
    'BaseFormatter',
    'ConventionalFormatter',
    'FreeformFormatter',
    'create_formatter',
    'CommitMessageProcessor',
    'format_commit_message',
    'validate_commit_message',
    'MessageSanitizer',
    'CommitMessageStrategy',
    'CustomCommitStrategy',
    'OllamaCommitStrategy',
    'OpenAICommitStrategy',
    'OpenRouterCommitStrategy',
    'CommitMessageValidator',
]
