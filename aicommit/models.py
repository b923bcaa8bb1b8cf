"""Shared models for ai-commit."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class CommitStyle(str, Enum):
    CONVENTIONAL = "conventional"
    FREEFORM = "freeform"


class ConventionalType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    CHORE = "chore"
    PERF = "perf"
    CI = "ci"
    BUILD = "build"


class AIProvider(str, Enum):
    OPENAI = "openai"
    OPENROUTER = "openrouter"
    OLLAMA = "ollama"
    CUSTOM = "custom"


class FormattedMessage(BaseModel):
    subject: str
    body: Optional[str] = None

    def render(self) -> str:
        """Join subject and body with a single blank line."""
        if self.body:
            return f"{self.subject}\n\n{self.body}"
        return self.subject


class ValidationResult(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)


class ProviderConfig(BaseModel):
    model: str
    api_key: Optional[str] = None
    api_url: Optional[str] = None
    max_tokens: int = 150
    commit_style: str = CommitStyle.CONVENTIONAL.value


class RepoInfo(BaseModel):
    name: str
    branch: str


@dataclass
class CommitOptions:
    message: Optional[str] = None
    confirm: bool = True
    no_verify: bool = False


@dataclass
class CommitResult:
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
