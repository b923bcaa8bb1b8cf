"""Conventional commit constants and heuristic word tables."""
import re
from typing import Dict, List

CONVENTIONAL_TYPES = [
    "feat", "fix", "docs", "style", "refactor",
    "test", "chore", "perf", "ci", "build",
]

SUBJECT_MAX_LENGTH = 72

CONVENTIONAL_REGEX = re.compile(rf"^({'|'.join(CONVENTIONAL_TYPES)})(\(.+\))?: .+")

# Leaked prefixes an AI may add to a subject or body line. Wider than the
# accepted types (includes revert) and tolerant of case and spacing.
CONVENTIONAL_PREFIX_REGEX = re.compile(
    r"^(feat|fix|docs|style|refactor|test|chore|perf|ci|build|revert)(\([^)]*\))?\s*:\s*",
    re.IGNORECASE,
)

# Checked in insertion order; the first type with a substring hit wins.
TYPE_DETECTION_MAP: Dict[str, List[str]] = {
    "feat": ["add", "implement", "create", "introduce"],
    "fix": ["fix", "resolve", "correct", "repair", "patch"],
    "docs": ["doc", "readme", "comment", "documentation"],
    "refactor": ["refactor", "restructure", "reorganize", "rewrite"],
    "test": ["test", "spec", "testing"],
    "style": ["style", "format", "lint", "prettier"],
    "perf": ["performance", "optimize", "speed", "faster"],
    "build": ["build", "compile", "bundle", "webpack"],
    "ci": ["ci", "pipeline", "workflow", "github", "actions"],
}

DEFAULT_TYPE = "feat"

FALLBACK_DESCRIPTION = "update code"

ACTION_WORDS = [
    "add", "remove", "update", "fix", "improve",
    "refactor", "implement", "create", "delete", "enhance",
]

TECHNICAL_TERMS = [
    "git", "commit", "body", "subject", "template", "format",
    "validation", "config", "api", "service", "utils",
]

SUMMARY_STOP_WORDS = [
    "from", "with", "that", "this", "when", "where", "they", "have", "been",
]

FREEFORM_STOP_WORDS = SUMMARY_STOP_WORDS + ["will", "were", "are"]

FREEFORM_MAX_SUMMARY_WORDS = 6

BODY_ACTION_SUBSTRINGS = ["add", "fix", "update"]

BULLET_REGEX = re.compile(r"^[•*+]\s*")
NUMBERED_REGEX = re.compile(r"^\d+\.\s*")
