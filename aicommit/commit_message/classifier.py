"""Keyword heuristic mapping free text to a conventional commit type."""
from .constants import DEFAULT_TYPE, TYPE_DETECTION_MAP
from ..models import ConventionalType


def classify(text: str) -> ConventionalType:
    """Return the first type whose keywords appear as substrings of ``text``.

    Matching is plain substring search on the lower-cased text, so "add"
    also hits "address" and "ci" hits "decision". Falls back to ``feat``.
    """
    lowered = text.lower()
    for commit_type, keywords in TYPE_DETECTION_MAP.items():
        if any(keyword in lowered for keyword in keywords):
            return ConventionalType(commit_type)
    return ConventionalType(DEFAULT_TYPE)
