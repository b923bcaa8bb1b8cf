"""Condensed subjects for candidate lines that exceed the length budget."""
from typing import List

from .classifier import classify
from .constants import (
    ACTION_WORDS,
    FREEFORM_MAX_SUMMARY_WORDS,
    FREEFORM_STOP_WORDS,
    SUMMARY_STOP_WORDS,
    TECHNICAL_TERMS,
)
from .text import capitalize_first, lowercase_first, strip_type_prefix

TRAILING_PUNCTUATION = ".,;:!?"


def tokenize(text: str) -> List[str]:
    """Lower-cased words with trailing punctuation removed."""
    words = (word.rstrip(TRAILING_PUNCTUATION) for word in text.lower().split())
    return [word for word in words if word]


def find_action(words: List[str], default: str = "update") -> str:
    """First word that is a known action verb."""
    return next((word for word in words if word in ACTION_WORDS), default)


def find_context(words: List[str]) -> str:
    """Pick the word that best names what the change touches."""
    for term in TECHNICAL_TERMS:
        if term in words:
            return term
    for word in words:
        if len(word) > 4 and word not in SUMMARY_STOP_WORDS:
            return word
    return "functionality"


def summarize_description(text: str) -> str:
    """Build a two-to-four word description like ``add validation``."""
    words = tokenize(text)
    action = find_action(words)
    context = find_context(words)

    if "git" in words and "commit" in words:
        if "body" in words:
            detail = "body"
        elif "subject" in words:
            detail = "subject"
        else:
            detail = "handling"
        return f"{action} git commit {detail}"

    if "template" in words or "format" in words:
        detail = "formatting" if "format" in words else "template"
        return f"{action} {context} {detail}"

    return f"{action} {context}"


def summarize_conventional(long_text: str) -> str:
    """Return ``<type>: <short description>`` for an oversized line."""
    commit_type = classify(long_text)
    cleaned = strip_type_prefix(long_text, commit_type.value)
    summary = lowercase_first(summarize_description(cleaned))
    return f"{commit_type.value}: {summary}"


def summarize_freeform(long_text: str) -> str:
    """Keep the first few meaningful words of an oversized line."""
    words = tokenize(long_text)
    key_words = [
        word for word in words
        if len(word) > 3 and word not in FREEFORM_STOP_WORDS
    ][:FREEFORM_MAX_SUMMARY_WORDS]

    summary = " ".join(key_words)
    if not summary:
        summary = find_action(words, default="Update")
    return capitalize_first(summary)
