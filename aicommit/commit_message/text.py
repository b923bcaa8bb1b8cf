"""Small string helpers shared by formatters and the summarizer."""
import re

from .constants import CONVENTIONAL_PREFIX_REGEX, TYPE_DETECTION_MAP


def remove_trailing_period(text: str) -> str:
    return text[:-1] if text.endswith(".") else text


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def lowercase_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def strip_type_prefix(text: str, commit_type: str) -> str:
    """Remove a leaked ``type(scope):`` prefix, then a leading type keyword.

    The keyword must be followed by whitespace, so "Fix bug" loses "Fix "
    while "added x" keeps "added" ("add" is the keyword, not "added").
    """
    cleaned = CONVENTIONAL_PREFIX_REGEX.sub("", text, count=1)

    keywords = TYPE_DETECTION_MAP.get(str(commit_type), [])
    if keywords:
        pattern = "|".join(re.escape(keyword) for keyword in keywords)
        cleaned = re.sub(rf"^({pattern})\s+", "", cleaned, count=1, flags=re.IGNORECASE)

    return cleaned
