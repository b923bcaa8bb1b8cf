"""Normalization of commit message body lines."""
from typing import List, Union

from .constants import (
    BODY_ACTION_SUBSTRINGS,
    BULLET_REGEX,
    CONVENTIONAL_PREFIX_REGEX,
    NUMBERED_REGEX,
)
from ..models import CommitStyle


class BodyFormatter:
    """Cleans up bullet markup and stray type prefixes in a body."""

    def __init__(self, style: Union[CommitStyle, str] = CommitStyle.CONVENTIONAL):
        self.style = CommitStyle(style)

    def format_body(self, body: str) -> str:
        if not body or not body.strip():
            return ""

        lines = [line.strip() for line in body.split("\n") if line.strip()]
        return "\n".join(self.process_lines(lines))

    def process_lines(self, lines: List[str]) -> List[str]:
        return [self._process_line(line) for line in lines]

    def _process_line(self, line: str) -> str:
        conventional = self.style == CommitStyle.CONVENTIONAL

        if conventional:
            line = CONVENTIONAL_PREFIX_REGEX.sub("", line, count=1)

        line = BULLET_REGEX.sub("- ", line, count=1)
        line = NUMBERED_REGEX.sub("- ", line, count=1)

        if (
            conventional
            and line
            and not line.startswith("-")
            and not line.startswith(" ")
            and any(word in line for word in BODY_ACTION_SUBSTRINGS)
        ):
            line = f"- {line}"

        return line
