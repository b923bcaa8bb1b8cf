"""Cleanup of raw model output before it is formatted."""
import re
from typing import List

from ..exceptions import EmptyInputError

_CODE_BLOCK = re.compile(r"```[\s\S]*?```")
_INLINE_CODE = re.compile(r"`([^`]+)`")
_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")


class MessageSanitizer:
    """Strips markdown artifacts and splits text into lines."""

    def sanitize(self, message: str) -> str:
        """Trim the message and remove markdown formatting added by an AI.

        Raises:
            EmptyInputError: If the message is missing or only whitespace.
        """
        if not isinstance(message, str) or not message.strip():
            raise EmptyInputError()

        return self._remove_markdown_formatting(message.strip())

    def parse_lines(self, message: str) -> List[str]:
        """Split into trimmed, non-empty lines."""
        return [line.strip() for line in message.split("\n") if line.strip()]

    def _remove_markdown_formatting(self, text: str) -> str:
        # Fenced blocks first so asterisks inside code are never paired up
        text = _CODE_BLOCK.sub("", text)
        text = _INLINE_CODE.sub(r"\1", text)
        text = _BOLD.sub(r"\1", text)
        return _ITALIC.sub(r"\1", text)
