"""Git operation commands using the Command Pattern.

Example:
    ```python
    from aicommit.commands import CommitCommand
    from aicommit.observers import FileLogObserver

    commit_cmd = CommitCommand(repo, "feat: add parser")
    commit_cmd.add_observer(FileLogObserver("ai-commit.log"))
    success = await commit_cmd.execute()
    ```
"""

from .base import GitCommand
from .commit import CommitCommand

__all__ = [
    "GitCommand",
    "CommitCommand",
]
