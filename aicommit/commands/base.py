"""Base command class for git operations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from git import Repo
from rich.console import Console

from ..observers import GitOperationObserver


class GitCommand(ABC):
    """Abstract base class for git commands.

    Provides observer management; concrete commands implement execute().

    Attributes:
        repo (Repo): The git repository to operate on
        console (Console): Rich console for output
        observers (List[GitOperationObserver]): List of observers to notify
    """

    def __init__(self, repo: Repo, console: Optional[Console] = None):
        self.repo = repo
        self.console = console or Console()
        self.observers: List[GitOperationObserver] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        self.observers.remove(observer)

    @abstractmethod
    async def execute(self) -> bool:
        """Execute the git command.

        Returns:
            bool: True if the command was executed successfully, False otherwise
        """
        pass
