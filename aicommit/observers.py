"""Observer pattern for commit message and git events."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from rich.console import Console


class GitOperationObserver(ABC):
    """Abstract base class for commit workflow observers."""

    @abstractmethod
    async def on_message_generated(self, message: str) -> None:
        """Called when a commit message has been produced and formatted."""
        pass

    @abstractmethod
    async def on_commit_created(self, message: str) -> None:
        """Called when a commit is created."""
        pass


class ConsoleLogObserver(GitOperationObserver):
    """Observer that logs workflow events to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    async def on_message_generated(self, message: str) -> None:
        self.console.print(f"[dim]Generated message: {message.splitlines()[0]}[/dim]")

    async def on_commit_created(self, message: str) -> None:
        self.console.print(f"[green]Created commit: {message.splitlines()[0]}[/green]")


class FileLogObserver(GitOperationObserver):
    """Observer that appends workflow events to a log file."""

    def __init__(self, log_file: Union[str, Path]):
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    async def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    async def on_message_generated(self, message: str) -> None:
        await self._log(f"Generated message: {message.splitlines()[0]}")

    async def on_commit_created(self, message: str) -> None:
        await self._log(f"Created commit: {message.splitlines()[0]}")
