"""Command for creating git commits."""

import os
import tempfile
from typing import Optional

from git import GitCommandError, Repo
from rich.console import Console

from .base import GitCommand


class CommitCommand(GitCommand):
    """Command for committing the currently staged changes.

    Attributes:
        message (str): The full commit message
        commit_hash (Optional[str]): The hash of the created commit
        error (Optional[str]): Why the last execution failed, if it did
    """

    def __init__(
        self,
        repo: Repo,
        message: str,
        console: Optional[Console] = None,
        no_verify: bool = False,
    ):
        """Initialize the commit command.

        Args:
            repo: The git repository to operate on
            message: The commit message to record
            console: Optional Rich console for output
            no_verify: Skip pre-commit hooks when creating commits
        """
        super().__init__(repo, console)
        self.message = message
        self.commit_hash: Optional[str] = None
        self.error: Optional[str] = None
        self.no_verify = no_verify

    def has_staged_changes(self) -> bool:
        if not self.repo.head.is_valid():
            # No commits yet: anything in the index is staged
            return len(self.repo.index.entries) > 0
        return bool(self.repo.index.diff("HEAD"))

    async def execute(self) -> bool:
        """Commit the staged changes with the configured message.

        Returns:
            bool: True if the commit was created, False otherwise
        """
        if not self.has_staged_changes():
            self.error = "No staged changes to commit"
            self.console.print(f"[yellow]{self.error}[/yellow]")
            return False

        # Multi-line messages go through a file so git keeps them verbatim
        with tempfile.NamedTemporaryFile(
            mode="w", delete=False, suffix=".commitmsg", encoding="utf-8"
        ) as f:
            f.write(self.message)
            temp_file = f.name

        try:
            args = ["-F", temp_file]
            if self.no_verify:
                args.append("--no-verify")
            self.repo.git.commit(*args)
            self.commit_hash = self.repo.head.commit.hexsha
        except GitCommandError as e:
            self.error = (e.stderr or str(e)).strip()
            self.console.print(f"[red]Failed to create commit: {self.error}[/red]")
            return False
        finally:
            try:
                os.unlink(temp_file)
            except OSError:
                pass

        for observer in self.observers:
            await observer.on_commit_created(self.message)

        return True
