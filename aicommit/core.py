"""Git repository access for ai-commit."""
from pathlib import Path
from typing import List, Optional, Union

from git import InvalidGitRepositoryError, NoSuchPathError, Repo
from rich.console import Console

from .commands import CommitCommand, GitCommand
from .exceptions import GitError
from .models import RepoInfo
from .observers import GitOperationObserver


class GitRepository:
    """Wraps the repository the commit is created in.

    Opening a path outside a repository does not fail; callers check
    ``is_repository()`` first and every other method raises ``GitError``.
    """

    def __init__(self, path: Union[str, Path] = ".", console: Optional[Console] = None):
        self.path = Path(path)
        self.console = console or Console()
        self.observers: List[GitOperationObserver] = []
        try:
            self.repo: Optional[Repo] = Repo(str(self.path), search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            self.repo = None

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of git operations."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        self.observers.remove(observer)

    def is_repository(self) -> bool:
        return self.repo is not None and not self.repo.bare

    def _require_repo(self) -> Repo:
        if not self.is_repository():
            raise GitError("Not a git repository")
        return self.repo

    def get_staged_diff(self) -> str:
        """Return the diff of the staged changes, or an empty string."""
        repo = self._require_repo()
        try:
            return repo.git.diff("--staged")
        except Exception as e:
            raise GitError(f"Failed to read staged changes: {e}") from e

    def get_repo_info(self) -> RepoInfo:
        repo = self._require_repo()
        name = Path(repo.working_tree_dir).name
        try:
            branch = repo.active_branch.name
        except TypeError:
            # Detached HEAD
            branch = "HEAD"
        return RepoInfo(name=name, branch=branch)

    async def execute_command(self, command: GitCommand) -> bool:
        """Execute a git command with this repository's observers attached."""
        for observer in self.observers:
            command.add_observer(observer)
        return await command.execute()

    async def commit(self, message: str, no_verify: bool = False) -> str:
        """Commit the staged changes.

        Returns:
            The hash of the new commit.

        Raises:
            GitError: If nothing is staged or git rejects the commit.
        """
        repo = self._require_repo()
        command = CommitCommand(repo, message, self.console, no_verify=no_verify)
        if not await self.execute_command(command):
            raise GitError(f"Commit failed: {command.error or 'unknown error'}")
        return command.commit_hash
