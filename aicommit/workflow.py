"""End-to-end commit workflow: diff, message, confirmation, commit."""
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from .commit_message import CommitMessageProcessor
from .config import Config
from .core import GitRepository
from .exceptions import AICommitError, GitError
from .factories import StrategyCache, generate_commit_message
from .models import CommitOptions, CommitResult
from .observers import ConsoleLogObserver, FileLogObserver, GitOperationObserver
from .ui import ACTION_CANCEL, UserInterface

CANCELLED_BY_USER = "Cancelled by user"
CANCELLED_BY_WARNINGS = "Commit cancelled due to validation warnings"


class CommitWorkflow:
    """Runs one commit attempt against a repository.

    Expected failures (git, provider, formatting) are reported through the
    returned ``CommitResult``; cancellations are unsuccessful results without
    an error.
    """

    def __init__(
        self,
        repo_path: Union[str, Path] = ".",
        console: Optional[Console] = None,
        ui: Optional[UserInterface] = None,
        cache: Optional[StrategyCache] = None,
    ):
        self.console = console or Console()
        self.ui = ui or UserInterface(self.console)
        self.repository = GitRepository(repo_path, self.console)
        self.cache = cache if cache is not None else StrategyCache()
        self.observers: List[GitOperationObserver] = [ConsoleLogObserver(self.console)]

    def add_observer(self, observer: GitOperationObserver) -> None:
        self.observers.append(observer)

    async def execute(self, options: CommitOptions, config: Config) -> CommitResult:
        try:
            self._attach_observers(config)
            self._validate_repository()
            staged_changes = self._get_staged_changes()

            processor = CommitMessageProcessor(config.commit_style)
            commit_message = await self._get_commit_message(options, staged_changes, config, processor)
            for observer in self.observers:
                await observer.on_message_generated(commit_message)

            self.ui.display_commit_message(commit_message)

            if self._should_confirm(options, config):
                action, edited = self.ui.prompt_user_action(commit_message)
                if action == ACTION_CANCEL:
                    self.ui.show_warning("Commit cancelled.")
                    return CommitResult(success=False, message=CANCELLED_BY_USER)
                if edited:
                    commit_message = edited

            validation = processor.validate(commit_message)
            if not validation.valid and not self.ui.confirm_validation_warnings(validation.errors):
                self.ui.show_warning(CANCELLED_BY_WARNINGS)
                return CommitResult(success=False, message=CANCELLED_BY_WARNINGS)

            with self.ui.spinner("Creating commit..."):
                await self.repository.commit(commit_message, no_verify=options.no_verify)
            self.ui.show_success("Your changes have been committed!")
            return CommitResult(success=True, message="Commit created successfully!")
        except AICommitError as e:
            return CommitResult(success=False, error=str(e))

    def _attach_observers(self, config: Config) -> None:
        log_file = config.get_log_file()
        if log_file and not any(isinstance(o, FileLogObserver) for o in self.observers):
            self.observers.append(FileLogObserver(log_file))
        self.repository.observers = list(self.observers)

    def _validate_repository(self) -> None:
        if not self.repository.is_repository():
            raise GitError("Not a git repository. Please run this command from within a git repository.")

    def _get_staged_changes(self) -> str:
        with self.ui.spinner("Checking staged changes..."):
            staged_changes = self.repository.get_staged_diff()
        if not staged_changes.strip():
            raise GitError("No staged changes found. Please stage some files first.")
        self.ui.show_info("Staged changes found")
        return staged_changes

    async def _get_commit_message(
        self,
        options: CommitOptions,
        staged_changes: str,
        config: Config,
        processor: CommitMessageProcessor,
    ) -> str:
        if options.message:
            return processor.format(options.message)

        repo_info = self.repository.get_repo_info() if config.include_context else None
        with self.ui.spinner("Generating commit message..."):
            raw_message = await generate_commit_message(staged_changes, config, self.cache, repo_info)
        return processor.format(raw_message)

    def _should_confirm(self, options: CommitOptions, config: Config) -> bool:
        return options.confirm and not config.auto_commit
