"""Terminal interaction for the commit workflow."""
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

SEPARATOR_LENGTH = 50
MIN_EDITED_LENGTH = 3

ACTION_COMMIT = "commit"
ACTION_EDIT = "edit"
ACTION_CANCEL = "cancel"


class UserInterface:
    """Displays proposed messages and collects the user's decisions."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display_commit_message(self, commit_message: str) -> None:
        self.console.print("\n[cyan]Proposed commit message:[/cyan]")
        self.console.print("─" * SEPARATOR_LENGTH)
        self.console.print(commit_message, markup=False, highlight=False)
        self.console.print("─" * SEPARATOR_LENGTH)

    def prompt_user_action(self, commit_message: str) -> Tuple[str, Optional[str]]:
        """Ask whether to commit, edit or cancel.

        Returns:
            The chosen action and, after an edit, the edited message. Editing
            resolves to a commit of the edited text.
        """
        action = click.prompt(
            "What would you like to do?",
            type=click.Choice([ACTION_COMMIT, ACTION_EDIT, ACTION_CANCEL]),
            default=ACTION_COMMIT,
        )
        if action == ACTION_EDIT:
            return ACTION_COMMIT, self.edit_commit_message(commit_message)
        return action, None

    def edit_commit_message(self, default_message: str) -> str:
        """Open the user's editor until a usable message comes back."""
        while True:
            edited = click.edit(default_message, extension=".txt")
            if edited is None:
                # Editor closed without saving
                return default_message
            edited = edited.strip()
            if not edited:
                self.show_warning("Commit message cannot be empty")
            elif len(edited) < MIN_EDITED_LENGTH:
                self.show_warning(f"Commit message must be at least {MIN_EDITED_LENGTH} characters long")
            else:
                return edited
            default_message = edited or default_message

    def confirm_validation_warnings(self, errors: List[str]) -> bool:
        self.console.print("[yellow]Commit message validation warnings:[/yellow]")
        for error in errors:
            self.console.print(f"[yellow]  • {error}[/yellow]")
        return click.confirm("Continue with commit despite validation warnings?", default=True)

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/green]")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def show_warning(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")

    def show_info(self, message: str) -> None:
        self.console.print(f"[cyan]{message}[/cyan]")

    @contextmanager
    def spinner(self, description: str) -> Iterator[None]:
        """Show a spinner while the block runs."""
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            progress.add_task(description, total=None)
            yield
